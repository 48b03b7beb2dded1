"""
Command line for the desktop game.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from invaders_core.app import run
from invaders_core.config import Config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Space Invaders")
    parser.add_argument(
        "--config",
        type=Path,
        help="JSON file with config overrides, keyed by field name",
    )
    parser.add_argument(
        "--query",
        default="",
        help="URL-style query string, e.g. 'debug=true'",
    )
    parser.add_argument("--debug", action="store_true", help="Draw debug bounds")
    parser.add_argument("--no-audio", action="store_true", help="Disable sound")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """
    Turn parsed arguments into a ``Config``.

    :raise ConfigError: If the config file holds invalid values
    """
    data = json.loads(args.config.read_text()) if args.config else {}
    config = Config.from_dict(data).with_query(args.query)
    if args.debug:
        config = config.with_changes(debug_mode=True)
    return config


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    run(build_config(args), audio=not args.no_audio)
