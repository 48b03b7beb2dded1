"""
Screen stack.

The active screen is the top of the stack. Screens are plain objects that
may define any of ``enter``, ``leave``, ``update``, ``draw``, ``key_down``
and ``key_up``; a hook that is not defined is simply skipped.
"""

from __future__ import annotations

from typing import Any

from mini_arcade_core.utils import logger


def call_hook(screen: Any, hook: str, *args: Any) -> bool:
    """
    Call ``screen.<hook>(*args)`` if the screen defines it.

    :return: Whether the hook existed
    :rtype: bool
    """
    handler = getattr(screen, hook, None)
    if handler is None:
        return False
    handler(*args)
    return True


def screen_name(screen: Any) -> str:
    return type(screen).__name__ if screen is not None else "None"


class StateStack:
    """
    Ordered screens; the last one pushed is active.

    Hooks receive ``owner`` (normally the game driver) as first argument.
    """

    def __init__(self, owner: Any = None):
        self._owner = owner
        self._stack: list[Any] = []

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def current_state(self) -> Any | None:
        return self._stack[-1] if self._stack else None

    def move_to_state(self, screen: Any) -> None:
        """
        Replace the active screen with ``screen``.

        :param screen: The screen to activate
        """
        previous = self.current_state()
        if previous is not None:
            call_hook(previous, "leave", self._owner)
            self._stack.pop()

        call_hook(screen, "enter", self._owner)
        self._stack.append(screen)

        logger.debug(
            f"Moved from {screen_name(previous)} to {screen_name(screen)}"
        )

    def push_state(self, screen: Any) -> None:
        """Layer ``screen`` over the active one."""
        call_hook(screen, "enter", self._owner)
        self._stack.append(screen)
        logger.debug(f"Pushed {screen_name(screen)} (depth {self.depth})")

    def pop_state(self) -> None:
        """Leave and remove the active screen, if any."""
        current = self.current_state()
        if current is None:
            return
        call_hook(current, "leave", self._owner)
        self._stack.pop()
        logger.debug(f"Popped {screen_name(current)} (depth {self.depth})")
