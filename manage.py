"""
This is the main file to run the game.
"""

from invaders_core.cli import main

if __name__ == "__main__":
    main()
