from __future__ import annotations

import os

# Board (cells). Fixed for the session.
GRID_WIDTH = 40
GRID_HEIGHT = 20

TICK_SECONDS = 0.150
POLL_SECONDS = 0.020

FOOD_REWARD = 10

BORDER = "#"
HEAD = "O"
BODY = "o"
FOOD = "F"
EMPTY = " "

KEY_LEFT = "a"
KEY_RIGHT = "d"
KEY_UP = "w"
KEY_DOWN = "s"
KEY_QUIT = "x"

HINT = f"Use {KEY_UP}/{KEY_LEFT}/{KEY_DOWN}/{KEY_RIGHT} to move. Press '{KEY_QUIT}' to quit."

# The terminal is the game screen, so logs only go to a file when asked for.
LOG_FILE = os.environ.get("TERMSNAKE_LOG_FILE")
LOG_LEVEL = os.environ.get("TERMSNAKE_LOG_LEVEL", "INFO").upper()
