# src/tictactoe/config.py

from __future__ import annotations

import logging

SIZE = 3
CELLS = SIZE * SIZE

# Console symbols
EMPTY_SYMBOL = "-"
SEPARATOR = "-" * 17

# Fixed messages
CELL_USED_MSG = "Cell already used. Try another cell."
OUT_OF_RANGE_MSG = f"Cell must be between 0 and {CELLS - 1}."
DRAW_MSG = "Draw game."

# Game output goes to stdout; logs go to stderr at this level
LOG_LEVEL = logging.WARNING
