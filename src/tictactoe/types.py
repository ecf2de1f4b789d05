# src/tictactoe/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType

Mark = Literal["X", "O"]
Cell = Optional[Mark]          # None = empty
PlayerNumber = Literal[1, 2]
CellIndex = NewType("CellIndex", int)   # 0..8
