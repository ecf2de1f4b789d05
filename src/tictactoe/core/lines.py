# src/tictactoe/core/lines.py

from __future__ import annotations
from typing import Dict, List, Tuple

from tictactoe.config import CELLS

Line = Tuple[int, int, int]

# Winning lines (rows, columns, diagonals)
WIN_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


def lines_through(index: int) -> List[Line]:
    return [line for line in WIN_LINES if index in line]


LINES_THROUGH: Dict[int, Tuple[Line, ...]] = {
    i: tuple(lines_through(i)) for i in range(CELLS)
}
