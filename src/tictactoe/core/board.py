# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from tictactoe.config import CELLS, EMPTY_SYMBOL
from tictactoe.core.errors import CellOccupied, MoveOutOfRange
from tictactoe.types import Cell, Mark


def symbol(cell: Cell) -> str:
    return EMPTY_SYMBOL if cell is None else cell


@dataclass(slots=True)
class Board:
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [None] * CELLS
        if len(self.cells) != CELLS:
            raise ValueError(f"Board needs exactly {CELLS} cells.")

    def copy(self) -> "Board":
        return Board(self.cells[:])

    def check_index(self, index: int) -> int:
        i = int(index)
        # Negative indices would wrap around the list, so reject them here.
        if i < 0 or i >= CELLS:
            raise MoveOutOfRange(f"Cell {i} is out of range.")
        return i

    def cell_state(self, index: int) -> Cell:
        return self.cells[self.check_index(index)]

    def empty_cells(self) -> List[int]:
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def play(self, index: int, mark: Mark) -> None:
        """
        Mark one empty cell.
        Raises MoveOutOfRange / CellOccupied and leaves the board untouched on failure.
        """
        i = self.check_index(index)
        if self.cells[i] is not None:
            raise CellOccupied(f"Cell {i} is already marked {self.cells[i]}.")
        self.cells[i] = mark

    def debug_string(self) -> str:
        return ",".join(symbol(cell) for cell in self.cells)
