from __future__ import annotations
from typing import Callable

from tictactoe.config import SEPARATOR, SIZE
from tictactoe.core.board import Board, symbol

Printer = Callable[[str], object]

BANNER_LINES = [
    "Tic Tac Toe",
    SEPARATOR,
    "Board cells are laid out like so:",
    "- - -\t0 1 2",
    "- - -\t3 4 5",
    "- - -\t6 7 8",
    "Player enters cell number to play their turn.",
    SEPARATOR,
]


def banner() -> str:
    return "\n".join(BANNER_LINES)


def print_banner(out: Printer = print) -> None:
    out(banner())


def format_board(board: Board) -> str:
    rows = []
    for r in range(SIZE):
        row = board.cells[r * SIZE:(r + 1) * SIZE]
        rows.append(" ".join(symbol(cell) for cell in row))
    rows.append(SEPARATOR)
    return "\n".join(rows)


def render(board: Board, out: Printer = print) -> None:
    out(format_board(board))
