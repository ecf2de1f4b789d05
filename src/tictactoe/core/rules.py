from __future__ import annotations
from typing import Iterable, Optional, Tuple

from tictactoe.core.board import Board
from tictactoe.core.lines import LINES_THROUGH, WIN_LINES, Line
from tictactoe.types import Mark


def _winner_on(board: Board, lines: Iterable[Line]) -> Optional[Tuple[Mark, Line]]:
    x_line: Optional[Line] = None
    o_line: Optional[Line] = None

    for line in lines:
        cells = [board.cells[i] for i in line]
        if x_line is None and cells.count("X") == 3:
            x_line = line
        if o_line is None and cells.count("O") == 3:
            o_line = line

    # X is reported before O if both somehow hold.
    if x_line is not None:
        return "X", x_line
    if o_line is not None:
        return "O", o_line
    return None


def check_win(board: Board, index: int) -> Optional[Mark]:
    """Winner among the lines through the cell that was just played."""
    res = _winner_on(board, LINES_THROUGH[board.check_index(index)])
    return res[0] if res else None


def check_winner_with_line(board: Board) -> Optional[Tuple[Mark, Line]]:
    return _winner_on(board, WIN_LINES)


def check_winner(board: Board) -> Optional[Mark]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None
