from __future__ import annotations

from tictactoe.config import CELLS, OUT_OF_RANGE_MSG
from tictactoe.core.errors import InputOutOfRange, NotANumber
from tictactoe.types import CellIndex


def read_move(raw: str) -> CellIndex:
    s = raw.strip()
    try:
        value = int(s)
    except ValueError as e:
        raise NotANumber(str(e)) from e

    # int() also accepts signs and underscores; a cell number is plain digits.
    if not s.isdigit():
        raise NotANumber(f"invalid digit found in {s!r}")

    if value >= CELLS:
        raise InputOutOfRange(OUT_OF_RANGE_MSG)
    return CellIndex(value)
