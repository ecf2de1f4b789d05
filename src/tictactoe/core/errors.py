from __future__ import annotations


class TicTacToeError(Exception):
    """Base class for every recoverable game error."""


class MoveError(TicTacToeError, ValueError):
    pass


class CellOccupied(MoveError):
    pass


class MoveOutOfRange(MoveError):
    pass


class InputError(TicTacToeError, ValueError):
    pass


class NotANumber(InputError):
    pass


class InputOutOfRange(InputError):
    pass
