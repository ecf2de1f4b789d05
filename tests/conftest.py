from __future__ import annotations

from typing import Callable, Iterable, List, Tuple

import pytest

from tictactoe.core.board import Board


def board_from(layout: str) -> Board:
    """Build a board from 9 symbols, e.g. "XO-X-----"."""
    assert len(layout) == 9
    return Board([None if ch == "-" else ch for ch in layout])


@pytest.fixture
def scripted() -> Callable[[Iterable[str]], Tuple[Callable[[], str], Callable[[str], None], List[str]]]:
    """Line reader fed from a list plus a printer that records every line written."""

    def make(lines: Iterable[str]):
        feed = iter(lines)
        written: List[str] = []

        def read_line() -> str:
            try:
                return next(feed)
            except StopIteration:
                raise EOFError("script exhausted") from None

        def out(text: str) -> None:
            written.extend(str(text).split("\n"))

        return read_line, out, written

    return make
