from __future__ import annotations
import logging
from typing import Callable, Optional

from tictactoe.config import CELL_USED_MSG, DRAW_MSG
from tictactoe.core.errors import MoveError
from tictactoe.game.actions import apply_move
from tictactoe.game.state import GameState
from tictactoe.types import CellIndex
from tictactoe.ui.prompts import read_move
from tictactoe.ui.render import Printer, print_banner, render

logger = logging.getLogger(__name__)

LineReader = Callable[[], str]


def user_input(state: GameState, read_line: LineReader, out: Printer) -> Optional[CellIndex]:
    out(f"Player {state.current}'s turn:")
    raw = read_line()
    try:
        index = read_move(raw)
    except ValueError as e:
        # Same player goes again; nothing on the board changed.
        logger.debug("Rejected input %r from player %s: %s", raw, state.current, e)
        state.last_status = str(e)
        out(state.last_status)
        return None

    state.pending_choice = index
    return index


def game_logic(state: GameState, index: CellIndex, out: Printer) -> bool:
    """Returns True if the move was applied."""
    try:
        winner = apply_move(state, index)
    except MoveError as e:
        logger.debug("Rejected move by player %s: %s", state.current, e)
        state.last_status = CELL_USED_MSG
        out(state.last_status)
        return False

    if winner is not None:
        state.last_status = f"{winner} wins!"
        out(state.last_status)
        logger.info("Game over: %s wins", winner)
    elif state.draw:
        state.last_status = DRAW_MSG
        out(state.last_status)
        logger.info("Game over: draw")
    else:
        state.last_status = f"Player {state.current}'s turn."
    return True


def run_game(read_line: Optional[LineReader] = None, out: Printer = print) -> GameState:
    if read_line is None:
        read_line = input

    state = GameState()
    print_banner(out)

    while state.running:
        index = user_input(state, read_line, out)
        if index is None:
            continue
        if game_logic(state, index, out):
            render(state.board, out)

    return state
