from __future__ import annotations
import logging
from typing import Optional

from tictactoe.core.rules import check_win, is_draw
from tictactoe.game.state import GameState
from tictactoe.types import Mark, PlayerNumber

logger = logging.getLogger(__name__)


def mark_for(player: PlayerNumber) -> Mark:
    return "X" if player == 1 else "O"


def other(player: PlayerNumber) -> PlayerNumber:
    return 2 if player == 1 else 1


def apply_move(state: GameState, index: int) -> Optional[Mark]:
    """
    Play the current player's mark on `index` and settle the turn.

    On a win or a full board the game stops (`running` goes False) and the
    turn does not pass. Otherwise the other player is up next.
    Board errors (CellOccupied / MoveOutOfRange) propagate with the state untouched.
    """
    mark = mark_for(state.current)
    state.board.play(index, mark)
    logger.debug("Player %s played %s on %s -> %s",
                 state.current, mark, index, state.board.debug_string())

    winner = check_win(state.board, index)
    if winner is not None:
        state.winner = winner
        state.running = False
        return winner

    if is_draw(state.board):
        state.draw = True
        state.running = False
        return None

    state.current = other(state.current)
    return None
