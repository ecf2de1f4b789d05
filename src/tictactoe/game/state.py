from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from tictactoe.core.board import Board
from tictactoe.types import CellIndex, Mark, PlayerNumber


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    running: bool = True
    current: PlayerNumber = 1
    pending_choice: Optional[CellIndex] = None
    last_status: str = "Player 1 starts."
    winner: Optional[Mark] = None
    draw: bool = False
