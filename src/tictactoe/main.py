from __future__ import annotations

import logging

from tictactoe.config import LOG_LEVEL
from tictactoe.game.controller import run_game

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    try:
        run_game()
    except (EOFError, KeyboardInterrupt):
        # No quit command in the game itself; closing input ends it.
        print()
        logger.info("Input closed, leaving the game.")


if __name__ == "__main__":
    main()
