# runners/commands.py
from __future__ import annotations
import logging
from typing import Iterable
from core.direction import Direction
from core.game import Game

logger = logging.getLogger(__name__)


def apply_commands(game: Game, cmds: Iterable) -> bool:
    """Feed input into the game in arrival order. Returns False once "quit" is seen."""
    for cmd in cmds:
        if cmd == "quit":
            return False
        if cmd == "reset":
            game.reset()
        elif isinstance(cmd, Direction):
            game.steer(cmd)
        else:
            logger.debug("Unknown command %r", cmd)
    return True
