# runners/run_text.py
from __future__ import annotations
import logging
from typing import Optional, TextIO
from config import AppConfig
from core.game import Game
from core.interfaces import Snapshot
from runners.commands import apply_commands
from viz.keyboard import StdinKeyboard
from viz.render_iface import Renderer
from viz.renderer_text import TextRenderer

logger = logging.getLogger(__name__)


def main(
    cfg: AppConfig,
    game: Optional[Game] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    max_ticks: Optional[int] = None,
) -> Snapshot:
    """
    Terminal play: type w/a/s/d (or h/j/k/l) and Enter to steer, q to quit.
    Ends when the snake dies or input closes.
    """
    if game is None:
        game = Game.from_config(cfg)
    if game.apples.is_empty():
        game.spawn_apple()

    rend: Renderer = TextRenderer(stream=stdout)
    rend.open(cfg)
    kbd = StdinKeyboard(stdin)
    kbd.start()

    rend.draw(game.snapshot())
    ticks = 0
    try:
        while not game.over and (max_ticks is None or ticks < max_ticks):
            rend.tick(1.0 / cfg.text_tick_seconds)
            if not apply_commands(game, kbd.poll()):
                logger.info("Quit after %d ticks", game.ticks)
                break
            rend.draw(game.step())
            ticks += 1
    finally:
        rend.close()
    return game.snapshot()
