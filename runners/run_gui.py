# runners/run_gui.py
from __future__ import annotations
import logging
import time
from typing import Optional
from config import AppConfig
from core.game import Game
from core.interfaces import Snapshot
from runners.commands import apply_commands
from viz.keyboard import Keyboard
from viz.renderer_pygame import PygameRenderer

logger = logging.getLogger(__name__)


def main(cfg: AppConfig, game: Optional[Game] = None, max_frames: Optional[int] = None) -> Snapshot:
    """
    Windowed play. Input is polled every frame; the snake advances once per
    cfg.tick_seconds while the game is running.
    """
    if game is None:
        game = Game.from_config(cfg)
    if game.apples.is_empty():
        game.spawn_apple()

    rend = PygameRenderer()
    rend.open(cfg)
    kbd = Keyboard()
    logger.info("Window %dx%d px, board %dx%d", *rend.window_size(), cfg.grid_w, cfg.grid_h)

    last_advance = time.perf_counter()
    frames = 0
    try:
        while max_frames is None or frames < max_frames:
            if not apply_commands(game, kbd.poll()):
                break
            now = time.perf_counter()
            if now - last_advance >= cfg.tick_seconds and not game.over:
                game.step()
                last_advance = now
            rend.draw(game.snapshot())
            rend.tick(cfg.fps)
            frames += 1
    finally:
        rend.close()
    return game.snapshot()
