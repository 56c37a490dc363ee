# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def small_cfg():
    from config import AppConfig
    return AppConfig(
        grid_w=5, grid_h=5, seed=7,
        start_body=((2, 2), (2, 3), (2, 4)), start_apples=(),
        render_cell=20, render_margin=10,
        render_grid_lines=False, render_show_hud=False,
    )

@pytest.fixture
def game_factory():
    from core.game import Game
    def make(width=5, height=5, body=((2, 2), (2, 3), (2, 4)), seed=7, **kwargs):
        return Game(width, height, list(body), seed=seed, **kwargs)
    return make

@pytest.fixture
def screen(small_cfg):
    # Plain Surface is fine for draw tests (no need for display mode)
    w = small_cfg.grid_w * small_cfg.render_cell + 2 * small_cfg.render_margin
    h = small_cfg.grid_h * small_cfg.render_cell + 2 * small_cfg.render_margin
    return pg.Surface((w, h))
