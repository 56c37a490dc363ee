# viz/renderer_text.py
from __future__ import annotations
import sys
import time
from typing import Optional, TextIO
import numpy as np
from config import AppConfig
from core.direction import HEAD_GLYPHS, body_glyph, direction_between, head_direction, tail_glyph
from core.interfaces import Snapshot

APPLE_GLYPH = "O"
EMPTY = " "


def _paint(grid: np.ndarray, snap: Snapshot, pos, glyph: str) -> None:
    # a dead head may sit outside the board
    if snap.in_bounds(pos):
        grid[pos] = glyph


def render_grid(snap: Snapshot) -> np.ndarray:
    """(grid_h, grid_w) array of single characters: apples first, then the snake on top."""
    grid = np.full((snap.grid_h, snap.grid_w), EMPTY, dtype="<U1")
    for pos in snap.apples:
        _paint(grid, snap, pos, APPLE_GLYPH)

    body = snap.snake
    if len(body) == 1:
        _paint(grid, snap, body[0], HEAD_GLYPHS[snap.direction])
        return grid

    _paint(grid, snap, body[0], HEAD_GLYPHS[head_direction(body)])
    for ahead, seg, behind in zip(body, body[1:], body[2:]):
        glyph = body_glyph(direction_between(ahead, seg), direction_between(seg, behind))
        _paint(grid, snap, seg, glyph)
    _paint(grid, snap, body[-1], tail_glyph(direction_between(body[-2], body[-1])))
    return grid


def render_to_string(snap: Snapshot) -> str:
    return "".join("".join(row) + "\n" for row in render_grid(snap))


def status_line(snap: Snapshot) -> str:
    line = f"Score: {snap.score}"
    if snap.over:
        line += f"   GAME OVER ({snap.reason})"
    return line


def frame(snap: Snapshot) -> str:
    edge = "-" * (snap.grid_w + 2)
    rows = ["|" + "".join(row) + "|" for row in render_grid(snap)]
    return "\n".join([edge, *rows, edge, status_line(snap)])


class TextRenderer:
    """Prints each frame to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None, clear: bool = False):
        self.stream = stream
        self.clear = clear
        self.cfg: Optional[AppConfig] = None
        self._frames = 0

    def open(self, cfg: AppConfig) -> None:
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        if self.stream is None:
            self.stream = sys.stdout
        self._frames = 0

    def draw(self, snap: Snapshot) -> None:
        assert self.stream is not None, "Renderer not opened"
        if self.clear:
            self.stream.write("\x1b[2J\x1b[H")
        self.stream.write(frame(snap) + "\n")
        self.stream.flush()
        self._frames += 1

    def tick(self, fps: float) -> None:
        if fps > 0:
            time.sleep(1.0 / fps)

    def close(self) -> None:
        if self.stream is not None:
            self.stream.flush()

    def save_frame(self, snap: Snapshot) -> None:
        # frames are already on the stream
        pass

    @property
    def frames_drawn(self) -> int:
        return self._frames
