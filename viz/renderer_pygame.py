# viz/renderer_pygame.py
from __future__ import annotations
import math
import os
from typing import List, Optional, Tuple, Union
import pygame as pg
from config import AppConfig
from core.direction import Direction, Pos, head_direction
from core.interfaces import Snapshot
import viz.renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]
Point = Tuple[float, float]

HEAD_ROTATION = {
    Direction.UP: 3 * math.pi / 2,
    Direction.RIGHT: 0.0,
    Direction.DOWN: math.pi / 2,
    Direction.LEFT: math.pi,
}


def _rotate(points: List[Point], angle: float, about: Point) -> List[Point]:
    cx, cy = about
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return [
        (cx + (x - cx) * cos_a - (y - cy) * sin_a, cy + (x - cx) * sin_a + (y - cy) * cos_a)
        for x, y in points
    ]


class PygameRenderer:
    def __init__(self):
        self.cell = 27
        self.margin = 30
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._grid_w = 0
        self._grid_h = 0
        self._frame_idx = 0
        self._font: Optional[pg.font.Font] = None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self._configure(cfg)

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode(self.window_size())
        self.clock = pg.time.Clock()
        self._auto_flip = True
        self._frame_idx = 0

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw into a caller-owned surface; no window, no flipping, no clock."""
        if not pg.get_init():
            pg.init()
        self._configure(cfg)
        self.surf = surface
        self.clock = None
        self._auto_flip = False

    def window_size(self) -> Tuple[int, int]:
        return (self._grid_w * self.cell + 2 * self.margin,
                self._grid_h * self.cell + 2 * self.margin)

    def cell_origin(self, pos: Pos) -> Point:
        """Top-left pixel of a (row, col) cell."""
        row, col = pos
        return (self.margin + col * self.cell, self.margin + row * self.cell)

    def cell_center(self, pos: Pos) -> Point:
        x, y = self.cell_origin(pos)
        return (x + self.cell / 2, y + self.cell / 2)

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf

        surf.fill(theme.BG)
        self._draw_body(s)
        self._draw_head(s)
        self._draw_apples(s)
        self._draw_border()
        if self.cfg.render_grid_lines:
            self._draw_mesh()
        if self.cfg.render_show_hud:
            self._draw_hud(s)

        if self._auto_flip:
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self._font = None

    def save_frame(self, s: Snapshot) -> None:
        assert self.cfg is not None, "Renderer config not set (call open first)"
        if not self.cfg.render_record_dir or self.surf is None:
            return
        self._save_surface_frame()

    # internals
    def _configure(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self._grid_w, self._grid_h = cfg.grid_w, cfg.grid_h
        self.cell = cfg.render_cell
        self.margin = cfg.render_margin

    def _draw_body(self, s: Snapshot) -> None:
        if len(s.snake) < 2:
            return
        points = [self.cell_center(p) for p in s.snake]
        pg.draw.lines(self.surf, theme.SNAKE, False, points, max(1, self.cell // 4))

    def _draw_head(self, s: Snapshot) -> None:
        c = self.cell
        x0, y0 = self.cell_origin(s.head)
        heading = head_direction(s.snake) if len(s.snake) > 1 else s.direction
        angle = HEAD_ROTATION[heading]
        center = (x0 + c / 2, y0 + c / 2)

        # drawn pointing right, then rotated about the cell centre
        stem = _rotate([(x0, y0 + c / 2), (x0 + c / 4, y0 + c / 2)], angle, center)
        arrow = _rotate(
            [(x0 + c / 4, y0 + c / 4), (x0 + c * 3 / 4, y0 + c / 2), (x0 + c / 4, y0 + c * 3 / 4)],
            angle, center,
        )
        pg.draw.line(self.surf, theme.SNAKE, stem[0], stem[1], max(1, c // 4))
        pg.draw.polygon(self.surf, theme.SNAKE, arrow)

    def _draw_apples(self, s: Snapshot) -> None:
        third = self.cell / 3
        for pos in s.apples:
            x, y = self.cell_origin(pos)
            pg.draw.rect(self.surf, theme.APPLE, pg.Rect(x + third, y + third, math.ceil(third), math.ceil(third)))

    def _draw_border(self) -> None:
        w, h = self.window_size()
        inset = self.margin // 2
        corners = [(inset, inset), (w - inset, inset), (w - inset, h - inset), (inset, h - inset)]
        pg.draw.lines(self.surf, theme.BORDER, True, corners, 5)

    def _draw_mesh(self) -> None:
        left, top = self.margin, self.margin
        right = left + self._grid_w * self.cell
        bottom = top + self._grid_h * self.cell
        for col in range(self._grid_w + 1):
            x = left + col * self.cell
            pg.draw.line(self.surf, theme.MESH, (x, top), (x, bottom), 1)
        for row in range(self._grid_h + 1):
            y = top + row * self.cell
            pg.draw.line(self.surf, theme.MESH, (left, y), (right, y), 1)

    def _draw_hud(self, s: Snapshot) -> None:
        if self._font is None:
            if not pg.font.get_init():
                pg.font.init()
            self._font = pg.font.SysFont(None, 22)
        text = f"Score: {s.score}"
        if s.over:
            text += f"   GAME OVER ({s.reason})   R: restart   Esc: quit"
        surf = self._font.render(text, True, theme.TEXT)
        self.surf.blit(surf, (self.margin, 0))

    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"render_record_dir must be path-like, got {type(rec_dir)}")
        fname = os.path.join(rec_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
