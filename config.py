# config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from core.direction import Direction, Pos

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board
    grid_w: int = 20
    grid_h: int = 20
    seed: Optional[int] = None
    start_body: Tuple[Pos, ...] = ((10, 10), (10, 11), (10, 12), (10, 13), (10, 14))
    start_direction: Optional[Direction] = Direction.LEFT   # None: infer from the body
    start_apples: Tuple[Pos, ...] = ((1, 0), (2, 0), (3, 0), (4, 0))

    # pacing (the core itself has no clock)
    tick_seconds: float = 0.5          # gui
    text_tick_seconds: float = 0.3     # terminal
    fps: int = 60                      # gui redraw rate between ticks

    # render
    render_cell: int = 27
    render_margin: int = 30
    render_title: str = "snakin'"
    render_grid_lines: bool = True    # debug mesh
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
