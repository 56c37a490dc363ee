# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
from .direction import Direction, Pos

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Pos, ...]      # head first
    apples: Tuple[Pos, ...]
    direction: Direction
    score: int
    ticks: int
    over: bool
    reason: Optional[str]       # "wall" | "self" | None
    grid_w: int
    grid_h: int

    @property
    def head(self) -> Pos:
        return self.snake[0]

    def in_bounds(self, pos: Pos) -> bool:
        return 0 <= pos[0] < self.grid_h and 0 <= pos[1] < self.grid_w
