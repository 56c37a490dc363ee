# core/snake.py  (pure rules, no pygame)
from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, Optional, Tuple
from .direction import Direction, Pos, head_direction

DEFAULT_CONFINES: Tuple[int, int] = (20, 20)


class Snake:
    """
    Body queue with the head at index 0. `confines` is (rows, cols).
    advance() moves unconditionally; callers check collision() right after.
    """

    def __init__(
        self,
        body: Iterable[Pos],
        direction: Optional[Direction] = None,
        confines: Tuple[int, int] = DEFAULT_CONFINES,
    ):
        self.body: Deque[Pos] = deque(tuple(p) for p in body)
        if not self.body:
            raise ValueError("Snake body must contain at least one segment")
        if direction is None:
            direction = head_direction(self.body)
        self.direction: Direction = direction
        self.confines = confines
        self.lengthening = False

    @classmethod
    def from_body(cls, body: Iterable[Pos]) -> "Snake":
        return cls(body)

    @property
    def head(self) -> Pos:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def advance(self) -> None:
        dy, dx = self.direction.delta
        y, x = self.body[0]
        self.body.appendleft((y + dy, x + dx))
        if self.lengthening:
            self.lengthening = False
        else:
            self.body.pop()

    def collision(self) -> Optional[str]:
        """'wall', 'self' or None for the current head."""
        y, x = self.body[0]
        rows, cols = self.confines
        if y < 0 or x < 0 or y >= rows or x >= cols:
            return "wall"
        for i, seg in enumerate(self.body):
            if i and seg == (y, x):
                return "self"
        return None

    def dead(self) -> bool:
        return self.collision() is not None

    def __repr__(self) -> str:
        return f"Snake(body={list(self.body)!r}, direction={self.direction.name}, confines={self.confines})"
