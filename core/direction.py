# core/direction.py  (pure geometry, no pygame)
from __future__ import annotations
from enum import Enum
from typing import Dict, Sequence, Tuple

Pos = Tuple[int, int]   # (row, col), signed so off-grid heads stay representable


class SnakeGeometryError(AssertionError):
    """Raised when a body or direction pair breaks the single-width path invariant."""


class Direction(Enum):
    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    @property
    def delta(self) -> Pos:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dr, dc = self.value
        return Direction((-dr, -dc))

    @property
    def vertical(self) -> bool:
        return self.value[1] == 0


def direction_between(current: Pos, previous: Pos) -> Direction:
    """Direction of travel that took the snake from `previous` to `current`."""
    delta = (current[0] - previous[0], current[1] - previous[1])
    try:
        return Direction(delta)
    except ValueError:
        raise SnakeGeometryError(
            f"Invalid direction determined: {delta} ({previous} -> {current})"
        ) from None


def head_direction(body: Sequence[Pos]) -> Direction:
    if len(body) < 2:
        raise SnakeGeometryError(f"head direction needs two segments, got {len(body)}")
    return direction_between(body[0], body[1])


HEAD_GLYPHS: Dict[Direction, str] = {
    Direction.UP: "^",
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
}

# (to, from) -> joining glyph; the four reversal pairs have no entry
_BODY_GLYPHS: Dict[Tuple[Direction, Direction], str] = {
    (Direction.UP, Direction.UP): "║",
    (Direction.UP, Direction.RIGHT): "╝",
    (Direction.UP, Direction.LEFT): "╚",
    (Direction.RIGHT, Direction.UP): "╔",
    (Direction.RIGHT, Direction.RIGHT): "═",
    (Direction.RIGHT, Direction.DOWN): "╚",
    (Direction.DOWN, Direction.RIGHT): "╗",
    (Direction.DOWN, Direction.DOWN): "║",
    (Direction.DOWN, Direction.LEFT): "╔",
    (Direction.LEFT, Direction.UP): "╗",
    (Direction.LEFT, Direction.DOWN): "╝",
    (Direction.LEFT, Direction.LEFT): "═",
}


def body_glyph(to: Direction, from_: Direction) -> str:
    """
    Joining glyph for one body segment: `to` is direction_between(head-side neighbour, seg),
    `from_` is direction_between(seg, tail-side neighbour).
    """
    try:
        return _BODY_GLYPHS[(to, from_)]
    except KeyError:
        raise SnakeGeometryError(f"Not possible: {to.name} after {from_.name}") from None


def tail_glyph(direction: Direction) -> str:
    return "║" if direction.vertical else "═"
