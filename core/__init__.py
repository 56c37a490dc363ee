# core/__init__.py
from .direction import (
    Direction, Pos, SnakeGeometryError, HEAD_GLYPHS,
    body_glyph, direction_between, head_direction, tail_glyph,
)
from .snake import Snake
from .spaces import AvailableSpaces
from .apples import AppleSet
from .interfaces import Snapshot
from .game import Game, GameState
