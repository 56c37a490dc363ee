# core/apples.py
from __future__ import annotations
import logging
import random
from typing import Container, Dict, Iterable, Iterator, Optional
from .direction import Pos
from .spaces import AvailableSpaces

logger = logging.getLogger(__name__)


class AppleSet:
    """Unique apple positions, kept in insertion order."""

    def __init__(self, cells: Iterable[Pos] = ()):
        self._cells: Dict[Pos, None] = dict.fromkeys(tuple(c) for c in cells)

    def contains(self, pos: Pos) -> bool:
        return tuple(pos) in self._cells

    __contains__ = contains

    def add(self, pos: Pos) -> None:
        self._cells[tuple(pos)] = None

    def remove(self, pos: Pos) -> None:
        del self._cells[tuple(pos)]

    def discard(self, pos: Pos) -> None:
        self._cells.pop(tuple(pos), None)

    def is_empty(self) -> bool:
        return not self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Pos]:
        return iter(self._cells)

    def __repr__(self) -> str:
        return f"AppleSet({list(self._cells)!r})"

    def spawn(
        self,
        width: int,
        height: int,
        occupied: Container[Pos],
        rng: random.Random,
    ) -> Optional[Pos]:
        """Add one apple on a uniformly chosen free cell. None when the board is full."""
        # O(width*height) per spawn; fine for the board sizes we play on
        free = list(AvailableSpaces(width, height, occupied))
        if not free:
            logger.warning("No free cell left for a new apple on a %dx%d board", width, height)
            return None
        pos = rng.choice(free)
        self.add(pos)
        logger.debug("Spawned apple at %s (%d free cells)", pos, len(free))
        return pos
