# core/spaces.py
from __future__ import annotations
from typing import Container, Iterator, Optional
from .direction import Pos


class AvailableSpaces:
    """
    Lazy, one-shot row-major scan over every free cell of a width x height board;
    copy() gives an independent iterator at the same position.
    `occupied` only needs `in`; a deque body works, a set is faster.
    """

    def __init__(self, width: int, height: int, occupied: Container[Pos]):
        self.width = width
        self.height = height
        self.occupied = occupied
        self.offset = 0

    def __iter__(self) -> Iterator[Pos]:
        return self

    def __next__(self) -> Pos:
        end = self.width * self.height
        while self.offset < end:
            pos = divmod(self.offset, self.width)
            self.offset += 1
            if pos not in self.occupied:
                return pos
        raise StopIteration

    def copy(self) -> "AvailableSpaces":
        other = AvailableSpaces(self.width, self.height, self.occupied)
        other.offset = self.offset
        return other

    def count(self) -> int:
        """Remaining free cells, without consuming this iterator."""
        return sum(1 for _ in self.copy())

    def first(self) -> Optional[Pos]:
        return next(self.copy(), None)
