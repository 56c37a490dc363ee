# core/game.py  (tick orchestration, no pygame)
from __future__ import annotations
import enum
import logging
import random
from typing import Iterable, Optional, Sequence, TYPE_CHECKING
from .apples import AppleSet
from .direction import Direction, Pos
from .interfaces import Snapshot
from .snake import Snake

if TYPE_CHECKING:
    from config import AppConfig

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    RUNNING = "running"
    OVER = "over"


class Game:
    """
    The entire game state. A driver calls step() once per tick and steer()
    whenever input arrives; renderers only read snapshot().
    """

    def __init__(
        self,
        width: int,
        height: int,
        snake_body: Sequence[Pos],
        direction: Optional[Direction] = None,
        apples: Iterable[Pos] = (),
        seed: Optional[int] = None,
    ):
        if width < 1 or height < 1:
            raise ValueError(f"Board must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self._initial_body = [tuple(p) for p in snake_body]
        self._initial_direction = direction
        self._initial_apples = [tuple(p) for p in apples]
        self.rng = random.Random(seed)
        self.snake = Snake(self._initial_body, direction, confines=(height, width))
        self.apples = AppleSet(self._initial_apples)
        self.score = 0
        self.ticks = 0
        self.over = False
        self.reason: Optional[str] = None
        # set once the heading changed this tick; further changes wait for the next tick
        self.direction_changed_this_tick = False

    @classmethod
    def from_config(cls, cfg: "AppConfig") -> "Game":
        return cls(
            cfg.grid_w,
            cfg.grid_h,
            cfg.start_body,
            direction=cfg.start_direction,
            apples=cfg.start_apples,
            seed=cfg.seed,
        )

    @property
    def state(self) -> GameState:
        return GameState.OVER if self.over else GameState.RUNNING

    def advance(self) -> None:
        """One tick of pure state transition. Death is judged by the caller."""
        self.snake.advance()
        head = self.snake.head
        if head in self.apples:
            self.score += 1
            self.snake.lengthening = True
            self.apples.remove(head)
        if self.apples.is_empty():
            self.spawn_apple()
        self.ticks += 1
        self.direction_changed_this_tick = False

    def step(self) -> Snapshot:
        """advance() plus the Running -> Over policy."""
        if self.over:
            return self.snapshot()
        self.advance()
        reason = self.snake.collision()
        if reason is not None:
            self.over, self.reason = True, reason
            logger.info("Game over (%s) after %d ticks, score %d", reason, self.ticks, self.score)
        else:
            logger.debug("tick %d head=%s len=%d", self.ticks, self.snake.head, len(self.snake))
        return self.snapshot()

    def steer(self, direction: Direction) -> bool:
        """Apply a heading change if the latch and reversal rule allow it."""
        current = self.snake.direction
        if self.over or direction == current:
            return False
        if self.direction_changed_this_tick:
            logger.debug("Ignoring %s: heading already changed this tick", direction.name)
            return False
        if direction == current.opposite:
            logger.debug("Ignoring %s: reverses %s", direction.name, current.name)
            return False
        self.snake.direction = direction
        self.direction_changed_this_tick = True
        return True

    def spawn_apple(self) -> Optional[Pos]:
        return self.apples.spawn(self.width, self.height, set(self.snake.body), self.rng)

    def reset(self, seed: Optional[int] = None) -> Snapshot:
        """Start over from the construction layout; a seed, if given, replaces the apple RNG."""
        if seed is not None:
            self.rng = random.Random(seed)
        self.snake = Snake(self._initial_body, self._initial_direction, confines=(self.height, self.width))
        self.apples = AppleSet(self._initial_apples)
        if self.apples.is_empty():
            self.spawn_apple()
        self.score = 0
        self.ticks = 0
        self.over = False
        self.reason = None
        self.direction_changed_this_tick = False
        logger.info("Game reset on a %dx%d board", self.width, self.height)
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake.body),
            apples=tuple(self.apples),
            direction=self.snake.direction,
            score=self.score,
            ticks=self.ticks,
            over=self.over,
            reason=self.reason,
            grid_w=self.width,
            grid_h=self.height,
        )
