# viz/keyboard.py
from __future__ import annotations
import logging
import queue
import sys
import threading
from typing import List, Optional, TextIO, Union
import pygame as pg
from core.direction import Direction

logger = logging.getLogger(__name__)

Command = Union[Direction, str]   # a Direction, "quit" or "reset"

KEY_DIRECTIONS = {
    pg.K_UP: Direction.UP, pg.K_w: Direction.UP,
    pg.K_RIGHT: Direction.RIGHT, pg.K_d: Direction.RIGHT,
    pg.K_DOWN: Direction.DOWN, pg.K_s: Direction.DOWN,
    pg.K_LEFT: Direction.LEFT, pg.K_a: Direction.LEFT,
}

CHAR_COMMANDS = {
    "w": Direction.UP, "k": Direction.UP,
    "d": Direction.RIGHT, "l": Direction.RIGHT,
    "s": Direction.DOWN, "j": Direction.DOWN,
    "a": Direction.LEFT, "h": Direction.LEFT,
    "r": "reset",
    "q": "quit",
}


def key_to_direction(key: int) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)


def translate_event(e: pg.event.Event) -> Optional[Command]:
    if e.type == pg.QUIT:
        return "quit"
    if e.type == pg.KEYDOWN:
        if e.key == pg.K_ESCAPE: return "quit"
        if e.key == pg.K_r: return "reset"
        return key_to_direction(e.key)
    return None


class Keyboard:
    """Drains the pygame event queue into commands, oldest first."""

    def poll(self) -> List[Command]:
        cmds = []
        for e in pg.event.get():
            cmd = translate_event(e)
            if cmd is not None:
                cmds.append(cmd)
        return cmds


def parse_line(line: str) -> List[Command]:
    cmds = []
    for ch in line.strip().lower():
        cmd = CHAR_COMMANDS.get(ch)
        if cmd is None:
            logger.debug("Ignoring input %r", ch)
            continue
        cmds.append(cmd)
    return cmds


class StdinKeyboard:
    """
    Terminal input: a daemon thread reads whole lines (stdin is line buffered)
    and queues their commands; poll() never blocks. EOF queues "quit".
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._q: "queue.Queue[Command]" = queue.Queue()
        self._t: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._t is not None:
            return
        self._t = threading.Thread(target=self._run, name="StdinKeyboard", daemon=True)
        self._t.start()

    def _run(self) -> None:
        stream = self._stream if self._stream is not None else sys.stdin
        for line in stream:
            for cmd in parse_line(line):
                self._q.put(cmd)
        self._q.put("quit")

    def poll(self) -> List[Command]:
        cmds = []
        while True:
            try:
                cmds.append(self._q.get_nowait())
            except queue.Empty:
                return cmds

    def join(self, timeout: Optional[float] = None) -> None:
        if self._t is not None:
            self._t.join(timeout)
