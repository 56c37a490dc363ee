# tests/test_keyboard.py
import io
import threading
import pygame as pg
from core.direction import Direction
from viz.keyboard import Keyboard, StdinKeyboard, key_to_direction, parse_line, translate_event

def test_arrow_and_wasd_keys():
    assert key_to_direction(pg.K_UP) is Direction.UP
    assert key_to_direction(pg.K_d) is Direction.RIGHT
    assert key_to_direction(pg.K_DOWN) is Direction.DOWN
    assert key_to_direction(pg.K_a) is Direction.LEFT
    assert key_to_direction(pg.K_SPACE) is None

def test_translate_events():
    assert translate_event(pg.event.Event(pg.KEYDOWN, key=pg.K_LEFT)) is Direction.LEFT
    assert translate_event(pg.event.Event(pg.KEYDOWN, key=pg.K_ESCAPE)) == "quit"
    assert translate_event(pg.event.Event(pg.KEYDOWN, key=pg.K_r)) == "reset"
    assert translate_event(pg.event.Event(pg.QUIT)) == "quit"
    assert translate_event(pg.event.Event(pg.KEYUP, key=pg.K_LEFT)) is None

def test_keyboard_poll_keeps_order():
    pg.display.init()
    pg.event.clear()
    pg.event.post(pg.event.Event(pg.KEYDOWN, key=pg.K_UP))
    pg.event.post(pg.event.Event(pg.KEYDOWN, key=pg.K_RIGHT))
    cmds = Keyboard().poll()
    assert cmds == [Direction.UP, Direction.RIGHT]

def test_parse_line():
    assert parse_line("wAx q\n") == [Direction.UP, Direction.LEFT, "quit"]
    assert parse_line("hjkl") == [Direction.LEFT, Direction.DOWN, Direction.UP, Direction.RIGHT]
    assert parse_line("r") == ["reset"]

def test_stdin_keyboard_reads_until_eof():
    kbd = StdinKeyboard(io.StringIO("w\nd\n"))
    kbd.start()
    kbd.join(timeout=2.0)
    assert kbd.poll() == [Direction.UP, Direction.RIGHT, "quit"]
    assert kbd.poll() == []

def test_stdin_keyboard_poll_never_blocks():
    gate = threading.Event()

    class Held:
        def __iter__(self):
            gate.wait(2.0)
            return iter(())

    kbd = StdinKeyboard(Held())
    kbd.start()
    assert kbd.poll() == []
    gate.set()
    kbd.join(timeout=2.0)
    assert kbd.poll() == ["quit"]
