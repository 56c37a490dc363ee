# tests/test_runners.py
import io
import threading
import pygame as pg
from core.direction import Direction
from core.game import Game
from runners.commands import apply_commands
import runners.run_gui as run_gui
import runners.run_text as run_text

class HeldStdin:
    """A stdin that produces nothing until released."""
    def __init__(self):
        self.gate = threading.Event()
    def __iter__(self):
        self.gate.wait(5.0)
        return iter(())

def test_apply_commands(game_factory):
    g = game_factory()
    assert apply_commands(g, [Direction.UP, Direction.RIGHT]) is True
    assert g.snake.direction is Direction.UP
    assert apply_commands(g, ["reset", Direction.DOWN]) is True
    assert g.snake.direction is Direction.DOWN
    assert apply_commands(g, [Direction.LEFT, "quit", Direction.UP]) is False

def test_text_runner_plays_until_death(small_cfg):
    cfg = small_cfg.with_(text_tick_seconds=0.001)
    game = Game(3, 3, [(1, 0), (1, 1), (1, 2)], apples=[(0, 0)])
    stdin, out = HeldStdin(), io.StringIO()
    snap = run_text.main(cfg, game=game, stdin=stdin, stdout=out)
    stdin.gate.set()
    assert snap.over and snap.reason == "wall"
    text = out.getvalue()
    assert text.startswith("-----\n|O  |\n|<══|")
    assert "GAME OVER (wall)" in text

def test_text_runner_respects_max_ticks(small_cfg):
    cfg = small_cfg.with_(text_tick_seconds=0.001)
    stdin = HeldStdin()
    snap = run_text.main(cfg, stdin=stdin, stdout=io.StringIO(), max_ticks=1)
    stdin.gate.set()
    assert snap.ticks == 1
    assert snap.snake[0] == (2, 1)

def test_gui_runner_advances_every_frame_with_zero_tick(small_cfg):
    cfg = small_cfg.with_(tick_seconds=0.0, fps=1000)
    snap = run_gui.main(cfg, max_frames=2)
    pg.init()
    assert snap.ticks == 2
    assert snap.snake[0] == (2, 0)

def test_text_runner_spawns_first_apple_on_custom_board():
    import main as cli
    cfg = cli.build_config(cli.parse_args(["text", "--width", "8", "--height", "6", "--seed", "2"]))
    stdin, out = HeldStdin(), io.StringIO()
    snap = run_text.main(cfg, stdin=stdin, stdout=out, max_ticks=0)
    stdin.gate.set()
    first = out.getvalue().split("Score:")[0]
    assert "O" in first
    assert len(snap.apples) == 1 and snap.apples[0] not in snap.snake

def test_gui_runner_spawns_first_apple(small_cfg):
    snap = run_gui.main(small_cfg.with_(tick_seconds=60.0, fps=1000), max_frames=1)
    pg.init()
    assert snap.ticks == 0
    assert len(snap.apples) == 1
