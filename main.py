# main.py
import argparse
import logging
import sys

from config import AppConfig

MODES = ["gui", "text", "string"]   # "string" is the historical name of text mode
DEFAULTS = AppConfig()

def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="snakin", description="Grid snake, in a window or a terminal.")
    p.add_argument("mode", nargs="?", choices=MODES, default="gui")
    p.add_argument("--width", type=int, default=DEFAULTS.grid_w)
    p.add_argument("--height", type=int, default=DEFAULTS.grid_h)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--tick", type=float, default=None, help="seconds between advances")
    p.add_argument("--no-grid", action="store_true", help="hide the debug grid mesh")
    p.add_argument("--record-dir", default=None, help="save every gui frame as PNG here")
    p.add_argument("-v", "--verbose", action="count", default=0)
    args = p.parse_args(argv)
    if args.width < 1 or args.height < 1:
        p.error("--width and --height must be positive")
    if args.tick is not None and args.tick <= 0:
        p.error("--tick must be positive")
    return args

def build_config(args) -> AppConfig:
    cfg = AppConfig(seed=args.seed, render_grid_lines=not args.no_grid, render_record_dir=args.record_dir)
    if (args.width, args.height) != (cfg.grid_w, cfg.grid_h):
        # the default layout is sized for 20x20; other boards get a centred snake of up to 3 cells
        row, col = args.height // 2, args.width // 2
        length = max(1, min(3, args.width - col))
        cfg = cfg.with_(
            grid_w=args.width, grid_h=args.height,
            start_body=tuple((row, col + i) for i in range(length)),
            start_apples=(),
        )
    if args.tick is not None:
        cfg = cfg.with_(tick_seconds=args.tick, text_tick_seconds=args.tick)
    return cfg

def main(argv=None) -> int:
    args = parse_args(argv)
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = build_config(args)

    if args.mode in ("text", "string"):
        from runners.run_text import main as run_text
        snap = run_text(cfg)
    else:
        from runners.run_gui import main as run_gui
        snap = run_gui(cfg)
    print(f"Final score: {snap.score}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
