from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from connect4 import config
from connect4.config import GameConfig
from connect4.game.controller import run_game
from connect4.ui.colors import PLAYER_COLORS
from connect4.ui.menu import ask_colors


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connect4", description="Two-player Connect Four in the terminal.")
    ap.add_argument("--width", type=int, default=config.COLS, help="number of columns")
    ap.add_argument("--height", type=int, default=config.ROWS, help="number of rows")
    ap.add_argument("--p1-color", choices=sorted(PLAYER_COLORS), default=None)
    ap.add_argument("--p2-color", choices=sorted(PLAYER_COLORS), default=None)
    ap.add_argument("--no-color", action="store_true", help="plain output, no ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="do not clear the screen between moves")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level, format="[%(asctime)s] %(levelname)s: %(message)s")

    if args.width < 1 or args.height < 1:
        build_parser().error("width and height must be at least 1")

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    p1, p2 = ask_colors(p1=args.p1_color, p2=args.p2_color)

    cfg = GameConfig(width=args.width, height=args.height, player_attrs=(p1, p2))
    run_game(cfg.new_game())


if __name__ == "__main__":
    main()
