from __future__ import annotations
from typing import Callable, Optional, Tuple

from connect4.config import DEFAULT_COLORS
from connect4.ui.colors import PLAYER_COLORS
from connect4.ui.prompts import parse_color


def ask_color(pid: int, read: Callable[[str], str] = input, default: Optional[str] = None) -> str:
    default = default or DEFAULT_COLORS[pid - 1]
    while True:
        raw = read(f"Player {pid} colour [{default}] ({'/'.join(PLAYER_COLORS)}): ")
        try:
            return parse_color(raw, default)
        except ValueError as e:
            print(e)


def ask_colors(
    read: Callable[[str], str] = input,
    p1: Optional[str] = None,
    p2: Optional[str] = None,
) -> Tuple[str, str]:
    """Prompt for whichever player colours were not given up front."""
    if p1 is None:
        p1 = ask_color(1, read)
    if p2 is None:
        # player 1 may have taken player 2's default
        fallback = DEFAULT_COLORS[0] if p1 == DEFAULT_COLORS[1] else DEFAULT_COLORS[1]
        p2 = ask_color(2, read, default=fallback)
    return p1, p2
