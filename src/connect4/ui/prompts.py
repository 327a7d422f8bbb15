from __future__ import annotations
from typing import Optional

from connect4.types import Move
from connect4.ui.colors import PLAYER_COLORS


def parse_move(raw: str, cols: int) -> Optional[Move]:
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Move(col)


def parse_color(raw: str, default: str) -> str:
    s = raw.strip().lower()
    if not s:
        return default
    if s not in PLAYER_COLORS:
        raise ValueError(f"Unknown colour. Choose from: {', '.join(PLAYER_COLORS)}.")
    return s
