from __future__ import annotations
from typing import Any

from connect4 import config

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg; good generic highlight

FG_RED = "\033[31m"
FG_GREEN = "\033[32m"
FG_YELLOW = "\033[33m"
FG_BLUE = "\033[34m"
FG_MAGENTA = "\033[35m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

PLAYER_COLORS = {
    "red": FG_RED,
    "green": FG_GREEN,
    "yellow": FG_YELLOW,
    "blue": FG_BLUE,
    "magenta": FG_MAGENTA,
    "cyan": FG_CYAN,
}


def c(s: str, code: str) -> str:
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def player_code(attrs: Any, pid: int) -> str:
    """ANSI code for a player's colour attribute, falling back to the default for `pid`."""
    if isinstance(attrs, str) and attrs.lower() in PLAYER_COLORS:
        return PLAYER_COLORS[attrs.lower()]
    return PLAYER_COLORS[config.DEFAULT_COLORS[pid - 1]]
