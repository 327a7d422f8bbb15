# src/connect4/config.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Tuple

ROWS = 6
COLS = 7
CONNECT_N = 4

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# Display colour per player when none is supplied
DEFAULT_COLORS = ("red", "yellow")


@dataclass(slots=True)
class GameConfig:
    width: int = COLS
    height: int = ROWS
    player_attrs: Tuple[Any, Any] = field(default_factory=lambda: DEFAULT_COLORS)

    def new_game(self):
        # local import: game.state depends on this module for defaults
        from connect4.game.state import new_game

        return new_game(self.width, self.height, self.player_attrs[0], self.player_attrs[1])
