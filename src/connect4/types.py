# src/connect4/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType, Tuple

PlayerId = Literal[1, 2]
Cell = Optional[PlayerId]
Move = NewType("Move", int)   # column index 0..cols-1
Coord = Tuple[int, int]       # (row, col)
