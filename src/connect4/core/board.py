# src/connect4/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from connect4.config import ROWS, COLS
from connect4.types import Cell, PlayerId, Move


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board needs at least one row and one column.")
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(cell is not None for row in self.grid for cell in row)

    def find_open_row(self, col: int) -> Optional[int]:
        """Lowest empty row in a column, or None when the column is full."""
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is None:
                return r
        return None

    def drop(self, col: Move, player: PlayerId) -> int:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")

        r = self.find_open_row(c)
        if r is None:
            raise ValueError("Column is full.")
        self.grid[r][c] = player
        return r
