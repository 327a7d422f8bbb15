from __future__ import annotations
from typing import Optional, List, Tuple

from connect4.config import CONNECT_N
from connect4.core.board import Board
from connect4.types import Coord, PlayerId

# rightward, downward, down-right, down-left as (d_row, d_col)
DIRECTIONS: Tuple[Coord, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def _run(board: Board, r: int, c: int, dr: int, dc: int, player: PlayerId) -> Optional[List[Coord]]:
    line = [(r + i * dr, c + i * dc) for i in range(CONNECT_N)]
    for (y, x) in line:
        if not board.in_bounds(y, x) or board.grid[y][x] != player:
            return None
    return line


def find_win(board: Board, player: PlayerId) -> Optional[List[Coord]]:
    """
    Test every cell as the start of a run in each direction.
    Returns the first winning line for `player`, or None.
    """
    for r in range(board.rows):
        for c in range(board.cols):
            for dr, dc in DIRECTIONS:
                line = _run(board, r, c, dr, dc, player)
                if line is not None:
                    return line
    return None


def is_win(board: Board, player: PlayerId) -> bool:
    return find_win(board, player) is not None


def wins_through(board: Board, r: int, c: int, player: PlayerId) -> bool:
    # Only the lines passing through (r, c); same answer as a full scan
    # whenever (r, c) holds the last piece placed.
    if not board.in_bounds(r, c) or board.grid[r][c] != player:
        return False
    for dr, dc in DIRECTIONS:
        count = 1
        for sign in (1, -1):
            y, x = r + sign * dr, c + sign * dc
            while board.in_bounds(y, x) and board.grid[y][x] == player:
                count += 1
                y += sign * dr
                x += sign * dc
        if count >= CONNECT_N:
            return True
    return False


def check_winner_with_line(board: Board) -> Optional[Tuple[PlayerId, List[Coord]]]:
    for p in (1, 2):
        line = find_win(board, p)
        if line is not None:
            return p, line
    return None


def check_winner(board: Board) -> Optional[PlayerId]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None
