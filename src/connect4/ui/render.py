from __future__ import annotations
from typing import Optional, Iterable, List, Set

from connect4 import config
from connect4.game.state import GameState
from connect4.types import Cell, Coord
from connect4.ui.colors import c, player_code, BOLD, DIM, FG_CYAN, FG_GRAY, REVERSE, RESET

GLYPHS = {1: "X", 2: "O"}


def _piece(state: GameState, cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    return c(GLYPHS[cell], player_code(state.player(cell).attrs, cell))


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(state: GameState, highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    board = state.board
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c("   " + " ".join(str((i + 1) % 10) for i in range(board.cols)), DIM)]
    for r in range(board.rows):
        parts = []
        for cidx in range(board.cols):
            p = _piece(state, board.grid[r][cidx])
            if (r, cidx) in hl and config.USE_COLOR:
                p = f"{REVERSE}{p}{RESET}"
            elif (r, cidx) in hl:
                p = "*"
            parts.append(p)
        lines.append(" | " + " ".join(parts) + " |")
    lines.append(c("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def render(state: GameState, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(state, highlight):
        print(line)
    if not state.is_over:
        print(c(f"   Enter 1-{state.board.cols} to drop. Enter q to quit.", DIM))
