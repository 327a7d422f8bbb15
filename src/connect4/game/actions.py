from __future__ import annotations
import logging

from connect4.core.rules import find_win
from connect4.game.results import (
    COLUMN_FULL,
    CONTINUE,
    GAME_OVER,
    INVALID_COLUMN,
    TIE,
    WIN,
    DropResult,
    Placed,
    Rejected,
)
from connect4.game.state import GameState, Status, other

logger = logging.getLogger(__name__)


def _valid_column(state: GameState, column: object) -> bool:
    if isinstance(column, bool) or not isinstance(column, int):
        return False
    return 0 <= column < state.board.cols


def attempt_drop(state: GameState, column: int) -> DropResult:
    """
    Drop the active player's piece into `column`.

    Either the whole move applies (cell write, terminal check, turn change)
    or nothing changes and a Rejected result comes back.
    """
    if state.is_over:
        logger.debug("drop into %r rejected: game over", column)
        return Rejected(GAME_OVER)

    if not _valid_column(state, column):
        logger.debug("drop into %r rejected: invalid column", column)
        return Rejected(INVALID_COLUMN)

    board = state.board
    row = board.find_open_row(column)
    if row is None:
        logger.debug("drop into %d rejected: column full", column)
        return Rejected(COLUMN_FULL)

    mover = state.current
    board.grid[row][column] = mover
    logger.debug("player %d placed at (%d, %d)", mover, row, column)

    # win is checked before tie: a winning last piece is a win
    line = find_win(board, mover)
    if line is not None:
        state.status = Status.WON
        state.winner = mover
        state.winning_line = line
        logger.info("player %d wins with %s", mover, line)
        return Placed(row, column, mover, WIN, tuple(line))

    if board.is_full():
        state.status = Status.TIED
        logger.info("board full, game tied")
        return Placed(row, column, mover, TIE)

    state.current = other(mover)
    return Placed(row, column, mover, CONTINUE)
