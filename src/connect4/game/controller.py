from __future__ import annotations
from typing import Callable, Optional

from connect4.game.actions import attempt_drop
from connect4.game.results import Rejected, DropResult, WIN, TIE
from connect4.game.state import GameState
from connect4.ui.prompts import parse_move
from connect4.ui.render import render


def _label(state: GameState, pid: int) -> str:
    attrs = state.player(pid).attrs
    if isinstance(attrs, str) and attrs:
        return f"Player {pid} ({attrs})"
    return f"Player {pid}"


def describe(state: GameState, result: DropResult) -> str:
    """Status line for the outcome of one drop."""
    if isinstance(result, Rejected):
        return result.message
    who = _label(state, result.player_id)
    if result.outcome == WIN:
        return f"{who} won!"
    if result.outcome == TIE:
        return "Tie!"
    return f"{who} dropped in column {result.column + 1}. {_label(state, state.current)}'s turn."


def run_game(state: GameState, read: Callable[[str], str] = input) -> Optional[DropResult]:
    """
    Terminal loop: read a column, hand it to the engine, redraw.
    Returns the final drop result, or None if the player quit first.
    """
    status = f"{_label(state, state.current)} starts."
    last: Optional[DropResult] = None

    while True:
        render(state, status, highlight=state.winning_line)
        if state.is_over:
            return last

        try:
            move = parse_move(read(f"{_label(state, state.current)} move: "), state.board.cols)
        except ValueError as e:
            status = str(e)
            continue

        if move is None:
            render(state, "Game quit.")
            return None

        last = attempt_drop(state, int(move))
        status = describe(state, last)
