from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Tuple, Union

from connect4.types import Coord, PlayerId

RejectReason = Literal["game_over", "column_full", "invalid_column"]
Outcome = Literal["continue", "win", "tie"]

GAME_OVER: RejectReason = "game_over"
COLUMN_FULL: RejectReason = "column_full"
INVALID_COLUMN: RejectReason = "invalid_column"

CONTINUE: Outcome = "continue"
WIN: Outcome = "win"
TIE: Outcome = "tie"


@dataclass(frozen=True, slots=True)
class Rejected:
    reason: RejectReason

    @property
    def message(self) -> str:
        if self.reason == GAME_OVER:
            return "Game is already over."
        if self.reason == COLUMN_FULL:
            return "Column is full."
        return "Column out of range."


@dataclass(frozen=True, slots=True)
class Placed:
    row: int
    column: int
    player_id: PlayerId
    outcome: Outcome
    line: Tuple[Coord, ...] = ()

    @property
    def is_terminal(self) -> bool:
        return self.outcome != CONTINUE


DropResult = Union[Rejected, Placed]
