from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple

from connect4.config import ROWS, COLS
from connect4.core.board import Board
from connect4.types import Coord, PlayerId


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIED = "tied"


@dataclass(frozen=True, slots=True)
class Player:
    id: PlayerId
    attrs: Any = None  # display metadata, opaque to the engine


def other(player: PlayerId) -> PlayerId:
    return 2 if player == 1 else 1


@dataclass(slots=True)
class GameState:
    board: Board
    players: Tuple[Player, Player]
    current: PlayerId = 1
    status: Status = Status.IN_PROGRESS
    winner: Optional[PlayerId] = None
    winning_line: List[Coord] = field(default_factory=list)

    def __post_init__(self) -> None:
        if tuple(p.id for p in self.players) != (1, 2):
            raise ValueError("Players must be ordered as ids 1 and 2.")

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def player(self, pid: PlayerId) -> Player:
        return self.players[pid - 1]

    @property
    def active(self) -> Player:
        return self.player(self.current)

    def reset(self) -> None:
        """Start over on a fresh board of the same size, keeping the players."""
        fresh = GameState(board=Board(self.board.rows, self.board.cols), players=self.players)
        self.board = fresh.board
        self.current = fresh.current
        self.status = fresh.status
        self.winner = fresh.winner
        self.winning_line = fresh.winning_line


def new_game(
    width: int = COLS,
    height: int = ROWS,
    player1_attrs: Any = None,
    player2_attrs: Any = None,
) -> GameState:
    return GameState(
        board=Board(rows=height, cols=width),
        players=(Player(1, player1_attrs), Player(2, player2_attrs)),
    )
