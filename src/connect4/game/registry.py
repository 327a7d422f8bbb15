from __future__ import annotations
import logging
import threading
import uuid
from typing import Any, Dict, List

from connect4.config import ROWS, COLS
from connect4.game.actions import attempt_drop
from connect4.game.results import DropResult
from connect4.game.state import GameState, new_game

logger = logging.getLogger(__name__)


class GameRegistry:
    """
    Holds many games at once, keyed by a short id.

    Drops on the same game are serialised by that game's lock; different
    games never wait on each other.
    """

    def __init__(self) -> None:
        self._games: Dict[str, GameState] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def create(
        self,
        width: int = COLS,
        height: int = ROWS,
        player1_attrs: Any = None,
        player2_attrs: Any = None,
    ) -> str:
        state = new_game(width, height, player1_attrs, player2_attrs)
        with self._guard:
            game_id = uuid.uuid4().hex[:8]
            while game_id in self._games:
                game_id = uuid.uuid4().hex[:8]
            self._games[game_id] = state
            self._locks[game_id] = threading.Lock()
        logger.info("created game %s (%dx%d)", game_id, width, height)
        return game_id

    def get(self, game_id: str) -> GameState:
        with self._guard:
            return self._games[game_id]

    def drop(self, game_id: str, column: int) -> DropResult:
        with self._guard:
            state = self._games[game_id]
            lock = self._locks[game_id]
        with lock:
            return attempt_drop(state, column)

    def remove(self, game_id: str) -> None:
        with self._guard:
            del self._games[game_id]
            del self._locks[game_id]
        logger.info("removed game %s", game_id)

    def ids(self) -> List[str]:
        with self._guard:
            return list(self._games)

    def __len__(self) -> int:
        with self._guard:
            return len(self._games)

    def __contains__(self, game_id: object) -> bool:
        with self._guard:
            return game_id in self._games
