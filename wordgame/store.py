"""
In-memory store
Holds game sessions in memory, keyed by id.

Sessions themselves have no locking; the store serializes every access
to them behind one lock.
"""

from dataclasses import dataclass, field
from threading import RLock
from time import time
from typing import Dict, List, Optional, Sequence
from uuid import uuid4

from .engine import ScoredGuess
from .session import GameSession


@dataclass
class Game:
    id: str
    session: GameSession
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)


class GameStore:
    def __init__(self) -> None:
        self._games: Dict[str, Game] = {}
        self._lock = RLock()

    def create(self, target: str, candidates: Sequence[str], max_tries: int = 6) -> Game:
        new_id = str(uuid4())
        game = Game(id=new_id, session=GameSession(max_tries, target, candidates))
        with self._lock:
            self._games[new_id] = game
        return game

    def get(self, game_id: str) -> Optional[Game]:
        with self._lock:
            return self._games.get(game_id)

    def guess(self, game_id: str, word: str) -> Optional[Game]:
        """
        Returns None for an unknown id.
        Raises the session's GameError when the word is rejected.
        """
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None

            if game.session.game_over():
                # If game already ended, just return it (ignore extra guesses)
                return game

            game.session.submit(word)
            game.updated_at = time()
            return game

    def board(
        self,
        game_id: str,
        pad: Optional[int] = None,
        buffer: Optional[ScoredGuess] = None,
    ) -> Optional[List[ScoredGuess]]:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None
            return game.session.board(pad=pad, buffer=buffer)

    def end(self, game_id: str) -> Optional[Game]:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None
            game.session.terminate()
            game.updated_at = time()
            return game
