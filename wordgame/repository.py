"""
DB-backed repository that mirrors the in-memory GameStore API.

Public methods:
- create(target, candidates, max_tries) -> GameState
- get(game_id) -> GameState | None
- guess(game_id, word) -> GameState | None      (raises GameError on a rejected word)
- board(game_id, pad, buffer) -> list[ScoredGuess] | None
- end(game_id) -> GameState | None
- get_target(game_id) -> str | None             (only once the game is over)

Each call rebuilds a GameSession from the stored rows, lets it decide,
then writes back what changed.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence
from uuid import uuid4

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .engine import ScoredGuess, buffer_row
from .errors import GameError, WordAlreadyGuessed
from .models import Game as GameORM, Guess as GuessORM, utcnow
from .schemas import GameState, ScoredGuessOut
from .session import GameSession

logger = logging.getLogger(__name__)


def _to_cells_json(result: ScoredGuess) -> list[dict]:
    return [{"mark": cell.mark, "value": cell.value} for cell in result.cells]

def _to_game_state(game: GameORM, session: GameSession) -> GameState:
    return GameState(
        game_id=game.id,
        max_tries=session.max_tries,
        tries_left=session.tries_left(),
        status=session.status(),
        game_over=session.game_over(),
        history=[ScoredGuessOut.from_guess(g) for g in session.history],
    )

def _load_session(game: GameORM) -> GameSession:
    # Scoring is deterministic, so replaying the accepted words rebuilds the history
    session = GameSession(game.max_tries, game.target, game.candidates)
    for row in game.guesses:
        session.submit(row.word)
    return session


class DBGameStore:
    """Same surface as the in-memory GameStore, but games live in the database."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, target: str, candidates: Sequence[str], max_tries: int = 6) -> GameState:
        session = GameSession(max_tries, target, candidates)
        now = utcnow()
        game = GameORM(
            id=str(uuid4()),
            target=target,
            candidates=list(candidates),
            max_tries=max_tries,
            status=session.status(),
            created_at=now,
            updated_at=now,
        )
        self.db.add(game)
        self.db.commit()
        self.db.refresh(game)

        logger.info("game %s created: %d letters, %d tries, %d candidates",
                    game.id, len(target), max_tries, len(game.candidates))
        return _to_game_state(game, session)

    def get(self, game_id: str) -> Optional[GameState]:
        game = self.db.get(GameORM, game_id)
        if not game:
            return None
        return _to_game_state(game, _load_session(game))

    def guess(self, game_id: str, word: str) -> Optional[GameState]:
        game = self.db.get(GameORM, game_id)
        if not game:
            return None

        session = _load_session(game)
        if session.game_over():
            # Return current state without modifying
            logger.info("game %s: guess %r ignored, game already %s", game_id, word, session.status())
            return _to_game_state(game, session)

        try:
            result = session.submit(word)
        except GameError as err:
            logger.warning("game %s: guess %r rejected: %s", game_id, word, err)
            raise

        now = utcnow()
        self.db.add(GuessORM(
            game_id=game.id,
            word=word,
            cells=_to_cells_json(result),
            timestamp=now,
        ))
        game.status = session.status()
        game.updated_at = now
        try:
            self.db.commit()
        except IntegrityError:
            # another request recorded the same word first
            self.db.rollback()
            logger.warning("game %s: guess %r rejected: already stored", game_id, word)
            raise WordAlreadyGuessed(word)
        self.db.refresh(game)

        logger.info("game %s: guess %r accepted (%s), status %s",
                    game_id, word, "".join(m[0] for m in result.marks()), game.status)
        return _to_game_state(game, session)

    def board(self, game_id: str, pad: Optional[int] = None, buffer: Optional[str] = None) -> Optional[List[ScoredGuess]]:
        game = self.db.get(GameORM, game_id)
        if not game:
            return None
        row = buffer_row(buffer) if buffer is not None else None
        return _load_session(game).board(pad=pad, buffer=row)

    def end(self, game_id: str) -> Optional[GameState]:
        game = self.db.get(GameORM, game_id)
        if not game:
            return None

        session = _load_session(game)
        session.terminate()

        game.guesses.clear()
        game.max_tries = session.max_tries
        game.status = session.status()
        game.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(game)

        logger.info("game %s ended early", game_id)
        return _to_game_state(game, session)

    def get_target(self, game_id: str) -> Optional[str]:
        """Return the target ONLY for finished games; else None."""
        game = self.db.get(GameORM, game_id)
        if not game:
            return None
        if game.status in ("won", "lost"):
            return game.target
        return None
