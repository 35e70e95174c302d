"""
One game: a fixed target, the words allowed as guesses, and the guesses
accepted so far.

Won/lost/in-progress is always derived from the history, never stored.
The session does not stop accepting guesses once it is won or out of
tries. Callers check `game_over()` and stop asking. The only hard
rejection on the budget is a budget of zero, which a fresh zero-try game
or `terminate()` produces.

No locking here: a session belongs to one caller at a time.
"""

from __future__ import annotations

from typing import Any, Generic, List, Optional, Sequence, Tuple

from .engine import EMPTY, ScoredGuess, atomic_length, compare, placeholder
from .errors import InvalidWord, MaxTriesExceeded, WordAlreadyGuessed, WordLengthMismatch
from .types import E, GameStatus, W


class GameSession(Generic[W, E]):
    """
    Example:
      session = GameSession(5, "hello", ["hello", "world"])
      session.submit("world")   # incorrect w, misplaced o, incorrect r, correct l, incorrect d
      session.submit("hello")   # all correct
      session.won()             # True
    """

    def __init__(self, max_tries: int, target: W, candidates: Sequence[W]) -> None:
        if max_tries < 0:
            raise ValueError("max_tries must be zero or positive.")
        self._max_tries = max_tries
        self._target = target
        # membership uses ==, so candidates do not need to be hashable
        self._candidates: Tuple[W, ...] = tuple(candidates)
        self._history: List[ScoredGuess[W, E]] = []

    # --- Read-only accessors ---

    @property
    def target(self) -> W:
        return self._target

    @property
    def max_tries(self) -> int:
        return self._max_tries

    @property
    def candidates(self) -> Tuple[W, ...]:
        return self._candidates

    @property
    def history(self) -> Tuple[ScoredGuess[W, E], ...]:
        return tuple(self._history)

    def tries_left(self) -> int:
        return max(0, self._max_tries - len(self._history))

    def is_word_guessed(self, word: W) -> bool:
        return any(entry.word == word for entry in self._history)

    def won(self) -> bool:
        return self.is_word_guessed(self._target)

    def lost(self) -> bool:
        return len(self._history) == self._max_tries and not self.won()

    def game_over(self) -> bool:
        return self.won() or self.lost()

    def status(self) -> GameStatus:
        if self.won():
            return "won"
        if self.lost():
            return "lost"
        return "in_progress"

    # --- Mutations ---

    def submit(self, word: W) -> ScoredGuess[W, E]:
        """
        Score `word`, record it and return the scored row.

        Checks run in this order and the first failure is raised:
          1. budget is zero         -> MaxTriesExceeded
          2. word not a candidate   -> InvalidWord(word)
          3. word already guessed   -> WordAlreadyGuessed(word)
        Nothing is recorded when a check fails.
        """
        if self._max_tries == 0:
            raise MaxTriesExceeded()
        if word not in self._candidates:
            raise InvalidWord(word)
        if self.is_word_guessed(word):
            raise WordAlreadyGuessed(word)

        result = compare(word, self._target)
        self._history.append(result)
        return result

    def terminate(self) -> None:
        """Abandon the game: clear the history and drop the budget to zero."""
        self._history.clear()
        self._max_tries = 0

    # --- Presentation ---

    def board(
        self,
        pad: Optional[int] = None,
        buffer: Optional[ScoredGuess[Any, E]] = None,
    ) -> List[ScoredGuess[Any, E]]:
        """
        Rows for display: the history, then the row being typed (if any)
        filled out with empty cells, then up to `pad` empty rows without
        going past max_tries. The returned list is a copy.

        Raises WordLengthMismatch if the typed row is wider than the target.
        """
        rows: List[ScoredGuess[Any, E]] = list(self._history)
        width = atomic_length(self._target)

        if buffer is not None:
            if len(buffer.cells) > width:
                raise WordLengthMismatch(buffer.word)
            missing = width - len(buffer.cells)
            rows.append(ScoredGuess(buffer.word, tuple(buffer.cells) + (EMPTY,) * missing))

        if pad is not None:
            free_rows = max(0, self._max_tries - len(rows))
            blank = ScoredGuess(placeholder(self._target), (EMPTY,) * width)
            rows.extend(blank for _ in range(min(pad, free_rows)))

        return rows

    def __repr__(self) -> str:
        return (
            f"GameSession(max_tries={self._max_tries}, "
            f"guesses={len(self._history)}, status={self.status()!r})"
        )
