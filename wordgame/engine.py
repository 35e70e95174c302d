"""
Pure game logic (no HTTP, no storage).

Scoring a guess against the target gives one cell per atomic element:
- correct:   element is in the target at this position
- misplaced: element is in the target but somewhere else
- incorrect: element is not in the target (or every copy is already claimed)

Duplicates are handled in two passes. Exact matches are resolved first,
and every target element they did not claim goes into a leftover pool.
Then misplaced matches are taken from the pool left to right, removing
one copy each time, so a target with one 'l' never gives two misplaced 'l's.

Any Python sequence (str, tuple, list) can be scored directly. Other
candidate types implement `Guessable`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, Protocol, Sequence, Tuple, runtime_checkable

from .errors import WordLengthMismatch
from .types import E, Mark, W


@dataclass(frozen=True)
class AtomicResult(Generic[E]):
    """Outcome for one element of a guess."""

    mark: Mark
    value: Optional[E] = None

    @classmethod
    def correct(cls, value: E) -> "AtomicResult[E]":
        return cls("correct", value)

    @classmethod
    def incorrect(cls, value: E) -> "AtomicResult[E]":
        return cls("incorrect", value)

    @classmethod
    def misplaced(cls, value: E) -> "AtomicResult[E]":
        return cls("misplaced", value)

    @classmethod
    def custom(cls, value: E) -> "AtomicResult[E]":
        return cls("custom", value)


# Padding cell for boards. Scoring never produces it.
EMPTY: AtomicResult[Any] = AtomicResult("empty")


@dataclass(frozen=True)
class ScoredGuess(Generic[W, E]):
    """A guessed word and its per-element cells."""

    word: W
    cells: Tuple[AtomicResult[E], ...]

    def marks(self) -> Tuple[Mark, ...]:
        return tuple(cell.mark for cell in self.cells)


@runtime_checkable
class Guessable(Protocol):
    """
    A candidate type that knows how to score itself against a target of
    the same type, e.g. a record compared field by field.
    Implementations should return one cell per comparable element and
    should also support ==, copying and a no-argument constructor
    (used for placeholder rows).
    """

    def score_against(self, target: Any) -> ScoredGuess: ...


def score(guess: Sequence[E], target: Sequence[E]) -> ScoredGuess[Sequence[E], E]:
    """
    Example:
      guess  = "world"
      target = "hello"
      -> incorrect w, misplaced o, incorrect r, correct l, incorrect d

    Raises WordLengthMismatch(guess) when the lengths differ.
    """
    n = len(target)
    if len(guess) != n:
        raise WordLengthMismatch(guess)

    # 1. Identical words: everything is correct
    if guess == target:
        return ScoredGuess(guess, tuple(AtomicResult.correct(atom) for atom in guess))

    # 2. Exact matches, collecting the unclaimed target atoms
    cells = []
    leftover = []  # atoms only need ==, so a list rather than a Counter
    for guessed, wanted in zip(guess, target):
        if guessed == wanted:
            cells.append(AtomicResult.correct(guessed))
        else:
            cells.append(AtomicResult.incorrect(guessed))
            leftover.append(wanted)

    # 3. Misplaced matches, consuming one leftover copy each
    for i, cell in enumerate(cells):
        if cell.mark == "incorrect" and cell.value in leftover:
            leftover.remove(cell.value)
            cells[i] = AtomicResult.misplaced(cell.value)

    return ScoredGuess(guess, tuple(cells))


def compare(guess: Any, target: Any) -> ScoredGuess:
    """Score with the candidate's own rules if it has them, else as a sequence."""
    if isinstance(guess, Guessable):
        return guess.score_against(target)
    return score(guess, target)


def atomic_length(word: Any) -> int:
    """Number of cells `word` produces when scored against itself."""
    return len(compare(word, word).cells)


def placeholder(word: Any) -> Any:
    """Default/empty value of the same type, for rows that are never scored."""
    return type(word)()


def buffer_row(typed: Sequence[E]) -> ScoredGuess[Sequence[E], E]:
    """Row for input still being typed: each typed atom shown unscored."""
    return ScoredGuess(typed, tuple(AtomicResult.incorrect(atom) for atom in typed))
