from .engine import EMPTY, AtomicResult, Guessable, ScoredGuess, buffer_row, compare, score
from .errors import (
    GameError,
    InvalidWord,
    MaxTriesExceeded,
    UnknownGameError,
    WordAlreadyGuessed,
    WordLengthMismatch,
)
from .session import GameSession

__all__ = [
    "EMPTY",
    "AtomicResult",
    "Guessable",
    "ScoredGuess",
    "buffer_row",
    "compare",
    "score",
    "GameError",
    "InvalidWord",
    "MaxTriesExceeded",
    "UnknownGameError",
    "WordAlreadyGuessed",
    "WordLengthMismatch",
    "GameSession",
]
