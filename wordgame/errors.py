"""
Reasons a game session can reject a guess.

Every rejection is recoverable: the session is left exactly as it was,
so the caller can retry with another word straight away.
Subclassing ValueError lets HTTP routes keep mapping them to 4xx responses.
"""

from typing import Any, Optional


class GameError(ValueError):
    """Base class. `word` is the rejected value, or None for variants without one."""

    message = "unknown game error"

    def __init__(self, word: Optional[Any] = None) -> None:
        self.word = word
        super().__init__(self.message.format(word=word))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameError):
            return NotImplemented
        return type(self) is type(other) and self.word == other.word

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        if self.word is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.word!r})"


class MaxTriesExceeded(GameError):
    message = "Max tries exceeded"

    def __init__(self) -> None:
        super().__init__(None)


class InvalidWord(GameError):
    message = "The word `{word}` is not present in the word list"


class WordLengthMismatch(GameError):
    message = "The word `{word}` is not the same length as the word to guess"


class WordAlreadyGuessed(GameError):
    message = "The word `{word}` has already been guessed"


class UnknownGameError(GameError):
    # reserved for extensions; nothing in this package raises it
    message = "unknown game error"
