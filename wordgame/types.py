"""
Labels for clarity.
"""

from typing import Literal, TypeVar

W = TypeVar("W")  # a candidate value (e.g. a word)
E = TypeVar("E")  # one atomic element of a candidate (e.g. a letter)

Mark = Literal["correct", "incorrect", "misplaced", "empty", "custom"]
GameStatus = Literal["in_progress", "won", "lost"]
