"""
Explicit validation & Pydantic models
- Validate requests and shape responses for the HTTP layer.
- The target is never returned while the game is still in progress.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .engine import AtomicResult, ScoredGuess

MarkOut = Literal["correct", "incorrect", "misplaced", "empty", "custom"]
StatusOut = Literal["in_progress", "won", "lost"]


# 1. Starts a game. The caller picks the target and the allowed words.
class NewGameRequest(BaseModel):
    target: str = Field(..., description="The word to guess; kept secret until the game ends")
    candidates: List[str] = Field(..., description="Words accepted as guesses; should include the target")
    max_tries: int = Field(6, ge=0, description="How many guesses the player gets")

    @field_validator("target")
    @classmethod
    def validate_target(cls, target: str) -> str:
        if not target:
            raise ValueError("Target must not be empty.")
        return target

    @field_validator("candidates")
    @classmethod
    def validate_candidates(cls, candidates: List[str]) -> List[str]:
        """
        Only checks that no candidate is empty. Membership of the target and
        matching lengths are left to the caller, same as the engine.
        """
        for word in candidates:
            if not word:
                raise ValueError("Candidates must not contain empty words.")
        return candidates

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"target": "hello", "candidates": ["hello", "world", "hella"], "max_tries": 6},
                {"target": "4821", "candidates": ["4821", "1234", "9999"], "max_tries": 5},
            ]
        }
    }

# 2. Represents response when a new game is started
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; target is never returned")
    max_tries: int = Field(..., description="Total guesses allowed")
    word_length: int = Field(..., description="How many letters the target has")
    status: StatusOut = Field(..., description="Current state of the game")

# 3. A player's guess
class GuessRequest(BaseModel):
    word: str = Field(..., description="The guessed word")

# 4. One cell of a scored row
class CellOut(BaseModel):
    mark: MarkOut = Field(..., description="Outcome for this letter")
    value: Optional[str] = Field(None, description="The guessed letter (empty cells have none)")

    @classmethod
    def from_result(cls, cell: AtomicResult) -> "CellOut":
        return cls(mark=cell.mark, value=None if cell.value is None else str(cell.value))

# 5. One scored row
class ScoredGuessOut(BaseModel):
    word: str = Field(..., description="The guessed word ('' for padding rows)")
    cells: List[CellOut] = Field(..., description="Per-letter outcome")

    @classmethod
    def from_guess(cls, guess: ScoredGuess) -> "ScoredGuessOut":
        return cls(word=str(guess.word), cells=[CellOut.from_result(c) for c in guess.cells])

# 6. Represents the overall state of the game
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    max_tries: int = Field(..., description="Total guesses allowed (0 once the game is ended)")
    tries_left: int = Field(..., description="How many guesses remain")
    status: StatusOut = Field(..., description="Current state of the game")
    game_over: bool = Field(..., description="True once the game is won or lost")
    history: List[ScoredGuessOut] = Field(..., description="All accepted guesses with feedback")

# 7. Result of a guess (or of guessing on a finished game)
class GuessResponse(BaseModel):
    tries_left: int = Field(..., description="How many guesses remain")
    status: StatusOut = Field(..., description="Current state of the game")
    feedback: ScoredGuessOut | None = Field(None, description="Feedback from the latest guess")
    target: str | None = Field(None, description="The target (only revealed if game is over)")
    note: str | None = Field(None, description="Extra note (ex. 'Game lost. No more guesses allowed.')")

# 8. Rows ready for display
class BoardOut(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    rows: List[ScoredGuessOut] = Field(..., description="History, typed row and padding rows")
