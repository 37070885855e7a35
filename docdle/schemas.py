"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the client and server.
- Defines the structure of API requests and responses.
"""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

Verdict = Literal["correct", "present", "absent"]
Status = Literal["playing", "won", "lost"]

# 1. One category and how many words it holds
class CategoryOut(BaseModel):
    key: str = Field(..., description="Category key used when starting a game")
    label: str = Field(..., description="Human readable name")
    word_count: int = Field(..., description="Number of words in this category")

# 2. Response when a new game is started
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; secret is never returned")
    category: str = Field(..., description="Body system the word was drawn from")
    difficulty: Literal["easy", "medium", "hard"] = Field(..., description="Difficulty of the drawn word")
    word_length: int = Field(..., description="How many letters each guess must have")
    attempts_left: int = Field(..., description="How many guesses remain")
    status: Status = Field(..., description="Current state of the game")

# 3. A single keyboard press
class KeyRequest(BaseModel):
    key: str = Field(..., description="A single letter, 'ENTER' or 'BACKSPACE'")

    model_config = {
        "json_schema_extra": {
            "examples": [{"key": "H"}, {"key": "BACKSPACE"}, {"key": "ENTER"}]
        }
    }

# 4. Whole-word guess
class GuessRequest(BaseModel):
    guess: str = Field(..., description="The full word. Letters only, case-insensitive.")

    @field_validator("guess")
    @classmethod
    def validate_letters(cls, guess: str) -> str:
        """
        We only check the characters here.
        The length depends on the secret word, so the route checks it.
        """
        guess = guess.strip()
        if not guess.isascii() or not guess.isalpha():
            raise ValueError("Guess must contain letters A-Z only.")
        return guess.upper()

    model_config = {
        "json_schema_extra": {"examples": [{"guess": "HEART"}]}
    }

# 5. One committed guess and its per-letter verdicts
class GuessRowOut(BaseModel):
    guess: str = Field(..., description="The player's guess")
    verdicts: List[Verdict] = Field(..., description="Verdict for each letter, in order")

# 6. Overall state of the game
class GameStateOut(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    category: Optional[str] = Field(None, description="Body system of the secret word")
    difficulty: Literal["easy", "medium", "hard"] = Field(..., description="Difficulty of the secret word")
    word_length: int = Field(..., description="Letters per guess")
    attempts_left: int = Field(..., description="How many guesses remain")
    status: Status = Field(..., description="Current state of the game")
    pending_guess: str = Field(..., description="Letters typed but not submitted yet")
    rows: List[GuessRowOut] = Field(..., description="All guesses made so far with verdicts")
    accepted: bool = Field(True, description="False when ENTER was pressed on an incomplete row")
    secret: Optional[str] = Field(None, description="The secret word (only revealed if game is over)")

# 7. Best known status of each keyboard letter
class KeyboardOut(BaseModel):
    letters: Dict[str, Optional[Verdict]] = Field(..., description="A-Z -> best verdict seen, or null")

# 8. Hint for the current word
class HintOut(BaseModel):
    hint: str = Field(..., description="Clue for the secret word")
    difficulty: Literal["easy", "medium", "hard"] = Field(..., description="Difficulty of the secret word")
    supplementary_info: Optional[str] = Field(None, description="Extra fact, when the bank has one")

# 9. Share text
class ShareOut(BaseModel):
    text: str = Field(..., description="Emoji grid summary, ready to paste")
