"""
Labels for clarity.
"""

from typing import Literal, Tuple

LetterVerdict = Literal["correct", "present", "absent"]
GameStatus = Literal["playing", "won", "lost"]
Difficulty = Literal["easy", "medium", "hard"]
Category = Literal["cardiovascular", "respiratory", "nervous", "skeletal", "muscular"]

# Order matters: this is also the order categories are listed in
CATEGORIES: Tuple[str, ...] = ("cardiovascular", "respiratory", "nervous", "skeletal", "muscular")

MAX_GUESSES = 6
