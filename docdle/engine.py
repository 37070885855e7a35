"""
Pure game logic (no HTTP, no storage).
For each guess we compute one verdict per letter:
- correct: right letter, right place
- present: letter is in the secret but somewhere else
- absent:  letter is not in the secret, or every copy of it is already accounted for

Duplicates are allowed in both the secret and the guess. Correct positions claim
their copies first, then the leftmost remaining guess letters get "present".
"""

from typing import Iterable, List, Optional
from .types import LetterVerdict

def letter_verdict(secret: str, guess: str, position: int) -> LetterVerdict:
    """
    Verdict for a single position of `guess`.

    Example (secret LEVEL, guess ELVES):
      position 0 'E' -> E occurs 2x in LEVEL, 1 already correct (pos 3), 0 before -> present
      position 4 'S' -> S not in LEVEL -> absent
    """
    letter = guess[position]
    if secret[position] == letter:
        return "correct"

    # How many copies the secret has to hand out
    target_count = secret.count(letter)
    if target_count == 0:
        return "absent"

    # Copies claimed by exact matches anywhere in the guess
    correct_count = 0
    for s, g in zip(secret, guess):
        if g == letter and s == letter:
            correct_count += 1

    # Copies claimed by misplaced occurrences to the left of us
    before_count = 0
    i = 0
    while i < position:
        if guess[i] == letter and secret[i] != letter:
            before_count += 1
        i += 1

    if correct_count + before_count < target_count:
        return "present"
    return "absent"

def score_guess(secret: str, guess: str) -> List[LetterVerdict]:
    """
    Example:
      secret = "HEART"
      guess  = "EARTH"
      -> ["present", "present", "present", "present", "present"]
    """
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    return [letter_verdict(secret, guess, i) for i in range(n)]

def keyboard_status(letter: str, guesses: Iterable[str], secret: str) -> Optional[LetterVerdict]:
    """
    Best verdict seen for `letter` across every committed guess.
    correct > present > absent > None (letter never guessed).
    """
    best: Optional[LetterVerdict] = None
    for guess in guesses:
        for i, g in enumerate(guess):
            if g != letter:
                continue
            verdict = letter_verdict(secret, guess, i)
            if verdict == "correct":
                return "correct"
            if verdict == "present":
                best = "present"
            elif best is None:
                best = "absent"
    return best

def is_win(secret: str, guess: str) -> bool:
    """
    Win = every letter matches in order.
    """
    return len(secret) > 0 and secret == guess
