"""
Share text for a finished (or abandoned) game.

  Docdle Cardiovascular 3/6

  🟨⬜⬜🟩⬜
  ⬜🟩🟨🟩⬜
  🟩🟩🟩🟩🟩

  Play at: https://...
"""

from typing import Optional

from .engine import score_guess
from .session import SessionState
from .types import MAX_GUESSES

GAME_TITLE = "Docdle"

BLOCKS = {
    "correct": "\U0001F7E9",  # green
    "present": "\U0001F7E8",  # yellow
    "absent": "\u2B1C",        # neutral
}

def category_label(category: Optional[str]) -> str:
    if not category:
        return ""
    return category.replace("_", " ").title()

def share_text(state: SessionState, url: Optional[str] = None) -> str:
    guess_count = str(len(state.guesses)) if state.status == "won" else "X"
    header = f"{GAME_TITLE} {category_label(state.category)} {guess_count}/{MAX_GUESSES}"

    rows = []
    for guess in state.guesses:
        rows.append("".join(BLOCKS[v] for v in score_guess(state.secret_word, guess)))

    text = header + "\n\n" + "\n".join(rows)
    if url:
        text += "\n\nPlay at: " + url
    return text
