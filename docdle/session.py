"""
Game session: explicit state + pure transitions.

SessionState is immutable. Every command produces a brand new state (or the
same object when the command is a no-op), so a transition can never leave a
half-updated session behind. GameSession is the small mutable holder the
store and the UI layer talk to.

Per-letter verdicts are never stored; they're recomputed from the raw guess
strings whenever somebody asks.
"""

from dataclasses import dataclass, field, replace
from secrets import randbelow
from typing import Callable, List, Optional, Tuple, Union

from .engine import is_win, keyboard_status, score_guess
from .types import Category, Difficulty, GameStatus, LetterVerdict, MAX_GUESSES
from .wordbank import WordBank

# Returns an index in [0, n); injectable so tests can force the secret word
IndexPicker = Callable[[int], int]

class InvalidCategoryError(ValueError):
    """Unknown category, or a category with no words in the bank."""

class IncompleteGuessError(ValueError):
    """Submit attempted before the pending guess reached the word length."""

@dataclass(frozen=True)
class SessionState:
    secret_word: str
    hint: str = ""
    difficulty: Difficulty = "easy"
    guesses: Tuple[str, ...] = ()
    pending_guess: str = ""
    status: GameStatus = "playing"
    category: Optional[Category] = None
    supplementary_info: Optional[str] = None

    @property
    def word_length(self) -> int:
        return len(self.secret_word)

    @property
    def attempts_left(self) -> int:
        return MAX_GUESSES - len(self.guesses)

# --- Commands ---

@dataclass(frozen=True)
class StartNewGame:
    category: str
    bank: WordBank = field(repr=False)
    pick_index: IndexPicker = randbelow

@dataclass(frozen=True)
class AppendLetter:
    letter: str

@dataclass(frozen=True)
class DeleteLetter:
    pass

@dataclass(frozen=True)
class SubmitGuess:
    pass

Command = Union[StartNewGame, AppendLetter, DeleteLetter, SubmitGuess]

# --- Transitions ---

def start_new_game(category: str, bank: WordBank, pick_index: IndexPicker = randbelow) -> SessionState:
    entries = bank.get(category)
    if not entries:
        raise InvalidCategoryError(f"Unknown or empty category: {category!r}")

    entry = entries[pick_index(len(entries))]
    return SessionState(
        secret_word=entry.word.upper(),
        hint=entry.hint or "",
        difficulty=entry.difficulty,
        category=category,
        supplementary_info=entry.supplementary_info,
    )

def append_letter(state: SessionState, letter: str) -> SessionState:
    if state.status != "playing":
        return state
    # Anything that isn't exactly one letter A-Z is ignored
    if len(letter) != 1 or not letter.isascii() or not letter.isalpha():
        return state
    if len(state.pending_guess) >= state.word_length:
        return state
    return replace(state, pending_guess=state.pending_guess + letter.upper())

def delete_letter(state: SessionState) -> SessionState:
    if state.status != "playing" or not state.pending_guess:
        return state
    return replace(state, pending_guess=state.pending_guess[:-1])

def submit_guess(state: SessionState) -> SessionState:
    """
    Commit the pending guess.
    Raises IncompleteGuessError when the pending guess is too short;
    the state passed in is untouched either way.
    """
    if state.status != "playing":
        return state

    guess = state.pending_guess
    if len(guess) != state.word_length:
        raise IncompleteGuessError(f"Guess must have exactly {state.word_length} letters.")

    guesses = state.guesses + (guess,)
    if is_win(state.secret_word, guess):
        status = "won"
    elif len(guesses) >= MAX_GUESSES:
        status = "lost"
    else:
        status = "playing"

    return replace(state, guesses=guesses, pending_guess="", status=status)

def transition(state: Optional[SessionState], command: Command) -> SessionState:
    """(state, command) -> state. Only StartNewGame is allowed without a state."""
    if isinstance(command, StartNewGame):
        return start_new_game(command.category, command.bank, command.pick_index)
    if state is None:
        raise ValueError("No game in progress; start a new game first.")
    if isinstance(command, AppendLetter):
        return append_letter(state, command.letter)
    if isinstance(command, DeleteLetter):
        return delete_letter(state)
    if isinstance(command, SubmitGuess):
        return submit_guess(state)
    raise TypeError(f"Unknown command: {command!r}")

# --- Derived, read-only views ---

def letter_verdicts(state: SessionState, row_index: int) -> Optional[List[LetterVerdict]]:
    """Verdicts for a committed row, or None for rows not played yet."""
    if row_index < 0 or row_index >= len(state.guesses):
        return None
    return score_guess(state.secret_word, state.guesses[row_index])

class GameSession:
    """Mutable holder around SessionState for one input source (UI or test driver)."""

    def __init__(self, bank: WordBank, pick_index: IndexPicker = randbelow) -> None:
        self.bank = bank
        self.pick_index = pick_index
        self.state: Optional[SessionState] = None

    @classmethod
    def start(cls, category: str, bank: WordBank, pick_index: IndexPicker = randbelow) -> "GameSession":
        session = cls(bank, pick_index)
        session.start_new_game(category)
        return session

    def dispatch(self, command: Command) -> SessionState:
        self.state = transition(self.state, command)
        return self.state

    def start_new_game(self, category: str) -> SessionState:
        # Whatever was in flight is simply dropped
        return self.dispatch(StartNewGame(category, self.bank, self.pick_index))

    def append_letter(self, letter: str) -> SessionState:
        return self.dispatch(AppendLetter(letter))

    def delete_letter(self) -> SessionState:
        return self.dispatch(DeleteLetter())

    def submit_guess(self) -> bool:
        """
        True if a guess was committed, False if it was incomplete (or the game
        is over). The UI uses False to shake the current row.
        """
        before = self.state
        try:
            self.dispatch(SubmitGuess())
        except IncompleteGuessError:
            return False
        return self.state is not before

    def enter_word(self, word: str) -> SessionState:
        """
        Type a whole word and submit it in one step.
        All-or-nothing: on IncompleteGuessError nothing changes, including
        the pending guess.
        """
        state = self._require_state()
        # Finished games ignore further guesses, whatever their length
        if state.status != "playing":
            return state
        while state.pending_guess:
            state = delete_letter(state)
        for ch in word:
            state = append_letter(state, ch)
        # Extra letters past the word length would be silently dropped
        if len(word) != state.word_length:
            raise IncompleteGuessError(f"Guess must have exactly {state.word_length} letters.")
        self.state = submit_guess(state)
        return self.state

    # --- queries ---

    def letter_verdicts(self, row_index: int) -> Optional[List[LetterVerdict]]:
        return letter_verdicts(self._require_state(), row_index)

    def keyboard_status(self, letter: str) -> Optional[LetterVerdict]:
        state = self._require_state()
        return keyboard_status(letter.upper(), state.guesses, state.secret_word)

    def current_status(self) -> GameStatus:
        return self._require_state().status

    def _require_state(self) -> SessionState:
        if self.state is None:
            raise ValueError("No game in progress; start a new game first.")
        return self.state
