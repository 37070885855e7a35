"""
Testing the session state machine.
- Index picker is fixed so we know the secret word.
"""

import pytest

from docdle.session import (
    GameSession,
    SessionState,
    IncompleteGuessError,
    InvalidCategoryError,
    AppendLetter,
    SubmitGuess,
    StartNewGame,
    append_letter,
    submit_guess,
    transition,
)

def first_word(n: int) -> int:
    return 0

def type_word(session: GameSession, word: str) -> None:
    for ch in word:
        session.append_letter(ch)

def test_start_new_game_picks_with_injected_index(bank):
    session = GameSession.start("cardiovascular", bank, pick_index=lambda n: 1)
    state = session.state
    assert state.secret_word == "AORTA"
    assert state.hint == "Largest artery in the body"
    assert state.difficulty == "medium"
    assert state.category == "cardiovascular"
    assert state.guesses == ()
    assert state.pending_guess == ""
    assert session.current_status() == "playing"

def test_start_new_game_invalid_category(bank, level_bank):
    with pytest.raises(InvalidCategoryError):
        GameSession.start("digestive", bank)
    # Present but empty
    with pytest.raises(InvalidCategoryError):
        GameSession.start("nervous", level_bank)

def test_append_letter_rules(bank):
    session = GameSession.start("cardiovascular", bank, first_word)  # HEART
    session.append_letter("h")
    session.append_letter("1")
    session.append_letter("AB")
    session.append_letter("")
    session.append_letter("é")
    assert session.state.pending_guess == "H"

    type_word(session, "EARTX")
    # Capped at the word length
    assert session.state.pending_guess == "HEART"

def test_delete_letter(bank):
    session = GameSession.start("cardiovascular", bank, first_word)
    session.delete_letter()
    assert session.state.pending_guess == ""
    type_word(session, "HEA")
    session.delete_letter()
    assert session.state.pending_guess == "HE"

def test_submit_incomplete_is_a_noop(bank):
    session = GameSession.start("cardiovascular", bank, first_word)
    type_word(session, "HEA")
    before = session.state
    assert session.submit_guess() is False
    assert session.state is before
    assert session.state.pending_guess == "HEA"

def test_pure_submit_raises_and_leaves_state_alone(bank):
    state = transition(None, StartNewGame("cardiovascular", bank, first_word))
    state = transition(state, AppendLetter("H"))
    with pytest.raises(IncompleteGuessError):
        transition(state, SubmitGuess())
    assert state.pending_guess == "H"
    assert state.guesses == ()

def test_transition_requires_a_game():
    with pytest.raises(ValueError):
        transition(None, AppendLetter("A"))

def test_win_on_exact_guess(bank):
    session = GameSession.start("cardiovascular", bank, first_word)
    type_word(session, "HEART")
    assert session.submit_guess() is True
    assert session.current_status() == "won"
    assert session.letter_verdicts(0) == ["correct"] * 5

    # Game over: no more input
    session.append_letter("A")
    session.delete_letter()
    assert session.state.pending_guess == ""
    assert session.submit_guess() is False
    assert len(session.state.guesses) == 1

def test_six_wrong_guesses_lose(bank):
    session = GameSession.start("cardiovascular", bank, first_word)
    for _ in range(6):
        type_word(session, "EARTH")
        assert session.submit_guess() is True

    state = session.state
    assert state.status == "lost"
    assert len(state.guesses) == 6
    assert state.secret_word == "HEART"
    assert state.attempts_left == 0

def test_win_on_last_guess(bank):
    session = GameSession.start("cardiovascular", bank, first_word)
    for _ in range(5):
        type_word(session, "VALVE")
        session.submit_guess()
    assert session.current_status() == "playing"
    type_word(session, "HEART")
    session.submit_guess()
    assert session.current_status() == "won"

def test_duplicate_guesses_are_accepted(bank):
    session = GameSession.start("cardiovascular", bank, first_word)
    type_word(session, "EARTH")
    session.submit_guess()
    type_word(session, "EARTH")
    assert session.submit_guess() is True
    assert session.state.guesses == ("EARTH", "EARTH")

def test_start_new_game_mid_game_resets(bank):
    session = GameSession.start("cardiovascular", bank, first_word)
    type_word(session, "EARTH")
    session.submit_guess()
    type_word(session, "HE")

    session.start_new_game("respiratory")
    state = session.state
    assert state.secret_word == "LUNGS"
    assert state.guesses == ()
    assert state.pending_guess == ""
    assert state.status == "playing"

def test_start_new_game_after_finish(bank):
    session = GameSession.start("cardiovascular", bank, first_word)
    type_word(session, "HEART")
    session.submit_guess()
    session.start_new_game("cardiovascular")
    assert session.current_status() == "playing"
    assert session.state.guesses == ()

def test_enter_word_all_or_nothing(bank):
    session = GameSession.start("cardiovascular", bank, first_word)
    type_word(session, "HE")

    with pytest.raises(IncompleteGuessError):
        session.enter_word("HEA")
    with pytest.raises(IncompleteGuessError):
        session.enter_word("HEARTS")
    with pytest.raises(IncompleteGuessError):
        session.enter_word("HE4RT")
    assert session.state.pending_guess == "HE"
    assert session.state.guesses == ()

    session.enter_word("earth")
    assert session.state.guesses == ("EARTH",)
    assert session.state.pending_guess == ""

def test_letter_verdicts_and_keyboard(level_bank):
    session = GameSession.start("cardiovascular", level_bank)
    assert session.state.supplementary_info == "Palindrome"
    session.enter_word("ELVES")
    assert session.letter_verdicts(0) == ["present", "present", "correct", "correct", "absent"]
    # Unplayed rows have no verdicts
    assert session.letter_verdicts(1) is None
    assert session.letter_verdicts(-1) is None
    assert session.keyboard_status("v") == "correct"
    assert session.keyboard_status("S") == "absent"
    assert session.keyboard_status("Q") is None

def test_session_invariants_hold_over_random_play(bank):
    session = GameSession.start("skeletal", bank, first_word)  # BONES
    keys = "XBONESQ" * 10
    for i, ch in enumerate(keys):
        if i % 7 == 6:
            session.submit_guess()
        elif i % 11 == 10:
            session.delete_letter()
        else:
            session.append_letter(ch)

        state = session.state
        assert 0 <= len(state.guesses) <= 6
        assert len(state.pending_guess) <= state.word_length
        if state.status != "playing":
            assert len(state.guesses) >= 1

def test_pure_helpers_return_new_states():
    state = SessionState(secret_word="HEART")
    typed = append_letter(state, "H")
    assert typed is not state
    assert state.pending_guess == ""

    full = SessionState(secret_word="HEART", pending_guess="HEART")
    done = submit_guess(full)
    assert done.status == "won"
    assert full.status == "playing"

def test_enter_word_after_finish_is_ignored(bank):
    session = GameSession.start("cardiovascular", bank, first_word)
    session.enter_word("HEART")
    before = session.state
    # Any length: the game is over, nothing is raised and nothing changes
    assert session.enter_word("HEARTS") is before
    assert session.enter_word("EARTH") is before
    assert session.current_status() == "won"
