"""
In-memory store
Holds game sessions in memory, keyed by game id. Nothing is persisted.
"""

from secrets import randbelow
from threading import RLock
from typing import Dict, Optional
from uuid import uuid4

from .session import GameSession, IndexPicker
from .wordbank import WordBank

class SessionStore:
    def __init__(self, bank: WordBank, pick_index: IndexPicker = randbelow) -> None:
        self.bank = bank
        self.pick_index = pick_index
        self._sessions: Dict[str, GameSession] = {}
        # One request at a time touches a session
        self._lock = RLock()

    def create(self, category: str) -> tuple[str, GameSession]:
        # Raises InvalidCategoryError before anything is stored
        session = GameSession.start(category, self.bank, self.pick_index)
        new_id = str(uuid4())
        with self._lock:
            self._sessions[new_id] = session
        return new_id, session

    def get(self, game_id: str) -> Optional[GameSession]:
        with self._lock:
            return self._sessions.get(game_id)

    def press_key(self, game_id: str, key: str) -> Optional[tuple[GameSession, bool]]:
        """
        Keyboard input: a letter, "ENTER" or "BACKSPACE".
        Returns (session, accepted); accepted is False when ENTER hit an
        incomplete row so the UI can shake it.
        """
        with self._lock:
            session = self._sessions.get(game_id)
            if session is None:
                return None

            key = key.strip().upper()
            if key == "ENTER":
                return session, session.submit_guess()
            if key == "BACKSPACE":
                session.delete_letter()
            else:
                session.append_letter(key)
            return session, True

    def guess(self, game_id: str, word: str) -> Optional[GameSession]:
        with self._lock:
            session = self._sessions.get(game_id)
            if session is None:
                return None
            # Raises IncompleteGuessError; state is left as it was
            session.enter_word(word)
            return session

    def restart(self, game_id: str, category: str) -> Optional[GameSession]:
        with self._lock:
            session = self._sessions.get(game_id)
            if session is None:
                return None
            session.start_new_game(category)
            return session

    def discard(self, game_id: str) -> None:
        with self._lock:
            self._sessions.pop(game_id, None)
