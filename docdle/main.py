'''
Docdle API (in-memory)

Endpoints:
GET  /categories               -> body systems to pick from
POST /games?category=...       -> start a game
GET  /games/{id}               -> read state & rows with verdicts
POST /games/{id}/keys          -> press one key (letter, ENTER, BACKSPACE)
POST /games/{id}/guess         -> submit a whole word
POST /games/{id}/restart       -> new word on the same game id
GET  /games/{id}/keyboard      -> best verdict per letter
GET  /games/{id}/hint          -> hint for the current word
GET  /games/{id}/share         -> emoji summary
DELETE /games/{id}             -> drop the game (back to category selection)

Sessions live in memory only; restarting the process forgets them.
'''

import logging
from string import ascii_uppercase
from threading import Lock
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .session import GameSession, IncompleteGuessError, InvalidCategoryError
from .share import category_label, share_text
from .store import SessionStore
from .types import CATEGORIES
from .wordbank import load_word_bank

from .schemas import (
    CategoryOut,
    NewGameResponse,
    KeyRequest,
    GuessRequest,
    GuessRowOut,
    GameStateOut,
    KeyboardOut,
    HintOut,
    ShareOut,
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Docdle API", version="1.0.0")

# Allow everything in dev so the docs and front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# One store per process; the lock makes sure the bank is loaded exactly once
_store: Optional[SessionStore] = None
_store_lock = Lock()

def get_store() -> SessionStore:
    global _store
    with _store_lock:
        if _store is None:
            _store = SessionStore(load_word_bank())
        return _store

# --- Dev convenience: load the word bank before the first request ---
if config.APP_ENV == "local":
    @app.on_event("startup")
    def _warm_store():
        get_store()

def _to_state_out(game_id: str, session: GameSession, accepted: bool = True) -> GameStateOut:
    state = session.state
    rows = []
    i = 0
    while i < len(state.guesses):
        rows.append(GuessRowOut(guess=state.guesses[i], verdicts=session.letter_verdicts(i)))
        i += 1

    return GameStateOut(
        game_id=game_id,
        category=state.category,
        difficulty=state.difficulty,
        word_length=state.word_length,
        attempts_left=state.attempts_left,
        status=state.status,
        pending_guess=state.pending_guess,
        rows=rows,
        accepted=accepted,
        # Only reveal the word once the game is over
        secret=state.secret_word if state.status != "playing" else None,
    )

def _get_session(store: SessionStore, game_id: str) -> GameSession:
    session = store.get(game_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return session

# ---------------- Routes ----------------

@app.get("/categories", response_model=List[CategoryOut], summary="List body systems")
def list_categories(store: SessionStore = Depends(get_store)) -> List[CategoryOut]:
    return [
        CategoryOut(key=key, label=category_label(key), word_count=len(store.bank.get(key, ())))
        for key in CATEGORIES
    ]

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(
    category: str,
    store: SessionStore = Depends(get_store),
) -> NewGameResponse:
    try:
        game_id, session = store.create(category)
    except InvalidCategoryError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    state = session.state
    logger.info("Started game %s (%s, %d letters)", game_id, category, state.word_length)
    return NewGameResponse(
        game_id=game_id,
        category=category,
        difficulty=state.difficulty,
        word_length=state.word_length,
        attempts_left=state.attempts_left,
        status=state.status,
    )

@app.get("/games/{game_id}", response_model=GameStateOut, summary="Get current game state")
def get_game(
    game_id: str,
    store: SessionStore = Depends(get_store),
) -> GameStateOut:
    return _to_state_out(game_id, _get_session(store, game_id))

@app.post("/games/{game_id}/keys", response_model=GameStateOut, summary="Press one key")
def press_key(
    game_id: str,
    payload: KeyRequest,
    store: SessionStore = Depends(get_store),
) -> GameStateOut:
    result = store.press_key(game_id, payload.key)
    if result is None:
        raise HTTPException(status_code=404, detail="Game not found")
    session, accepted = result
    return _to_state_out(game_id, session, accepted)

@app.post("/games/{game_id}/guess", response_model=GameStateOut, summary="Submit a whole word")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: SessionStore = Depends(get_store),
) -> GameStateOut:
    # enter_word() does the length check; nothing changes if it fails
    try:
        session = store.guess(game_id, payload.guess)
    except IncompleteGuessError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if session is None:
        raise HTTPException(status_code=404, detail="Game not found")

    if session.current_status() != "playing":
        logger.info("Game %s finished: %s", game_id, session.current_status())
    return _to_state_out(game_id, session)

@app.post("/games/{game_id}/restart", response_model=GameStateOut, summary="Start over with a new word")
def restart_game(
    game_id: str,
    category: str,
    store: SessionStore = Depends(get_store),
) -> GameStateOut:
    try:
        session = store.restart(game_id, category)
    except InvalidCategoryError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if session is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return _to_state_out(game_id, session)

@app.get("/games/{game_id}/keyboard", response_model=KeyboardOut, summary="Best verdict per letter")
def get_keyboard(
    game_id: str,
    store: SessionStore = Depends(get_store),
) -> KeyboardOut:
    session = _get_session(store, game_id)
    return KeyboardOut(letters={letter: session.keyboard_status(letter) for letter in ascii_uppercase})

@app.get("/games/{game_id}/hint", response_model=HintOut, summary="Get the hint for the current word")
def get_hint(
    game_id: str,
    store: SessionStore = Depends(get_store),
) -> HintOut:
    state = _get_session(store, game_id).state
    return HintOut(
        hint=state.hint,
        difficulty=state.difficulty,
        supplementary_info=state.supplementary_info,
    )

@app.get("/games/{game_id}/share", response_model=ShareOut, summary="Get shareable results")
def get_share(
    game_id: str,
    store: SessionStore = Depends(get_store),
) -> ShareOut:
    state = _get_session(store, game_id).state
    return ShareOut(text=share_text(state, url=config.SHARE_URL or None))

@app.delete("/games/{game_id}", summary="Leave the game (back to category selection)")
def leave_game(
    game_id: str,
    store: SessionStore = Depends(get_store),
) -> dict:
    _get_session(store, game_id)
    store.discard(game_id)
    return {"message": "Game discarded."}
