"""
- Build a word bank and store where the secret word is predictable
- Override FastAPI's get_store so routes use the test store
- Provide a client fixture (TestClient(app)) that already has the override applied
"""
import os
import pytest

from fastapi.testclient import TestClient

# Never hit the network while tests import the app
os.environ.setdefault("APP_ENV", "test")
os.environ["WORDBANK_URL"] = ""

from docdle.main import app, get_store
from docdle.store import SessionStore
from docdle.wordbank import FALLBACK_WORDS, parse_word_bank

def first_word(n: int) -> int:
    """Index picker that always chooses the first entry."""
    return 0

@pytest.fixture
def bank():
    # Built-in bank: index 0 is HEART / LUNGS / BRAIN / BONES / MUSCLE
    return FALLBACK_WORDS

@pytest.fixture
def level_bank():
    """Tiny bank with duplicate letters in the secret."""
    data = {
        "cardiovascular": [{"word": "level", "hint": "Not a real organ", "difficulty": "easy",
                            "supplementaryInfo": "Palindrome"}],
        "respiratory": [],
        "nervous": [],
        "skeletal": [],
        "muscular": [],
    }
    return parse_word_bank(data)

@pytest.fixture
def store(bank):
    return SessionStore(bank, pick_index=first_word)

@pytest.fixture(autouse=True)
def override_dep(store):
    """Force the app to use our test store for every request."""
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    # This client talks to the FastAPI app in-process.
    return TestClient(app)
