"""
- HTTP call with retry and a clear fallback
Load the medical word bank (category -> list of words) from a JSON resource.
If anything goes wrong (no URL, no internet, timeout, bad JSON, missing
categories) we retry with exponential backoff and then fall back to the small
built-in bank below, so the game always has words to play with.
"""

import logging
import time
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from . import config
from .types import CATEGORIES, Difficulty

logger = logging.getLogger(__name__)

class BankLoadError(Exception):
    """One failed attempt at loading the remote bank. Never leaves this module."""

class WordEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    word: str = Field(..., description="The secret word, stored uppercase")
    hint: Optional[str] = Field(None, description="Short clue shown on request")
    difficulty: Difficulty = Field(..., description="easy | medium | hard")
    supplementary_info: Optional[str] = Field(
        None, alias="supplementaryInfo", description="Extra fact shown with the hint"
    )

    @field_validator("word")
    @classmethod
    def validate_word(cls, word: str) -> str:
        word = word.strip()
        if not word.isascii() or not word.isalpha():
            raise ValueError("Word must contain letters A-Z only.")
        return word.upper()

# category -> entries; read-only once loaded
WordBank = Mapping[str, Tuple[WordEntry, ...]]

def _entries(*rows: Tuple[str, str, str]) -> Tuple[WordEntry, ...]:
    return tuple(WordEntry(word=w, hint=h, difficulty=d) for w, h, d in rows)

# Only used if the remote bank can't be loaded (e.g. first run, offline).
FALLBACK_WORDS: WordBank = MappingProxyType({
    "cardiovascular": _entries(
        ("HEART", "Muscular organ that pumps blood", "easy"),
        ("AORTA", "Largest artery in the body", "medium"),
        ("VALVE", "Controls blood flow direction", "easy"),
        ("SYSTOLE", "Contraction phase of heart", "hard"),
        ("MURMUR", "Abnormal heart sound", "medium"),
    ),
    "respiratory": _entries(
        ("LUNGS", "Paired organs for gas exchange", "easy"),
        ("ALVEOLI", "Tiny air sacs where gas exchange occurs", "medium"),
        ("BRONCHI", "Main airways leading to lungs", "medium"),
        ("DIAPHRAGM", "Primary breathing muscle", "hard"),
        ("ASTHMA", "Chronic airway inflammation", "easy"),
    ),
    "nervous": _entries(
        ("BRAIN", "Control center of the nervous system", "easy"),
        ("NEURON", "Basic nerve cell", "easy"),
        ("SYNAPSE", "Junction between neurons", "medium"),
        ("MYELIN", "Insulating sheath on axons", "medium"),
        ("AMYGDALA", "Emotion processing center", "hard"),
    ),
    "skeletal": _entries(
        ("BONES", "Hard structures of the skeleton", "easy"),
        ("FEMUR", "Longest bone in body", "easy"),
        ("OSTEON", "Basic unit of compact bone", "hard"),
        ("LIGAMENT", "Connects bone to bone", "medium"),
        ("PATELLA", "Kneecap", "easy"),
    ),
    "muscular": _entries(
        ("MUSCLE", "Contracts to produce movement", "easy"),
        ("BICEPS", "Anterior upper arm muscle", "easy"),
        ("SARCOMERE", "Contractile unit of muscle", "hard"),
        ("TENDON", "Connects muscle to bone", "easy"),
        ("MYOSIN", "Thick filament protein", "medium"),
    ),
})

def parse_word_bank(data: Any) -> WordBank:
    """
    Validate decoded JSON and turn it into a WordBank.
    Every required category must be present and mapped to a list.
    Extra keys are ignored.
    """
    if not isinstance(data, dict) or not data:
        raise BankLoadError("Empty or invalid data received")

    missing = [key for key in CATEGORIES if not isinstance(data.get(key), list)]
    if missing:
        raise BankLoadError(f"Missing required categories: {', '.join(missing)}")

    bank: Dict[str, Tuple[WordEntry, ...]] = {}
    for key in CATEGORIES:
        try:
            bank[key] = tuple(WordEntry.model_validate(row) for row in data[key])
        except ValidationError as exc:
            raise BankLoadError(f"Bad entry in category {key!r}: {exc}") from exc
    return MappingProxyType(bank)

def fetch_word_bank(url: str, timeout: float) -> WordBank:
    """One attempt: GET the resource and validate it."""
    try:
        response = requests.get(url, timeout=timeout, headers={"Cache-Control": "no-store"})
        # If the response was not 200 OK, this will raise an error
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as exc:
        raise BankLoadError(str(exc)) from exc
    return parse_word_bank(data)

def load_word_bank(
    url: Optional[str] = None,
    retries: Optional[int] = None,
    backoff: Optional[float] = None,
    timeout: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> WordBank:
    """
    Try the remote bank up to `retries` times, waiting backoff * 2**attempt
    between tries (0.5s, 1s with the defaults). Returns FALLBACK_WORDS when
    every attempt fails or no URL is configured.
    """
    url = url if url is not None else config.WORDBANK_URL
    retries = retries if retries is not None else config.WORDBANK_RETRIES
    backoff = backoff if backoff is not None else config.WORDBANK_BACKOFF
    timeout = timeout if timeout is not None else config.WORDBANK_TIMEOUT

    if not url:
        logger.info("No WORDBANK_URL configured, using built-in word bank")
        return FALLBACK_WORDS

    attempt = 0
    while attempt < retries:
        try:
            bank = fetch_word_bank(url, timeout)
            logger.info("Loaded word bank from %s (attempt %d)", url, attempt + 1)
            return bank
        except BankLoadError as exc:
            logger.warning("Failed to load word bank (attempt %d): %s", attempt + 1, exc)

        attempt += 1
        if attempt < retries:
            delay = backoff * (2 ** (attempt - 1))
            logger.debug("Retrying in %.1fs", delay)
            sleep(delay)

    logger.info("All %d attempts failed, using built-in word bank", retries)
    return FALLBACK_WORDS
