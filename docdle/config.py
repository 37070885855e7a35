"""
Single place to:
- Load env vars from .env if present
- Read the word bank source and retry settings
- Read logging / share settings

Why: keeps os.getenv calls out of the game code and easy to monkeypatch in tests.
"""

import os

from dotenv import load_dotenv

# 1) Load env vars from .env if present
# dev convenience; in prod the platform injects env vars
load_dotenv()

# 2) Environment name ("local", "test", "prod")
APP_ENV = os.getenv("APP_ENV", "local")

# 3) Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# 4) Word bank source. Empty -> built-in fallback bank only.
WORDBANK_URL = os.getenv("WORDBANK_URL", "")

# 5) Retry policy for the word bank fetch.
#    3 attempts, waiting 0.5s then 1s between them.
WORDBANK_TIMEOUT = float(os.getenv("WORDBANK_TIMEOUT", "3.0"))
WORDBANK_RETRIES = int(os.getenv("WORDBANK_RETRIES", "3"))
WORDBANK_BACKOFF = float(os.getenv("WORDBANK_BACKOFF", "0.5"))

# 6) Link appended to share text ("Play at: ..."); empty -> no link line
SHARE_URL = os.getenv("SHARE_URL", "")
