"""
Configuration
==============
Environment-driven settings. A `.env` file at the project root is loaded
first, so local overrides never need to be exported by hand.
"""

import os

from dotenv import load_dotenv

_env_path = os.path.join(os.path.dirname(__file__), "..", "..", ".env")
load_dotenv(dotenv_path=_env_path)

LOGGER_NAME = "fixture_platform"

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

# Upper bound on rejection-sampling rounds for pattern-constrained strings
MAX_PATTERN_ATTEMPTS: int = int(os.environ.get("MAX_PATTERN_ATTEMPTS", "1000"))

DEFAULT_COUNTRY_CODE: str = os.environ.get("DEFAULT_COUNTRY_CODE", "FR").upper()

# ── Server ──
MAX_BATCH_SIZE: int = int(os.environ.get("MAX_BATCH_SIZE", "100"))
HOST: str = os.environ.get("HOST", "0.0.0.0")
PORT: int = int(os.environ.get("PORT", "8000"))
