"""Local configuration for fragedit."""

from __future__ import annotations

import os

DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "fragedit/0.1"
DEFAULT_LOG_LEVEL = "WARNING"

FRAGEDIT_FETCH_TIMEOUT_S = float(os.getenv("FRAGEDIT_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
FRAGEDIT_FETCH_MAX_RETRIES = int(os.getenv("FRAGEDIT_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
FRAGEDIT_FETCH_BACKOFF_S = float(os.getenv("FRAGEDIT_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
FRAGEDIT_USER_AGENT = os.getenv("FRAGEDIT_USER_AGENT", DEFAULT_USER_AGENT)
FRAGEDIT_LOG_LEVEL = os.getenv("FRAGEDIT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
