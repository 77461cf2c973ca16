"""Configuration defaults and .env loading.

WHY: The CLI and the HTTP API share a handful of tunables (default
report format, log level, bind address). Keeping them in one module
makes them easy to find and override without touching logic.

HOW: python-dotenv loads the .env file on import. Defaults are plain
module-level constants read from the environment. load_log_level()
turns the configured name into a logging level with a clear error.

RULES:
- Every default can be overridden via an environment variable
- Unknown log level names raise ValueError, never fall back silently
- The codec itself reads no configuration
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

# ---------------------------------------------------------------------------
# Output defaults
# ---------------------------------------------------------------------------

DEFAULT_FORMAT = os.getenv("CODEPOINT_DEFAULT_FORMAT", "plain_text")
"""Formatter key used by ``inspect`` when --format is not given."""

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = os.getenv("CODEPOINT_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# ---------------------------------------------------------------------------
# HTTP API
# ---------------------------------------------------------------------------

API_HOST = os.getenv("CODEPOINT_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("CODEPOINT_API_PORT", "8000"))


def load_log_level(name: Optional[str] = None) -> int:
    """Resolve a log level name (e.g. "info") to its logging constant.

    RULES:
    - name=None means use CODEPOINT_LOG_LEVEL / the default
    - Case-insensitive
    - Raises ValueError for names logging does not know
    """
    level_name = (name or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(
            "Unknown log level '{}'. Use DEBUG, INFO, WARNING, ERROR or CRITICAL.".format(
                level_name
            )
        )
    return level
