"""Library configuration — environment variables and derived constants.

Loads ``TELEGRAM_TYPES_LOG_LEVEL``, ``TELEGRAM_TYPES_LOG_DIR`` and
``TELEGRAM_TYPES_LOG_FILE`` from the environment via ``python-dotenv``.  All
values are resolved at import time so other modules can
``from telegram_types.config import …`` without repeated lookups.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

DEFAULT_LOG_LEVEL: int = logging.WARNING
DEFAULT_LOG_FILE: str = "telegram_types.log"


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_log_level(raw: str | None) -> int:
    """Translate a level name (``"debug"``, ``"INFO"``) or number into an int.

    Unknown names fall back to :data:`DEFAULT_LOG_LEVEL`.
    """
    if not raw:
        return DEFAULT_LOG_LEVEL
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL


def _resolve_log_dir(raw: str | None) -> str | None:
    """Return the log directory, or ``None`` when file logging is disabled."""
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


# ── Public constants ─────────────────────────────────────────────────────────

LOG_LEVEL: int = _parse_log_level(os.environ.get("TELEGRAM_TYPES_LOG_LEVEL"))
LOG_DIR: str | None = _resolve_log_dir(os.environ.get("TELEGRAM_TYPES_LOG_DIR"))
LOG_FILE: str = os.environ.get("TELEGRAM_TYPES_LOG_FILE") or DEFAULT_LOG_FILE
