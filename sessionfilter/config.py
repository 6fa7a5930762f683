"""
Configuration values shared by the package.

Values can be overridden through environment variables; paths are returned
by functions instead of constants so tests can point them elsewhere.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent

# The session list endpoint has no real pagination for this client yet.
# This page size is what it understands as "return everything".
UNPAGED_PAGE_SIZE = int(os.environ.get("SESSIONFILTER_UNPAGED_PAGE_SIZE", 999999))

LOG_LEVEL = os.environ.get("SESSIONFILTER_LOG_LEVEL", "WARNING")


def default_sessions_path() -> Path:
    """
    Return the sessions JSON file used when the CLI gets no explicit path.
    """
    env_path = os.environ.get("SESSIONFILTER_SESSIONS", "").strip()
    if env_path:
        return Path(env_path)
    return PACKAGE_DIR / "data" / "sessions.json"


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure root logging once for command line use.
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        numeric = getattr(logging, level.upper(), None)
        if not isinstance(numeric, int):
            raise ValueError(f"Invalid log level: {level!r}")
        level = numeric
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
