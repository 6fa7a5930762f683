"""
Loading an already-fetched session list from disk.

The file holds the JSON array returned by the backend's session list
endpoint, e.g.:

    [{"id": "42", "courseName": "Algebra", "courseGroupName": "G1",
      "locationName": "Room 101", "dateStart": "2024-06-10T08:00:00",
      "dateEnd": "2024-06-10T09:30:00"}, ...]

snake_case keys (course_name, date_start, ...) are accepted as well.

Loading is deliberately defensive: a missing or broken file yields an empty
list and a malformed record is skipped, so the CLI can always run.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from sessionfilter.clock import to_local
from sessionfilter.config import default_sessions_path
from sessionfilter.model import Session

logger = logging.getLogger(__name__)

_FIELDS = {
    "session_id": ("id", "session_id"),
    "course_name": ("courseName", "course_name"),
    "course_group_name": ("courseGroupName", "course_group_name"),
    "location_name": ("locationName", "location_name"),
    "date_start": ("dateStart", "date_start"),
    "date_end": ("dateEnd", "date_end"),
}
_KNOWN_KEYS = {key for keys in _FIELDS.values() for key in keys}


def parse_instant(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 instant into local wall-clock time (naive datetime).

    Values with an offset (or a trailing 'Z') are converted to the host's
    local time. Anything unparsable is treated as missing.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    return to_local(dt)


def _pick(record: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None


def _opt_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def session_from_dict(record: dict[str, Any]) -> Session:
    """
    Build a Session from one backend record. Unknown keys go to ``extra``.
    """
    return Session(
        session_id=_opt_str(_pick(record, _FIELDS["session_id"])),
        course_name=_opt_str(_pick(record, _FIELDS["course_name"])),
        course_group_name=_opt_str(_pick(record, _FIELDS["course_group_name"])),
        location_name=_opt_str(_pick(record, _FIELDS["location_name"])),
        date_start=parse_instant(_pick(record, _FIELDS["date_start"])),
        date_end=parse_instant(_pick(record, _FIELDS["date_end"])),
        extra={k: v for k, v in record.items() if k not in _KNOWN_KEYS},
    )


def load_sessions(path: str | Path | None = None) -> list[Session]:
    """
    Load sessions from a JSON file.

    Returns an empty list if the file does not exist or is invalid.
    Accepts either a bare array or the paged-list envelope {"items": [...]}.
    """
    sessions_path = Path(path) if path is not None else default_sessions_path()

    if not sessions_path.exists():
        logger.warning("Sessions file not found: %s", sessions_path)
        return []

    try:
        data = json.loads(sessions_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Could not read sessions file %s: %s", sessions_path, exc)
        return []

    if isinstance(data, dict):
        data = data.get("items", [])
    if not isinstance(data, list):
        logger.warning("Sessions file %s does not contain a list", sessions_path)
        return []

    out: list[Session] = []
    for record in data:
        if not isinstance(record, dict):
            logger.debug("Skipping non-object record: %r", record)
            continue
        out.append(session_from_dict(record))

    logger.debug("Loaded %d session(s) from %s", len(out), sessions_path)
    return out
