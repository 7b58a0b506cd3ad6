"""Input Normalization — trim/length checks and limit clamping, pure functions.

Invariants:
    - Text is trimmed BEFORE its length is measured
    - normalize_* either returns the stored value or raises InvalidInputError
    - clamp_limit always returns 1..MAX_MESSAGE_LIMIT

Design Decisions:
    - Shared by request schemas and services: the same rule runs at the HTTP
      boundary and again in the service without drift
    - parse_limit never raises: a malformed ?limit= falls back to the default
    - Numeric strings are matched against an explicit ASCII pattern before int():
      int() alone also takes " 5", "5_0" and "+5"
"""

import re

from chat_api.core.domain_types import (
    DEFAULT_MESSAGE_LIMIT,
    MAX_ID,
    MAX_MESSAGE_LIMIT,
    MAX_TEXT_LENGTH,
    MAX_TITLE_LENGTH,
)
from chat_api.core.errors import InvalidInputError

_PATH_ID_PATTERN = re.compile(r"[1-9][0-9]*")
_LIMIT_PATTERN = re.compile(r"[+-]?[0-9]+")


def normalize_title(title: str) -> str:
    """Trim a chat title and enforce 1..MAX_TITLE_LENGTH characters."""
    return _normalize(title, "title", MAX_TITLE_LENGTH)


def normalize_text(text: str) -> str:
    """Trim message text and enforce 1..MAX_TEXT_LENGTH characters."""
    return _normalize(text, "text", MAX_TEXT_LENGTH)


def _normalize(value: str, field: str, max_length: int) -> str:
    value = value.strip()
    if not value:
        raise InvalidInputError(f"{field} cannot be empty", field)
    if len(value) > max_length:
        raise InvalidInputError(
            f"{field} must be {max_length} characters or less", field,
        )
    return value


def clamp_limit(limit: int) -> int:
    """Non-positive → default, above the cap → cap."""
    if limit <= 0:
        return DEFAULT_MESSAGE_LIMIT
    return min(limit, MAX_MESSAGE_LIMIT)


def parse_limit(raw: str | None) -> int:
    """Parse the ?limit= query value; anything non-numeric uses the default."""
    if raw is None or not _LIMIT_PATTERN.fullmatch(raw):
        return DEFAULT_MESSAGE_LIMIT
    try:
        limit = int(raw)
    except ValueError:  # beyond the int() digit limit
        return DEFAULT_MESSAGE_LIMIT
    return clamp_limit(limit)


def parse_path_id(raw: str, field: str = "chat_id") -> int:
    """Parse an id path segment: plain decimal digits without sign or leading zero, 1..MAX_ID."""
    if (
        len(raw) > len(str(MAX_ID))
        or not _PATH_ID_PATTERN.fullmatch(raw)
        or int(raw) > MAX_ID
    ):
        raise InvalidInputError(f"{field} must be a positive integer", field)
    return int(raw)
