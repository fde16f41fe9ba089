"""HTTP date parsing utilities."""

from __future__ import annotations

from datetime import UTC, datetime
from email.utils import parsedate_to_datetime


def parse_http_date(header_value: str | None) -> datetime | None:
    """Parse an HTTP date header value to an aware datetime.

    Handles RFC 7231 IMF-fixdate, RFC 850 and asctime formats, falling back
    to ISO-8601 (with a trailing ``Z`` accepted as UTC). Naive results are
    assumed to be UTC. Returns None if the value is missing or unparseable.
    """
    if not header_value:
        return None
    value = header_value.strip()
    if not value:
        return None

    parsed: datetime | None = None
    try:
        parsed = parsedate_to_datetime(value)
    except (ValueError, TypeError, IndexError, OverflowError):
        parsed = None

    if parsed is None:
        parsed = _parse_iso_date(value)
    if parsed is None:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _parse_iso_date(value: str) -> datetime | None:
    # fromisoformat accepts bare years and ordinals; require a date part.
    if len(value) < 10 or value[4] != "-":
        return None
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None
