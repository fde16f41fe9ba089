"""Age and expiry rules derived from HTTP caching headers."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from http_headers.core.cache_control import MAX_AGE, S_MAXAGE

if TYPE_CHECKING:
    from http_headers.core.cache_control import CacheControlDirectives


def resolve_now(now: datetime | None) -> datetime:
    """Return ``now`` as an aware datetime, defaulting to the current UTC time.

    Naive datetimes are interpreted as UTC.
    """
    if now is None:
        return datetime.now(UTC)
    if now.tzinfo is None:
        return now.replace(tzinfo=UTC)
    return now


def compute_age(last_modified: datetime | None, now: datetime | None = None) -> int | None:
    """Seconds elapsed between ``last_modified`` and ``now``, or None without a date."""
    if last_modified is None:
        return None
    current = resolve_now(now)
    return int(current.timestamp()) - int(last_modified.timestamp())


def is_expires_overridden(directives: CacheControlDirectives) -> bool:
    """max-age or s-maxage take precedence over Expires."""
    return directives.has_directive(MAX_AGE) or directives.has_directive(S_MAXAGE)


def has_expired(
    expires_present: bool,
    expires_at: datetime | None,
    directives: CacheControlDirectives,
    now: datetime | None = None,
) -> bool:
    """Decide expiry from the Expires header and Cache-Control directives.

    ``expires_present`` with no ``expires_at`` means the header could not be
    parsed and the resource is already expired. Equality with ``expires_at``
    counts as expired.
    """
    if not expires_present:
        return False
    if is_expires_overridden(directives):
        return False
    if expires_at is None:
        return True
    return int(resolve_now(now).timestamp()) >= int(expires_at.timestamp())
