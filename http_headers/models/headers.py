"""Immutable HTTP response header collection with cache freshness queries."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import BaseModel, ConfigDict, field_validator

from http_headers.core.cache_control import CacheControlDirectives
from http_headers.core.checksum import DEFAULT_HASH_ALGORITHM, compute_headers_checksum
from http_headers.core import freshness
from http_headers.core.http_dates import parse_http_date
from http_headers.core.normalization import filter_raw_headers, normalize_header_value
from http_headers.models.expires import Expires

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = structlog.get_logger(__name__)


class Headers(BaseModel):
    """Normalized, immutable set of HTTP response headers.

    Names are lower-cased and kept in ascending order so that ``names`` and
    ``create_hash`` are deterministic. Each name maps to a tuple of values,
    one per header line. Every update returns a new instance.

    Use ``Headers.create`` for loosely typed input; the constructor itself
    only accepts ``entries`` already in ``{name: (str | int, ...)}`` shape.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    entries: dict[str, tuple[str | int, ...]] = {}

    @field_validator("entries")
    @classmethod
    def normalize_entries(
        cls, value: dict[str, tuple[str | int, ...]]
    ) -> dict[str, tuple[str | int, ...]]:
        """Lower-case names and sort by name."""
        lowered = {key.lower(): values for key, values in value.items()}
        return dict(sorted(lowered.items(), key=lambda item: item[0]))

    @classmethod
    def create(cls, raw: Mapping[Any, Any] | None = None) -> Headers:
        """Build from a raw mapping, silently dropping invalid values."""
        return cls(entries=filter_raw_headers(raw))

    def with_header(self, key: str, value: Any) -> Headers:
        """Return a new collection with ``key`` set to ``value``.

        An invalid ``value`` leaves the content unchanged.
        """
        entries = dict(self.entries)
        normalized = normalize_header_value(key, value)
        if normalized is not None:
            entries[key.lower()] = normalized
        return type(self)(entries=entries)

    def get(self, key: str) -> tuple[str | int, ...]:
        return self.entries.get(key.lower(), ())

    def get_line(self, key: str) -> str:
        """Values for ``key`` joined with ", ", or "" if absent."""
        return ", ".join(str(value) for value in self.get(key))

    def to_mapping(self) -> dict[str, list[str | int]]:
        return {key: list(values) for key, values in self.entries.items()}

    def create_hash(self, algorithm: str = DEFAULT_HASH_ALGORITHM) -> str:
        """Hex digest of the canonical JSON form of the entries."""
        return compute_headers_checksum(self.entries, algorithm)

    def get_last_modified(self) -> datetime | None:
        line = self.get_line("last-modified")
        if not line:
            return None
        parsed = parse_http_date(line)
        if parsed is None:
            logger.debug("unparseable_last_modified", value=line)
        return parsed

    def get_age(self, now: datetime | None = None) -> int | None:
        """Seconds since Last-Modified, or None when it is missing or invalid."""
        return freshness.compute_age(self.get_last_modified(), now)

    def get_expires(self) -> Expires:
        """Read the Expires header.

        Returns ABSENT when missing, ALREADY_EXPIRED when present but not a
        valid date (including ``0``), otherwise AT with the parsed timestamp.
        """
        line = self.get_line("expires")
        if not line:
            return Expires.absent()
        parsed = parse_http_date(line)
        if parsed is None:
            logger.debug("unparseable_expires", value=line)
            return Expires.already_expired()
        return Expires.at(parsed)

    def get_cache_control(self) -> CacheControlDirectives:
        """Directives accumulated across every Cache-Control value."""
        return CacheControlDirectives.from_values(self.get("cache-control"))

    def has_expired(self, now: datetime | None = None) -> bool:
        """Whether the Expires header marks the resource as expired at ``now``.

        Always False without an Expires header, or when Cache-Control carries
        max-age or s-maxage.
        """
        expires = self.get_expires()
        return freshness.has_expired(
            not expires.is_absent, expires.timestamp, self.get_cache_control(), now
        )

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self.entries

    def names(self) -> list[str]:
        """Header names in ascending order."""
        return list(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __hash__(self) -> int:
        return hash(tuple(self.entries.items()))
