"""Header core -- pure functions for normalization, dates, directives and freshness."""

from __future__ import annotations

from http_headers.core.cache_control import (
    MAX_AGE,
    S_MAXAGE,
    CacheControlDirectives,
    parse_cache_control,
)
from http_headers.core.checksum import canonical_json, compute_headers_checksum
from http_headers.core.http_dates import parse_http_date
from http_headers.core.normalization import filter_raw_headers, normalize_header_value
from http_headers.core.freshness import compute_age, has_expired, is_expires_overridden

__all__ = [
    # cache_control
    "MAX_AGE",
    "S_MAXAGE",
    "CacheControlDirectives",
    "parse_cache_control",
    # checksum
    "canonical_json",
    "compute_headers_checksum",
    # http_dates
    "parse_http_date",
    # normalization
    "filter_raw_headers",
    "normalize_header_value",
    # freshness
    "compute_age",
    "has_expired",
    "is_expires_overridden",
]
