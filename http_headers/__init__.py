"""Immutable HTTP response headers with cache freshness semantics."""

from http_headers.core.cache_control import CacheControlDirectives
from http_headers.models.expires import Expires, ExpiresKind
from http_headers.models.headers import Headers

__version__ = "0.1.0"

__all__ = [
    "CacheControlDirectives",
    "Expires",
    "ExpiresKind",
    "Headers",
]
