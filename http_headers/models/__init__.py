"""Pydantic models for HTTP header collections."""

from http_headers.models.config import Config
from http_headers.models.expires import Expires, ExpiresKind
from http_headers.models.headers import Headers

__all__ = [
    "Config",
    "Expires",
    "ExpiresKind",
    "Headers",
]
