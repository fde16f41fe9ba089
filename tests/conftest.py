"""Shared test fixtures for the http-headers test suite."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import pytest
import structlog

from http_headers.models.headers import Headers

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

REFERENCE_DATE = "Wed, 21 Oct 2015 07:28:00 GMT"


@pytest.fixture
def reference_time() -> datetime:
    """The instant described by REFERENCE_DATE."""
    return datetime(2015, 10, 21, 7, 28, 0, tzinfo=UTC)


@pytest.fixture
def sample_raw_headers() -> dict[str, Any]:
    """Raw headers as a client would hand them over, with mixed case and repeats."""
    return {
        "Content-Type": "text/html; charset=utf-8",
        "Vary": ["user-agent", "content-type"],
        "Cache-Control": [
            "no-transform, no-store, max-age=30",
            "private",
            'no-cache="set-cookie, foo"',
        ],
        "Last-Modified": REFERENCE_DATE,
        "Content-Length": 1024,
    }


@pytest.fixture
def sample_headers(sample_raw_headers: dict[str, Any]) -> Headers:
    """A Headers instance built from sample_raw_headers."""
    return Headers.create(sample_raw_headers)


@pytest.fixture
def write_headers_file(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a JSON document to a temporary file and return its path."""

    def _write(payload: Any, name: str = "headers.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep HTTP_HEADERS_* environment settings and structlog state out of tests."""
    for name in ("HTTP_HEADERS_LOG_LEVEL", "HTTP_HEADERS_LOG_FORMAT", "HTTP_HEADERS_HASH_ALGORITHM"):
        monkeypatch.delenv(name, raising=False)
    yield
    structlog.reset_defaults()
