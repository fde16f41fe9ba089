"""Unit tests for the Expires and Config models.

These tests call actual Pydantic constructors with no mocking.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from http_headers.models.config import Config
from http_headers.models.expires import Expires, ExpiresKind


class TestExpires:
    """Tests for the Expires tagged variant."""

    def test_absent(self) -> None:
        expires = Expires.absent()
        assert expires.kind is ExpiresKind.ABSENT
        assert expires.timestamp is None
        assert expires.is_absent

    def test_already_expired(self) -> None:
        expires = Expires.already_expired()
        assert expires.kind is ExpiresKind.ALREADY_EXPIRED
        assert expires.timestamp is None
        assert not expires.is_absent

    def test_at(self) -> None:
        when = datetime(2015, 10, 21, 7, 28, tzinfo=UTC)
        expires = Expires.at(when)
        assert expires.kind is ExpiresKind.AT
        assert expires.timestamp == when

    def test_at_requires_timestamp(self) -> None:
        with pytest.raises(ValidationError, match="timestamp is required"):
            Expires(kind=ExpiresKind.AT)

    def test_timestamp_forbidden_for_sentinel(self) -> None:
        when = datetime(2015, 10, 21, 7, 28, tzinfo=UTC)
        with pytest.raises(ValidationError, match="timestamp must be None"):
            Expires(kind=ExpiresKind.ALREADY_EXPIRED, timestamp=when)

    def test_frozen(self) -> None:
        expires = Expires.absent()
        with pytest.raises(ValidationError):
            expires.kind = ExpiresKind.AT  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Expires.absent() == Expires.absent()
        assert Expires.absent() != Expires.already_expired()

    def test_kind_values(self) -> None:
        assert str(ExpiresKind.ALREADY_EXPIRED) == "already_expired"


class TestConfig:
    """Tests for the pydantic-settings Config model."""

    def test_defaults(self) -> None:
        config = Config()
        assert config.log_level == "INFO"
        assert config.log_format == "console"
        assert config.hash_algorithm == "md5"

    def test_log_level_uppercased(self) -> None:
        assert Config(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError, match="log_level must be one of"):
            Config(log_level="LOUD")

    def test_log_format_lowercased(self) -> None:
        assert Config(log_format="JSON").log_format == "json"

    def test_invalid_log_format(self) -> None:
        with pytest.raises(ValidationError, match="log_format must be one of"):
            Config(log_format="xml")

    def test_hash_algorithm(self) -> None:
        assert Config(hash_algorithm="SHA256").hash_algorithm == "sha256"

    def test_invalid_hash_algorithm(self) -> None:
        with pytest.raises(ValidationError, match="not supported"):
            Config(hash_algorithm="crc32")

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTP_HEADERS_LOG_LEVEL", "warning")
        monkeypatch.setenv("HTTP_HEADERS_HASH_ALGORITHM", "sha1")
        config = Config()
        assert config.log_level == "WARNING"
        assert config.hash_algorithm == "sha1"
