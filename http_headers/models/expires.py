"""Expires header outcome model."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator


class ExpiresKind(StrEnum):
    ABSENT = "absent"
    ALREADY_EXPIRED = "already_expired"
    AT = "at"


class Expires(BaseModel):
    """Tagged result of reading the Expires header.

    ABSENT means no expiry policy, ALREADY_EXPIRED means the header was
    present but not a valid date (e.g. ``0``), AT carries the parsed timestamp.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    kind: ExpiresKind
    timestamp: datetime | None = None

    @model_validator(mode="after")
    def validate_timestamp_matches_kind(self) -> Expires:
        """A timestamp is required for AT and forbidden otherwise."""
        if self.kind is ExpiresKind.AT and self.timestamp is None:
            msg = "timestamp is required when kind is 'at'"
            raise ValueError(msg)
        if self.kind is not ExpiresKind.AT and self.timestamp is not None:
            msg = f"timestamp must be None when kind is '{self.kind}'"
            raise ValueError(msg)
        return self

    @classmethod
    def absent(cls) -> Expires:
        return cls(kind=ExpiresKind.ABSENT)

    @classmethod
    def already_expired(cls) -> Expires:
        return cls(kind=ExpiresKind.ALREADY_EXPIRED)

    @classmethod
    def at(cls, timestamp: datetime) -> Expires:
        return cls(kind=ExpiresKind.AT, timestamp=timestamp)

    @property
    def is_absent(self) -> bool:
        return self.kind is ExpiresKind.ABSENT
