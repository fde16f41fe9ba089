"""Normalization of loosely typed raw header input.

This is the only place where arbitrary values are probed at runtime. The
strict ``Headers`` model downstream accepts nothing but the normalized shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = structlog.get_logger(__name__)

HeaderValue = str | int
HeaderEntries = dict[str, tuple[HeaderValue, ...]]


def is_header_value(value: Any) -> bool:
    """Return True for str or int values. bool is rejected despite subclassing int."""
    return isinstance(value, str | int) and not isinstance(value, bool)


def normalize_header_value(key: str, value: Any) -> tuple[HeaderValue, ...] | None:
    """Normalize one raw value to a tuple of scalars, or None to drop the entry.

    A list or tuple keeps only its str/int elements (possibly none at all);
    a str/int scalar becomes a one-element tuple; anything else is dropped.
    """
    if isinstance(value, list | tuple):
        kept = tuple(item for item in value if is_header_value(item))
        if len(kept) != len(value):
            logger.debug(
                "dropped_header_value",
                header=key,
                dropped=len(value) - len(kept),
            )
        return kept
    if is_header_value(value):
        return (value,)
    logger.debug("dropped_header_entry", header=key, value_type=type(value).__name__)
    return None


def filter_raw_headers(raw: Mapping[Any, Any] | None) -> HeaderEntries:
    """Filter and normalize a raw header mapping.

    Keys are lower-cased (later keys overwrite earlier ones that fold to the
    same name) and the result is sorted by key. Never raises.
    """
    filtered: HeaderEntries = {}
    if not raw:
        return filtered
    for key, value in raw.items():
        if not isinstance(key, str):
            logger.debug("dropped_header_entry", header=repr(key), reason="non-string name")
            continue
        normalized = normalize_header_value(key, value)
        if normalized is None:
            continue
        filtered[key.lower()] = normalized
    return dict(sorted(filtered.items(), key=lambda item: item[0]))
