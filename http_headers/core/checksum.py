"""Header content checksum computation."""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

DEFAULT_HASH_ALGORITHM = "md5"

# shake_* digests need an explicit length and are excluded.
SUPPORTED_HASH_ALGORITHMS: frozenset[str] = frozenset(
    name for name in hashlib.algorithms_guaranteed if not name.startswith("shake_")
)


def canonical_json(entries: Mapping[str, Sequence[str | int]]) -> str:
    """Serialize entries to compact JSON with keys in ascending order."""
    return json.dumps(
        {key: list(values) for key, values in entries.items()},
        sort_keys=True,
        separators=(",", ":"),
    )


def compute_headers_checksum(
    entries: Mapping[str, Sequence[str | int]],
    algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> str:
    """Compute a lowercase hex digest of the canonical JSON of ``entries``.

    Raises ValueError for an algorithm outside SUPPORTED_HASH_ALGORITHMS.
    """
    name = algorithm.lower()
    if name not in SUPPORTED_HASH_ALGORITHMS:
        msg = f"Unsupported hash algorithm: {algorithm}"
        raise ValueError(msg)
    digest = hashlib.new(name)
    digest.update(canonical_json(entries).encode("utf-8"))
    return digest.hexdigest()
