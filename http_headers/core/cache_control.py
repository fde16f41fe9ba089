"""Cache-Control directive parsing.

Only directive presence and raw arguments are exposed; interpreting the
arguments (for example max-age freshness lifetimes) is left to callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

MAX_AGE = "max-age"
S_MAXAGE = "s-maxage"
NO_CACHE = "no-cache"
NO_STORE = "no-store"
PRIVATE = "private"
PUBLIC = "public"
MUST_REVALIDATE = "must-revalidate"


def _split_directives(value: str) -> list[str]:
    """Split on commas that are not inside a quoted-string."""
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False
    escaped = False
    for char in value:
        if escaped:
            current.append(char)
            escaped = False
        elif char == "\\" and in_quotes:
            current.append(char)
            escaped = True
        elif char == '"':
            current.append(char)
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            tokens.append("".join(current))
            current = []
        else:
            current.append(char)
    tokens.append("".join(current))
    return tokens


def _unquote(argument: str) -> str:
    if len(argument) >= 2 and argument[0] == argument[-1] == '"':
        inner = argument[1:-1]
        return inner.replace('\\"', '"').replace("\\\\", "\\")
    return argument


def parse_cache_control(value: str) -> dict[str, str | None]:
    """Parse a single Cache-Control header value into ``{name: argument}``.

    Names are lower-cased; directives without an argument map to None.
    When a directive repeats, the first occurrence wins.

    >>> parse_cache_control('max-age=30, no-cache="set-cookie, foo", private')
    {'max-age': '30', 'no-cache': 'set-cookie, foo', 'private': None}
    """
    directives: dict[str, str | None] = {}
    for token in _split_directives(value):
        name, sep, argument = token.partition("=")
        name = name.strip().lower()
        if not name:
            continue
        if name in directives:
            continue
        directives[name] = _unquote(argument.strip()) if sep else None
    return directives


class CacheControlDirectives:
    """Accumulates directives from one or more Cache-Control values."""

    __slots__ = ("_directives",)

    def __init__(self, value: str = "") -> None:
        self._directives: dict[str, str | None] = {}
        if value:
            self.add(value)

    @classmethod
    def from_values(cls, values: Iterable[str | int]) -> CacheControlDirectives:
        """Build an accumulator from every value of a repeated header."""
        directives = cls()
        for value in values:
            directives.add(str(value))
        return directives

    def add(self, value: str) -> None:
        """Merge directives from ``value``; directives already seen are kept."""
        for name, argument in parse_cache_control(value).items():
            self._directives.setdefault(name, argument)

    def has_directive(self, name: str) -> bool:
        return name.lower() in self._directives

    def get_directive(self, name: str) -> str | None:
        """Return the directive argument, or None if absent or argument-less."""
        return self._directives.get(name.lower())

    def names(self) -> list[str]:
        return list(self._directives)

    def __repr__(self) -> str:
        return f"CacheControlDirectives({self._directives!r})"
