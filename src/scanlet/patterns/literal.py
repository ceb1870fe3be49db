"""Literal patterns.

A literal matches the exact encoded byte sequence of a string (or raw
bytes) at the start of the text.

Example:
    >>> literal("let").match_str("let x")
    3
    >>> literal("let").match_str("lex") is None
    True
"""

from __future__ import annotations

from dataclasses import dataclass

from scanlet.errors import PatternError
from scanlet.patterns.protocol import Matcher, Pattern
from scanlet.text import ENCODING, Text


@dataclass(frozen=True, slots=True)
class LiteralPattern(Pattern):
    """Match an exact byte sequence.

    Attributes:
        value: Encoded literal (never empty)

    """

    value: bytes

    def __post_init__(self) -> None:
        if not self.value:
            raise PatternError("literal pattern must not be empty")

    def read(self, text: Text) -> int | None:
        size = len(self.value)
        if text[:size] == self.value:
            return size
        return None

    def __repr__(self) -> str:
        return f"literal({self.value.decode(ENCODING, errors='replace')!r})"


def literal(value: str | bytes) -> LiteralPattern:
    """Create a literal pattern from a str (encoded UTF-8) or bytes.

    Raises:
        PatternError: If value is empty
    """
    if isinstance(value, str):
        value = value.encode(ENCODING)
    return LiteralPattern(bytes(value))


def pattern(value: str | bytes | Matcher) -> Matcher:
    """Coerce a literal value or an existing matcher into a matcher.

    Strings and bytes become literal patterns; anything implementing
    ``read`` is returned unchanged.

    Raises:
        TypeError: If value is neither a literal nor a matcher
    """
    if isinstance(value, (str, bytes)):
        return literal(value)
    if isinstance(value, Matcher):
        return value
    raise TypeError(f"cannot use {type(value).__name__} as a pattern")
