"""Single-character patterns.

ANY consumes exactly one encoded character. ``satisfy`` consumes one
character when a predicate accepts it.

Example:
    >>> ANY.match_str("😀!")
    4
    >>> satisfy(str.isdigit).match_str("7up")
    1
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from scanlet.patterns.protocol import Pattern
from scanlet.text import Text, char_width, decode


@dataclass(frozen=True, slots=True)
class AnyPattern(Pattern):
    """Match any single character, multi-byte characters included."""

    def read(self, text: Text) -> int | None:
        return char_width(text)

    def __repr__(self) -> str:
        return "ANY"


ANY = AnyPattern()


@dataclass(frozen=True, slots=True)
class CharPredicate(Pattern):
    """Match one character accepted by a predicate.

    Attributes:
        predicate: Called with the decoded character (a one-char str)
        name: Label used in repr

    """

    predicate: Callable[[str], bool]
    name: str = "satisfy"

    def read(self, text: Text) -> int | None:
        width = char_width(text)
        if width is None:
            return None
        if self.predicate(decode(text[:width])):
            return width
        return None

    def __repr__(self) -> str:
        return f"{self.name}({getattr(self.predicate, '__name__', self.predicate)})"


def satisfy(predicate: Callable[[str], bool], name: str = "satisfy") -> CharPredicate:
    """Create a pattern matching one character accepted by predicate."""
    return CharPredicate(predicate, name)
