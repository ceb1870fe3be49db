"""Matcher protocol and the base class for built-in patterns.

A matcher answers one question: does the pattern occur at the very start
of ``text``, and if so how many bytes does it consume?

Contract for ``read(text)``:
- Return ``n`` with ``0 < n <= len(text)`` when the pattern matches the
  first ``n`` bytes; ``n`` always lands on a character boundary.
- Return ``None`` when the pattern cannot match (including empty text for
  patterns that need at least one unit of input).
- Combinators that may legitimately match nothing (a repetition whose
  range admits zero repeats) return ``0``.

Matchers hold no mutable state; the same instance may be applied to any
number of texts from any number of threads.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from scanlet.text import Source, Text, as_text


@runtime_checkable
class Matcher(Protocol):
    """Protocol for anything that can be matched against encoded text.

    External collaborators (generated tables, hand-written scanners)
    only need to implement ``read``.

    Thread Safety:
        Implementations must be stateless. The text is read-only.

    """

    def read(self, text: Text) -> int | None:
        """Match a prefix of text.

        Args:
            text: Encoded text suffix to match at

        Returns:
            Number of bytes consumed, or None if there is no match
        """
        ...


class Pattern(ABC):
    """Base class for the built-in matchers."""

    __slots__ = ()

    @abstractmethod
    def read(self, text: Text) -> int | None:
        """Match a prefix of text, returning the consumed byte length."""

    def test(self, text: Text) -> bool:
        """Check whether the pattern matches (a zero-length match counts)."""
        return self.read(text) is not None

    def match_str(self, source: Source) -> int | None:
        """Like read(), but accepts str or any bytes-like input."""
        return self.read(as_text(source))
