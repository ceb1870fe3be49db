"""Sequencing: match several patterns one after another."""

from __future__ import annotations

from dataclasses import dataclass

from scanlet.errors import PatternError
from scanlet.patterns.literal import pattern
from scanlet.patterns.protocol import Matcher, Pattern
from scanlet.text import Text


@dataclass(frozen=True, slots=True)
class Sequence(Pattern):
    """Match each part on the suffix left by the previous one.

    Fails as soon as one part fails; each part keeps its own greedy
    result, there is no backtracking between parts.
    """

    parts: tuple[Matcher, ...]

    def read(self, text: Text) -> int | None:
        total = 0
        for part in self.parts:
            length = part.read(text[total:])
            if length is None:
                return None
            total += length
        return total


def sequence(*matchers: str | bytes | Matcher) -> Sequence:
    """Concatenate matchers. Nested sequences are flattened.

    Raises:
        PatternError: If no parts are given
    """
    if not matchers:
        raise PatternError("sequence needs at least one part")
    flat: list[Matcher] = []
    for matcher in map(pattern, matchers):
        if isinstance(matcher, Sequence):
            flat.extend(matcher.parts)
        else:
            flat.append(matcher)
    return Sequence(tuple(flat))
