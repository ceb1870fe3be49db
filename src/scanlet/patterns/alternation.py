"""Left-biased alternation.

Alternatives are tried in order at the same position; the first one that
matches wins, even if a later one would consume more. Reordering the
alternatives therefore changes the outcome on overlapping input:

    >>> alternate("=", "==").match_str("==")
    1
    >>> alternate("==", "=").match_str("==")
    2
"""

from __future__ import annotations

from dataclasses import dataclass

from scanlet.errors import PatternError
from scanlet.patterns.literal import pattern
from scanlet.patterns.protocol import Matcher, Pattern
from scanlet.text import Text


@dataclass(frozen=True, slots=True)
class Alternation(Pattern):
    """Try each alternative in order; first success wins.

    Attributes:
        alternatives: Matchers in priority order (never empty)

    """

    alternatives: tuple[Matcher, ...]

    def read(self, text: Text) -> int | None:
        for alternative in self.alternatives:
            length = alternative.read(text)
            if length is not None:
                return length
        return None


def alternate(*matchers: str | bytes | Matcher) -> Alternation:
    """Combine matchers into a left-biased alternation.

    Nested alternations are flattened, so ``alternate(a, alternate(b, c))``
    and ``alternate(alternate(a, b), c)`` are the same pattern.

    Raises:
        PatternError: If no alternatives are given
    """
    if not matchers:
        raise PatternError("alternation needs at least one alternative")
    flat: list[Matcher] = []
    for matcher in map(pattern, matchers):
        if isinstance(matcher, Alternation):
            flat.extend(matcher.alternatives)
        else:
            flat.append(matcher)
    return Alternation(tuple(flat))
