"""Bounded greedy repetition.

``repeat(p, min, max)`` applies ``p`` as many times as it can (up to
``max``), then checks the count against ``min``. There is no
backtracking: once expansion stops the count is final.

    >>> repeat("ab", 2).match_str("ababx")
    4
    >>> repeat("ab", 3).match_str("ababx") is None
    True
    >>> repeat("a", 0, 2).match_str("aaaa")
    2

Thread Safety:
Repetitions are immutable and read no shared state.

"""

from __future__ import annotations

from dataclasses import dataclass

from scanlet.errors import PatternError
from scanlet.patterns.literal import pattern
from scanlet.patterns.protocol import Matcher, Pattern
from scanlet.text import Text


@dataclass(frozen=True, slots=True)
class Repetition(Pattern):
    """Greedy repetition with an inclusive repeat-count range.

    Attributes:
        matcher: The repeated matcher
        min: Minimum number of repeats (inclusive)
        max: Maximum number of repeats (inclusive), None for unbounded

    """

    matcher: Matcher
    min: int = 0
    max: int | None = None

    def __post_init__(self) -> None:
        if self.min < 0:
            raise PatternError(f"repeat minimum must be >= 0, got {self.min}")
        if self.max is not None and self.max < self.min:
            raise PatternError(
                f"repeat maximum {self.max} is smaller than minimum {self.min}"
            )

    def read(self, text: Text) -> int | None:
        limit = self.max
        count = 0
        total = 0
        while limit is None or count < limit:
            length = self.matcher.read(text[total:])
            if length is None:
                break
            count += 1
            total += length
            if length == 0:
                # An empty match repeats forever without moving; any count
                # up to the limit is reachable.
                count = max(count, self.min)
                if limit is not None:
                    count = min(count, limit)
                break

        if count < self.min:
            return None
        return total

    def __repr__(self) -> str:
        upper = "" if self.max is None else self.max
        return f"repeat({self.matcher!r}, {self.min}..{upper})"


def repeat(
    matcher: str | bytes | Matcher,
    min: int = 0,
    max: int | None = None,
) -> Repetition:
    """Repeat a matcher between min and max times (max=None is unbounded).

    Raises:
        PatternError: If the bounds are negative or inverted
    """
    return Repetition(pattern(matcher), min, max)


def zero_or_more(matcher: str | bytes | Matcher) -> Repetition:
    """Repeat any number of times, including none."""
    return repeat(matcher, 0, None)


def one_or_more(matcher: str | bytes | Matcher) -> Repetition:
    """Repeat at least once."""
    return repeat(matcher, 1, None)


def optional(matcher: str | bytes | Matcher) -> Repetition:
    """Match zero or one time."""
    return repeat(matcher, 0, 1)


def exactly(matcher: str | bytes | Matcher, count: int) -> Repetition:
    """Match exactly count times."""
    return repeat(matcher, count, count)
