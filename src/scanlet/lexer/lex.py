"""Tokenizing matchers: patterns paired with token values.

``lex(pattern, token)`` classifies whatever ``pattern`` matches as
``token``. ``choice`` combines tokenizing matchers with the same
left-biased rule as ``alternate``: the first alternative that matches
decides the token.

Example:
    >>> from enum import Enum
    >>> class Tok(Enum):
    ...     EQ = "="
    ...     EQEQ = "=="
    >>> lx = choice(lex("==", Tok.EQEQ), lex("=", Tok.EQ))
    >>> [r.token for r in lx.tokenize("===")]
    [<Tok.EQEQ: '=='>, <Tok.EQ: '='>]

"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from scanlet.errors import PatternError
from scanlet.parse import ParseIterator, TokenMatcher
from scanlet.patterns.literal import pattern
from scanlet.patterns.protocol import Matcher, Pattern
from scanlet.text import Source, Text

T = TypeVar("T")


class TokenizingPattern(Pattern, Generic[T]):
    """Base class for the built-in tokenizing matchers."""

    __slots__ = ()

    @abstractmethod
    def parse(self, text: Text) -> tuple[T, int] | None:
        """Match and classify a prefix of text."""

    def read(self, text: Text) -> int | None:
        matched = self.parse(text)
        if matched is None:
            return None
        return matched[1]

    def tokenize(self, source: Source) -> ParseIterator[T]:
        """Scan source with this matcher."""
        return ParseIterator(self, source)


@dataclass(frozen=True, slots=True)
class TokenPattern(TokenizingPattern[T]):
    """A matcher whose every match is classified as one fixed token.

    Attributes:
        matcher: The underlying length-level matcher
        token: Token value produced on success

    """

    matcher: Matcher
    token: T

    def parse(self, text: Text) -> tuple[T, int] | None:
        length = self.matcher.read(text)
        if length is None:
            return None
        return self.token, length


@dataclass(frozen=True, slots=True)
class TokenAlternation(TokenizingPattern[T]):
    """Left-biased alternation over tokenizing matchers.

    Attributes:
        alternatives: Tokenizing matchers in priority order (never empty)

    """

    alternatives: tuple[TokenMatcher[T], ...]

    def parse(self, text: Text) -> tuple[T, int] | None:
        for alternative in self.alternatives:
            matched = alternative.parse(text)
            if matched is not None:
                return matched
        return None


def lex(matcher: str | bytes | Matcher, token: T) -> TokenPattern[T]:
    """Pair a matcher (or a literal) with a token value."""
    return TokenPattern(pattern(matcher), token)


def choice(*matchers: TokenMatcher[T]) -> TokenAlternation[T]:
    """Combine tokenizing matchers; the first one that matches wins.

    Nested choices are flattened.

    Raises:
        PatternError: If no alternatives are given
        TypeError: If an argument cannot classify its match
    """
    if not matchers:
        raise PatternError("choice needs at least one alternative")
    flat: list[TokenMatcher[T]] = []
    for matcher in matchers:
        if isinstance(matcher, TokenAlternation):
            flat.extend(matcher.alternatives)
        elif isinstance(matcher, TokenMatcher):
            flat.append(matcher)
        else:
            raise TypeError(f"{matcher!r} is not a tokenizing matcher")
    return TokenAlternation(tuple(flat))
