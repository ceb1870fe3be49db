"""Composable matchers for Scanlet.

Primitive patterns (ANY, literal, satisfy) are combined with builder
functions into larger patterns. Every combination is itself a matcher.

patterns/
├── protocol.py      # Matcher protocol, Pattern base class
├── any.py           # ANY, satisfy
├── literal.py       # literal, pattern (coercion)
├── alternation.py   # alternate (left-biased)
├── repetition.py    # repeat and its shorthands
└── sequence.py      # sequence

Usage:
    >>> from scanlet.patterns import ANY, alternate, repeat, satisfy
    >>> ident = repeat(satisfy(str.isalpha), 1)
    >>> ident.match_str("abc1")
    3
    >>> repeat(ANY).match_str("")
    0

"""

from scanlet.patterns.alternation import Alternation, alternate
from scanlet.patterns.any import ANY, AnyPattern, CharPredicate, satisfy
from scanlet.patterns.literal import LiteralPattern, literal, pattern
from scanlet.patterns.protocol import Matcher, Pattern
from scanlet.patterns.repetition import (
    Repetition,
    exactly,
    one_or_more,
    optional,
    repeat,
    zero_or_more,
)
from scanlet.patterns.sequence import Sequence, sequence

__all__ = [
    "ANY",
    "Alternation",
    "AnyPattern",
    "CharPredicate",
    "LiteralPattern",
    "Matcher",
    "Pattern",
    "Repetition",
    "Sequence",
    "alternate",
    "exactly",
    "literal",
    "one_or_more",
    "optional",
    "pattern",
    "repeat",
    "satisfy",
    "sequence",
    "zero_or_more",
]
