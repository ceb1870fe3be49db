"""Tokenizing matchers for Scanlet.

lexer/
├── __init__.py   # Re-exports
├── lex.py        # lex, choice (TokenPattern, TokenAlternation)
└── table.py      # TokenTable, TokenTableBuilder, from_enum

Usage:
    >>> from scanlet.lexer import from_enum
    >>> from enum import Enum
    >>> class Op(Enum):
    ...     PLUS = "+"
    ...     MINUS = "-"
    >>> [r.token for r in from_enum(Op).tokenize("+-")]
    [<Op.PLUS: '+'>, <Op.MINUS: '-'>]

"""

from scanlet.lexer.lex import (
    TokenAlternation,
    TokenizingPattern,
    TokenPattern,
    choice,
    lex,
)
from scanlet.lexer.table import TokenTable, TokenTableBuilder, from_enum

__all__ = [
    "TokenAlternation",
    "TokenPattern",
    "TokenTable",
    "TokenTableBuilder",
    "TokenizingPattern",
    "choice",
    "from_enum",
    "lex",
]
