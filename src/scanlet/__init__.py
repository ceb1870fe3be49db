"""
Scanlet: Composable pattern matchers for lexical scanners

Small matcher primitives (any character, literals, character predicates)
combine through alternation, bounded repetition and sequencing into larger
patterns. Tokenizing matchers classify what they match, and a lazy
iterator drives them across an input to produce typed tokens with byte
offsets. Zero runtime dependencies.

Quick Start:
    >>> from scanlet import lex, choice, tokenize
    >>> lx = choice(lex("x", "X"), lex("=", "EQ"), lex("1", "ONE"))
    >>> list(tokenize(lx, "x=1?"))
    [Ok(token='X', offset=0), Ok(token='EQ', offset=1), Ok(token='ONE', offset=2), UnexpectedAt(offset=3)]

    >>> # Patterns compose freely
    >>> from scanlet import ANY, repeat
    >>> repeat(ANY).match_str("Привет")
    12

Token Tables:
    >>> from scanlet import TokenTableBuilder, expect_tokens
    >>> table = TokenTableBuilder().register("+", "PLUS").register("1", "ONE").build()
    >>> expect_tokens(table, "1+1")
    ['ONE', 'PLUS', 'ONE']
"""

from scanlet.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from scanlet.consume import collect, expect_tokens, tokenize_resync
from scanlet.errors import (
    MatcherContractError,
    PatternError,
    RegistrationError,
    ScanletError,
    UnexpectedInputError,
)
from scanlet.lexer import (
    TokenAlternation,
    TokenPattern,
    TokenTable,
    TokenTableBuilder,
    choice,
    from_enum,
    lex,
)
from scanlet.location import SourceLocation
from scanlet.parse import (
    Ok,
    ParseIterator,
    ParseResult,
    ScanState,
    TokenMatcher,
    UnexpectedAt,
    tokenize,
)
from scanlet.patterns import (
    ANY,
    Matcher,
    Pattern,
    alternate,
    exactly,
    literal,
    one_or_more,
    optional,
    pattern,
    repeat,
    satisfy,
    sequence,
    zero_or_more,
)
from scanlet.text import as_text, char_width

__version__ = "0.1.0"

__all__ = [
    # Patterns
    "ANY",
    "Matcher",
    "Pattern",
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
    # Tokenizing matchers
    "TokenAlternation",
    "TokenMatcher",
    "TokenPattern",
    "TokenTable",
    "TokenTableBuilder",
    "choice",
    "from_enum",
    "lex",
    # Tokenization
    "Ok",
    "ParseIterator",
    "ParseResult",
    "ScanState",
    "UnexpectedAt",
    "tokenize",
    # Consumers
    "collect",
    "expect_tokens",
    "tokenize_resync",
    # Text and locations
    "SourceLocation",
    "as_text",
    "char_width",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Errors
    "MatcherContractError",
    "PatternError",
    "RegistrationError",
    "ScanletError",
    "UnexpectedInputError",
    "__version__",
]
