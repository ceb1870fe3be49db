"""Tokenization protocol: parse results and the scanning iterator.

A tokenizing matcher classifies the prefix of a text into a token.
ParseIterator drives one across the whole input and yields a lazy
sequence of ParseResult elements:

- ``Ok(token, offset)`` for every recognized token, ``offset`` being the
  byte offset where it starts.
- ``UnexpectedAt(offset)`` when nothing matched at ``offset``. This is
  always the last element; the iterator is exhausted afterwards even if
  later positions would match.

Clean end of input produces no element at all.

Example:
    >>> from scanlet.lexer import lex, choice
    >>> digits = choice(lex("1", 1), lex("2", 2))
    >>> list(tokenize(digits, "12x"))
    [Ok(token=1, offset=0), Ok(token=2, offset=1), UnexpectedAt(offset=2)]

Thread Safety:
ParseIterator instances are single-use. Create one per scan.
The text is shared read-only; the cursor is instance-local.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Protocol, TypeAlias, TypeVar, runtime_checkable

from scanlet.config import get_scan_config
from scanlet.errors import MatcherContractError
from scanlet.text import Source, Text, as_text
from scanlet.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class TokenMatcher(Protocol[T_co]):
    """Protocol for matchers that also classify what they match.

    ``parse`` returns ``(token, length)`` on success with the same length
    contract as ``Matcher.read``, or None.

    Thread Safety:
        Implementations must be stateless. The text is read-only.

    """

    def parse(self, text: Text) -> tuple[T_co, int] | None:
        """Match and classify a prefix of text."""
        ...

    def read(self, text: Text) -> int | None:
        """Match a prefix of text without classifying it."""
        ...


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A token recognized at a byte offset of the original input."""

    token: T
    offset: int

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class UnexpectedAt:
    """Nothing matched at a byte offset. Always the final element."""

    offset: int

    @property
    def is_ok(self) -> bool:
        return False


ParseResult: TypeAlias = Ok[T] | UnexpectedAt


class ScanState(Enum):
    """Tokenization iterator states.

    - SCANNING: Initial state, more elements may follow
    - EXHAUSTED: Terminal, the iterator produces nothing more

    """

    SCANNING = auto()
    EXHAUSTED = auto()


class ParseIterator(Generic[T]):
    """Lazy scanner applying a tokenizing matcher to successive suffixes.

    Each ``next()`` call:
    1. Ends the sequence if the iterator is exhausted.
    2. Ends the sequence (clean end, no element) if no input remains.
    3. Applies the matcher to the remaining input. On a match of ``n``
       bytes, returns ``Ok(token, offset)`` and advances by ``n``.
    4. Otherwise returns ``UnexpectedAt(offset)`` and becomes exhausted.

    A fresh iterator must be built to rescan; this one is not restartable.

    Thread Safety:
        Single-use, not shared. Multiple iterators may read the same text.

    """

    __slots__ = ("_matcher", "_rest", "_offset", "_state", "_trace")

    def __init__(self, matcher: TokenMatcher[T], source: Source) -> None:
        """Initialize the iterator at the start of source.

        Args:
            matcher: Tokenizing matcher to apply
            source: Text to scan (str is encoded as UTF-8)
        """
        self._matcher = matcher
        self._rest: Text = as_text(source)
        self._offset = 0
        self._state = ScanState.SCANNING
        self._trace = get_scan_config().trace

    def __iter__(self) -> ParseIterator[T]:
        return self

    def __next__(self) -> Ok[T] | UnexpectedAt:
        if self._state is ScanState.EXHAUSTED:
            raise StopIteration

        rest = self._rest
        if not rest:
            self._state = ScanState.EXHAUSTED
            logger.debug("Scan finished cleanly after %d bytes", self._offset)
            raise StopIteration

        matched = self._matcher.parse(rest)
        if matched is None:
            self._state = ScanState.EXHAUSTED
            logger.debug("No pattern matched at byte %d", self._offset)
            return UnexpectedAt(self._offset)

        token, length = matched
        if not 0 < length <= len(rest):
            self._state = ScanState.EXHAUSTED
            raise MatcherContractError(self._matcher, length, len(rest))

        result = Ok(token, self._offset)
        self._rest = rest[length:]
        self._offset += length
        if self._trace:
            logger.debug("Matched %r (%d bytes)", result, length)
        return result

    @property
    def offset(self) -> int:
        """Bytes consumed so far (start offset of the next element)."""
        return self._offset

    @property
    def rest(self) -> Text:
        """Remaining unconsumed input."""
        return self._rest

    @property
    def state(self) -> ScanState:
        return self._state

    def __repr__(self) -> str:
        return f"ParseIterator({self._state.name}, offset={self._offset})"


def tokenize(matcher: TokenMatcher[T], source: Source) -> ParseIterator[T]:
    """Scan source with a tokenizing matcher.

    Args:
        matcher: Tokenizing matcher (token table, choice, lex pattern)
        source: Text to scan

    Returns:
        Lazy iterator of Ok / UnexpectedAt elements
    """
    return ParseIterator(matcher, source)


__all__ = [
    "Ok",
    "ParseIterator",
    "ParseResult",
    "ScanState",
    "TokenMatcher",
    "UnexpectedAt",
    "tokenize",
]
