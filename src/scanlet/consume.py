"""Consumer-side helpers for tokenization results.

The tokenization iterator never raises for unmatched input and never
resumes after a failure. These helpers implement the common consumer
policies on top of it:

- ``collect``: split a result sequence into tokens and failure offset
- ``expect_tokens``: strict scan, raises UnexpectedInputError
- ``tokenize_resync``: skip the offending character and rescan the rest
  with a fresh iterator

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TypeVar

from scanlet.config import get_scan_config
from scanlet.errors import UnexpectedInputError
from scanlet.location import SourceLocation
from scanlet.parse import Ok, ParseIterator, TokenMatcher, UnexpectedAt
from scanlet.text import Source, as_text, char_width, decode
from scanlet.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def collect(results: Iterable[Ok[T] | UnexpectedAt]) -> tuple[list[Ok[T]], int | None]:
    """Drain a result sequence.

    Args:
        results: Elements from a tokenization iterator

    Returns:
        (ok elements in order, failure offset or None on clean end)
    """
    tokens: list[Ok[T]] = []
    for result in results:
        if isinstance(result, UnexpectedAt):
            return tokens, result.offset
        tokens.append(result)
    return tokens, None


def expect_tokens(matcher: TokenMatcher[T], source: Source) -> list[T]:
    """Tokenize source completely or raise.

    Args:
        matcher: Tokenizing matcher
        source: Text to scan

    Returns:
        Token values in order

    Raises:
        UnexpectedInputError: If some input could not be matched. The
            error location uses ScanConfig.source_file.
    """
    text = as_text(source)
    results, failure = collect(ParseIterator(matcher, text))
    if failure is not None:
        width = char_width(text[failure:]) or 1
        location = SourceLocation.from_offset(
            text, failure, source_file=get_scan_config().source_file
        )
        raise UnexpectedInputError(
            failure,
            location=location,
            unexpected=decode(text[failure : failure + width]),
        )
    return [result.token for result in results]


def tokenize_resync(
    matcher: TokenMatcher[T],
    source: Source,
) -> Iterator[Ok[T] | UnexpectedAt]:
    """Tokenize, skipping one character after every failure.

    Each failure is reported as ``UnexpectedAt`` and scanning restarts
    with a fresh iterator just past the offending character. Offsets are
    relative to the start of source. Unlike a single iterator, the
    sequence may contain several UnexpectedAt elements.

    Yields:
        Ok and UnexpectedAt elements in input order
    """
    text = as_text(source)
    base = 0
    while True:
        failure = None
        for result in ParseIterator(matcher, text[base:]):
            if isinstance(result, UnexpectedAt):
                failure = base + result.offset
            else:
                yield Ok(result.token, base + result.offset)
        if failure is None:
            return
        yield UnexpectedAt(failure)
        # Malformed bytes are skipped one at a time
        base = failure + (char_width(text[failure:]) or 1)
        logger.debug("Resynchronizing at byte %d", base)
