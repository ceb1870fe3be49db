"""Exception classes for Scanlet.

Unmatched input is never an exception inside the scanner: it is reported as
the terminal ``UnexpectedAt`` element. The exceptions here cover programming
errors (bad patterns, broken matchers) and the strict consumer helpers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scanlet.location import SourceLocation


class ScanletError(Exception):
    """Base exception for all Scanlet errors.

    Subclass this for specific error categories.
    """

    pass


class PatternError(ScanletError, ValueError):
    """Invalid pattern construction.

    Raised for empty literals, empty alternations and repetition bounds
    that can never be satisfied.
    """

    pass


class RegistrationError(ScanletError):
    """Error while building a token table."""

    def __init__(self, literal: object, message: str) -> None:
        """Initialize registration error.

        Args:
            literal: The literal being registered (None if not applicable)
            message: Description of the error
        """
        self.literal = literal
        if literal is None:
            super().__init__(message)
        else:
            super().__init__(f"Literal {literal!r}: {message}")


class MatcherContractError(ScanletError):
    """A matcher reported a length it cannot have consumed.

    The scanner needs every successful match to consume at least one byte
    and no more than the remaining input, otherwise it cannot make progress.
    """

    def __init__(self, matcher: object, length: int, remaining: int) -> None:
        self.matcher = matcher
        self.length = length
        self.remaining = remaining
        super().__init__(
            f"{matcher!r} reported length {length} with {remaining} bytes remaining"
        )


class UnexpectedInputError(ScanletError):
    """No registered pattern matched the input at some offset.

    Raised only by strict consumer helpers such as ``expect_tokens``.
    """

    def __init__(
        self,
        offset: int,
        location: SourceLocation | None = None,
        unexpected: str | None = None,
    ) -> None:
        """Initialize unexpected input error.

        Args:
            offset: Byte offset of the unmatched input
            location: Line/column location of the offset (optional)
            unexpected: The character found at the offset (optional)
        """
        self.offset = offset
        self.location = location
        self.unexpected = unexpected

        message = f"unexpected input at byte {offset}"
        if unexpected is not None:
            message = f"unexpected {unexpected!r} at byte {offset}"
        if location is not None:
            message = f"{location} {message}"

        super().__init__(message)
