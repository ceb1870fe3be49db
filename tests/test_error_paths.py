"""Error-path tests.

Exercises the exception hierarchy and message formatting. Unmatched
input itself is never an exception inside the iterator; see
tests/lexer/test_iterator_state.py for that.
"""

import pytest

from scanlet.errors import (
    MatcherContractError,
    PatternError,
    RegistrationError,
    ScanletError,
    UnexpectedInputError,
)
from scanlet.lexer import TokenTableBuilder
from scanlet.location import SourceLocation
from scanlet.parse import UnexpectedAt, tokenize

# =========================================================================
# UnexpectedInputError construction and formatting
# =========================================================================


class TestUnexpectedInputErrorFormatting:
    """Verify UnexpectedInputError produces well-formatted messages."""

    def test_offset_only(self) -> None:
        err = UnexpectedInputError(7)
        assert str(err) == "unexpected input at byte 7"
        assert err.location is None

    def test_with_character(self) -> None:
        err = UnexpectedInputError(7, unexpected="?")
        assert str(err) == "unexpected '?' at byte 7"

    def test_with_location(self) -> None:
        loc = SourceLocation(lineno=3, col_offset=2, offset=7, source_file="a.txt")
        err = UnexpectedInputError(7, location=loc, unexpected="?")
        assert str(err) == "a.txt:3:2 unexpected '?' at byte 7"


# =========================================================================
# Hierarchy
# =========================================================================


class TestHierarchy:
    """All errors derive from ScanletError."""

    @pytest.mark.parametrize(
        "err",
        [
            PatternError("bad"),
            RegistrationError("x", "bad"),
            MatcherContractError(object(), 0, 1),
            UnexpectedInputError(0),
        ],
    )
    def test_is_scanlet_error(self, err: Exception) -> None:
        assert isinstance(err, ScanletError)

    def test_pattern_error_is_value_error(self) -> None:
        assert isinstance(PatternError("bad"), ValueError)


class TestRegistrationError:
    """Verify RegistrationError formatting."""

    def test_with_literal(self) -> None:
        err = RegistrationError("+", "already registered")
        assert str(err) == "Literal '+': already registered"
        assert err.literal == "+"

    def test_without_literal(self) -> None:
        assert str(RegistrationError(None, "token table is empty")) == "token table is empty"


class TestMatcherContractError:
    """Verify MatcherContractError attributes."""

    def test_attributes(self) -> None:
        err = MatcherContractError("m", 5, 2)
        assert err.length == 5
        assert err.remaining == 2
        assert "5" in str(err) and "2 bytes remaining" in str(err)


class TestUnmatchedInputIsNotAnException:
    """The iterator reports failure as data."""

    def test_no_raise(self) -> None:
        table = TokenTableBuilder().register("a", "A").build()
        assert list(tokenize(table, "b")) == [UnexpectedAt(0)]
