"""Tests for matcher primitives and combinators."""

from __future__ import annotations

import pytest

from scanlet.config import ScanConfig, scan_config_context
from scanlet.errors import PatternError
from scanlet.patterns import (
    ANY,
    Alternation,
    Matcher,
    Sequence,
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
from scanlet.text import as_text


class TestAnyPattern:
    """Tests for ANY."""

    def test_ascii(self) -> None:
        assert ANY.test(as_text("q"))
        assert ANY.match_str("q") == 1

    def test_multibyte(self) -> None:
        assert ANY.match_str("😀") == len("😀".encode())
        assert ANY.match_str("Ф") == 2

    def test_empty(self) -> None:
        assert not ANY.test(as_text(""))
        assert ANY.match_str("") is None

    def test_consumes_only_first_character(self) -> None:
        assert ANY.match_str("Фx") == 2

    def test_any_text(self) -> None:
        """Zero or more of anything matches any text in full."""
        any_text = zero_or_more(ANY)
        assert any_text.test(as_text(""))
        assert any_text.match_str("") == 0
        assert any_text.match_str("🍏🍎🍐🍊🍋🍌") == len("🍏🍎🍐🍊🍋🍌".encode())
        assert any_text.match_str("Привет, мир!") == len("Привет, мир!".encode())


class TestLiteralPattern:
    """Tests for literal()."""

    def test_prefix_match(self) -> None:
        assert literal("let").match_str("let x") == 3

    def test_mismatch(self) -> None:
        assert literal("let").match_str("lex") is None

    def test_shorter_text(self) -> None:
        assert literal("let").match_str("le") is None

    def test_multibyte_length_in_bytes(self) -> None:
        assert literal("Ф").match_str("ФФ") == 2

    def test_bytes_literal(self) -> None:
        assert literal(b"\x00\x01").match_str(b"\x00\x01\x02") == 2

    def test_empty_rejected(self) -> None:
        with pytest.raises(PatternError):
            literal("")

    def test_pattern_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            literal(b"")


class TestSatisfy:
    """Tests for satisfy()."""

    def test_accepts(self) -> None:
        assert satisfy(str.isdigit).match_str("7up") == 1

    def test_rejects(self) -> None:
        assert satisfy(str.isdigit).match_str("up") is None

    def test_multibyte(self) -> None:
        assert satisfy(str.isalpha).match_str("Жук") == 2

    def test_empty(self) -> None:
        assert satisfy(str.isalpha).match_str("") is None

    def test_repr_uses_name(self) -> None:
        assert "digit" in repr(satisfy(str.isdigit, name="digit"))


class TestPatternCoercion:
    """Tests for pattern()."""

    def test_str_becomes_literal(self) -> None:
        assert pattern("ab") == literal("ab")

    def test_matcher_unchanged(self) -> None:
        assert pattern(ANY) is ANY

    def test_external_matcher(self) -> None:
        """Any object with read() is a matcher."""

        class Digits:
            def read(self, text: memoryview) -> int | None:
                n = 0
                while n < len(text) and 0x30 <= text[n] <= 0x39:
                    n += 1
                return n or None

        digits = Digits()
        assert isinstance(digits, Matcher)
        assert pattern(digits) is digits
        assert alternate(digits, "x").match_str("x") == 1
        assert alternate(digits, "x").match_str("123x") == 3

    def test_rejects_non_matcher(self) -> None:
        with pytest.raises(TypeError):
            pattern(42)  # type: ignore[arg-type]


class TestAlternation:
    """Tests for alternate()."""

    def test_first_success_wins(self) -> None:
        assert alternate("=", "==").match_str("==") == 1

    def test_order_matters(self) -> None:
        assert alternate("==", "=").match_str("==") == 2

    def test_falls_through(self) -> None:
        assert alternate("a", "b").match_str("b") == 1

    def test_both_fail(self) -> None:
        assert alternate("a", "b").match_str("c") is None

    def test_flattened(self) -> None:
        left = alternate(alternate("a", "b"), "c")
        right = alternate("a", alternate("b", "c"))
        assert left == right
        assert isinstance(left, Alternation)
        assert len(left.alternatives) == 3

    def test_empty_rejected(self) -> None:
        with pytest.raises(PatternError):
            alternate()


class TestRepetition:
    """Tests for repeat() and its shorthands."""

    def test_greedy(self) -> None:
        assert repeat("ab", 2).match_str("ababx") == 4

    def test_below_minimum(self) -> None:
        assert repeat("ab", 3).match_str("ababx") is None

    def test_stops_at_maximum(self) -> None:
        assert repeat("a", 0, 2).match_str("aaaa") == 2

    def test_zero_repeats_allowed(self) -> None:
        assert repeat("a", 0, 3).match_str("b") == 0

    def test_exactly(self) -> None:
        assert exactly("a", 2).match_str("aaa") == 2
        assert exactly("a", 2).match_str("a") is None

    def test_one_or_more(self) -> None:
        assert one_or_more("a").match_str("") is None
        assert one_or_more("a").match_str("aab") == 2

    def test_optional(self) -> None:
        assert optional("a").match_str("aa") == 1
        assert optional("a").match_str("b") == 0

    def test_no_backtracking(self) -> None:
        """Greedy expansion is final even if a shorter count would let the sequence match."""
        assert sequence(repeat("a"), "a").match_str("aaa") is None

    def test_empty_inner_match_terminates(self) -> None:
        """A zero-length inner match satisfies any minimum without looping."""
        assert repeat(optional("a"), 3).match_str("b") == 0
        assert zero_or_more(zero_or_more("a")).match_str("aab") == 2

    @pytest.mark.parametrize(("lo", "hi"), [(-1, None), (3, 2)])
    def test_invalid_bounds(self, lo: int, hi: int | None) -> None:
        with pytest.raises(PatternError):
            repeat("a", lo, hi)

    def test_result_ignores_scan_config(self) -> None:
        """The same repetition on the same text matches the same length in any context."""
        at_least_three = repeat("a", 3)
        any_chars = zero_or_more(ANY)
        outside = (at_least_three.match_str("aaaa"), any_chars.match_str("Привет"))
        with scan_config_context(ScanConfig(trace=True, source_file="calc.txt")):
            inside = (at_least_three.match_str("aaaa"), any_chars.match_str("Привет"))
        assert outside == inside == (4, 12)

    def test_repr(self) -> None:
        assert repr(repeat("a", 1, 3)) == "repeat(literal('a'), 1..3)"
        assert repr(repeat(ANY)) == "repeat(ANY, 0..)"


class TestSequence:
    """Tests for sequence()."""

    def test_all_parts(self) -> None:
        assert sequence("a", repeat("b"), "c").match_str("abbbc") == 5
        assert sequence("a", repeat("b"), "c").match_str("ac") == 2

    def test_part_fails(self) -> None:
        assert sequence("a", repeat("b"), "c").match_str("abb") is None

    def test_flattened(self) -> None:
        seq = sequence(sequence("a", "b"), "c")
        assert isinstance(seq, Sequence)
        assert len(seq.parts) == 3

    def test_empty_rejected(self) -> None:
        with pytest.raises(PatternError):
            sequence()


class TestImmutability:
    """Patterns are frozen values."""

    def test_frozen(self) -> None:
        lit = literal("a")
        with pytest.raises(AttributeError):
            lit.value = b"b"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert repeat("a", 1) == repeat(literal("a"), 1)
        assert hash(alternate("a", "b")) == hash(alternate("a", "b"))
