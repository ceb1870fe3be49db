"""Token tables: literal-to-token registration.

A token table is built explicitly by the calling code from
``(literal, token)`` pairs and reduced into a single left-biased
alternation. Registration order is priority order.

Thread Safety:
TokenTable is immutable after creation. Safe to share.
Use TokenTableBuilder for mutable construction.

Example:
    >>> builder = TokenTableBuilder().register("==", "EQEQ").register("=", "EQ")
    >>> table = builder.build()
    >>> table.parse(memoryview(b"=="))
    ('EQEQ', 2)

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Generic, TypeVar

from scanlet.errors import PatternError, RegistrationError
from scanlet.lexer.lex import TokenAlternation, TokenizingPattern, TokenPattern, lex
from scanlet.text import ENCODING, Text

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class TokenTable(TokenizingPattern[T]):
    """Immutable table of literal patterns and their tokens.

    The table is itself a tokenizing matcher: the first registered
    literal that matches decides the token.

    Thread Safety:
        Immutable after creation. Safe to share across threads.

    """

    __slots__ = ("_entries", "_by_literal", "_matcher")

    def __init__(self, entries: tuple[TokenPattern[T], ...]) -> None:
        """Initialize table from pre-built entries.

        Use TokenTableBuilder to create instances.
        """
        self._entries = entries
        self._by_literal = {entry.matcher.value: entry.token for entry in entries}
        self._matcher = TokenAlternation(entries)

    def parse(self, text: Text) -> tuple[T, int] | None:
        return self._matcher.parse(text)

    def get(self, literal: str | bytes) -> T | None:
        """Get the token registered for an exact literal."""
        return self._by_literal.get(_encode(literal))

    @property
    def literals(self) -> tuple[bytes, ...]:
        """Encoded literals in priority order."""
        return tuple(entry.matcher.value for entry in self._entries)

    @property
    def tokens(self) -> tuple[T, ...]:
        """Tokens in priority order."""
        return tuple(entry.token for entry in self._entries)

    def __contains__(self, literal: str | bytes) -> bool:
        return _encode(literal) in self._by_literal

    def __iter__(self) -> Iterator[tuple[bytes, T]]:
        for entry in self._entries:
            yield entry.matcher.value, entry.token

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TokenTable({len(self._entries)} literals)"


class TokenTableBuilder(Generic[T]):
    """Mutable builder for TokenTable.

    Register literals, then call build() to create an immutable table.

    Example:
            >>> builder = TokenTableBuilder().register_all({"+": "PLUS", "-": "MINUS"})
            >>> table = builder.build()

    """

    __slots__ = ("_entries", "_seen")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._entries: list[TokenPattern[T]] = []
        self._seen: set[bytes] = set()

    def register(self, literal: str | bytes, token: T) -> TokenTableBuilder[T]:
        """Register a literal and its token.

        Args:
            literal: Literal text (str is encoded as UTF-8)
            token: Token produced when the literal matches

        Returns:
            The builder, for chaining

        Raises:
            RegistrationError: If the literal is empty or already registered
        """
        try:
            entry = lex(literal, token)
        except PatternError as e:
            raise RegistrationError(literal, str(e)) from e
        if entry.matcher.value in self._seen:
            raise RegistrationError(literal, "already registered")
        self._seen.add(entry.matcher.value)
        self._entries.append(entry)
        return self

    def register_all(self, mapping: Mapping[str | bytes, T]) -> TokenTableBuilder[T]:
        """Register every literal of a mapping, in iteration order."""
        for literal, token in mapping.items():
            self.register(literal, token)
        return self

    def build(self) -> TokenTable[T]:
        """Build immutable table.

        Raises:
            RegistrationError: If nothing was registered
        """
        if not self._entries:
            raise RegistrationError(None, "token table is empty")
        return TokenTable(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


def from_enum(enum_cls: type[E]) -> TokenTable[E]:
    """Build a token table from an Enum whose values are literals.

    Members are registered in definition order, so put longer literals
    sharing a prefix first (``EQEQ = "=="`` before ``EQ = "="``).

    Raises:
        RegistrationError: If a member's value is not a str or bytes
    """
    builder: TokenTableBuilder[E] = TokenTableBuilder()
    for member in enum_cls:
        if not isinstance(member.value, (str, bytes)):
            raise RegistrationError(
                member.value, f"{enum_cls.__name__}.{member.name} value is not a literal"
            )
        builder.register(member.value, member)
    return builder.build()


def _encode(literal: str | bytes) -> bytes:
    if isinstance(literal, str):
        return literal.encode(ENCODING)
    return bytes(literal)
