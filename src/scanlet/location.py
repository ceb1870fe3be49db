"""Source location tracking for error messages and debugging.

Scanner offsets are byte offsets. SourceLocation translates one into a
1-indexed line and column (column counted in characters) for humans.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from scanlet.text import Source, as_text, decode


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    All positions are 1-indexed (lineno and col_offset start at 1).

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset in characters (1-indexed)
        offset: Absolute byte offset in the encoded source
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation.from_offset("ab\\ncd", 4)
            >>> (loc.lineno, loc.col_offset)
            (2, 2)
            >>> str(SourceLocation(3, 7, source_file="calc.txt"))
            'calc.txt:3:7'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls,
        source: Source,
        offset: int,
        source_file: str | None = None,
    ) -> SourceLocation:
        """Compute the location of a byte offset.

        Args:
            source: The scanned text (str or encoded bytes)
            offset: Byte offset into the encoded text
            source_file: Optional source file path

        Returns:
            SourceLocation for the offset

        Raises:
            ValueError: If offset is outside the text
        """
        text = as_text(source)
        if not 0 <= offset <= len(text):
            raise ValueError(f"offset {offset} outside text of length {len(text)}")

        prefix = decode(text[:offset])
        lineno = prefix.count("\n") + 1
        col = len(prefix) - (prefix.rfind("\n") + 1) + 1
        return cls(lineno=lineno, col_offset=col, offset=offset, source_file=source_file)
