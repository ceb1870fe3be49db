"""Encoded text handling for Scanlet.

The scanner works on UTF-8 encoded text. Every offset and length reported
by a matcher or by the tokenization iterator is a byte offset into that
encoding, never a character index.

Text is wrapped in a read-only memoryview so that suffixes handed to
matchers are zero-copy slices of the caller's buffer.

Example:
    >>> text = as_text("Ф=1")
    >>> char_width(text)
    2
    >>> decode(text[2:])
    '=1'
"""

from __future__ import annotations

from typing import TypeAlias

Text: TypeAlias = memoryview
Source: TypeAlias = str | bytes | bytearray | memoryview

ENCODING = "utf-8"


def as_text(source: Source) -> Text:
    """Wrap source as read-only encoded text.

    ``str`` is encoded to UTF-8 once; bytes-like inputs are wrapped
    without copying.

    Args:
        source: Text or bytes-like input

    Returns:
        Read-only memoryview of unsigned bytes

    Raises:
        TypeError: If source is not text or bytes-like
    """
    if isinstance(source, str):
        return memoryview(source.encode(ENCODING)).toreadonly()
    if isinstance(source, memoryview):
        if source.format != "B" or source.ndim != 1:
            source = source.cast("B")
        return source.toreadonly()
    if isinstance(source, (bytes, bytearray)):
        return memoryview(source).toreadonly()
    raise TypeError(f"expected str or bytes-like text, got {type(source).__name__}")


def _lead_width(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    # Continuation byte or invalid lead
    return 0


def char_width(text: Text) -> int | None:
    """Byte width of the first encoded character of text.

    Returns None for empty text and for text that does not start with a
    complete, well-formed UTF-8 sequence, so a partial character is never
    reported.

    Args:
        text: Encoded text

    Returns:
        Width in bytes (1-4), or None
    """
    if not text:
        return None
    width = _lead_width(text[0])
    if width == 0 or width > len(text):
        return None
    if width == 1:
        return 1
    try:
        decode(text[:width], errors="strict")
    except UnicodeDecodeError:
        return None
    return width


def decode(text: Text, *, errors: str = "replace") -> str:
    """Decode encoded text back to str (for diagnostics and token values).

    Malformed bytes become U+FFFD unless errors="strict", which raises
    UnicodeDecodeError instead.
    """
    return bytes(text).decode(ENCODING, errors=errors)
