"""Text helpers shared by the reader and the field indexer."""

from __future__ import annotations

# Space and every C0 control character. Other Unicode whitespace such as
# U+00A0 is kept, so "\x00a;1" and "a;1" are the same line.
TRIM_CHARS = "".join(map(chr, range(33)))


def trim(text: str) -> str:
    """Strip leading and trailing characters with code points up to U+0020."""
    return text.strip(TRIM_CHARS)
