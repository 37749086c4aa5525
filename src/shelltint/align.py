"""Map parsed words back onto the raw buffer they came from.

The parser strips quotes and escapes, so a word is not always a literal slice
of the buffer. Each word is looked up in what remains of the buffer; the text
skipped over (whitespace, quote characters) is kept as verbatim glue.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger


@dataclass(frozen=True)
class AlignedSpan:
    """A ``[start, end)`` slice of the buffer; ``word`` is None for glue."""

    start: int
    end: int
    word: str | None = None

    @property
    def is_word(self) -> bool:
        return self.word is not None


def align_words(buffer: str, words: Sequence[str], start: int | None = None) -> list[AlignedSpan]:
    """Align ``words[1:]`` with ``buffer[start:]``.

    ``start`` defaults to the length of the command word. The returned spans
    are contiguous and cover ``buffer[start:]`` exactly. A word that cannot be
    found ends the alignment; the rest of the buffer becomes one glue span.
    """

    if start is None:
        start = len(words[0]) if words else 0
    idx = start
    spans: list[AlignedSpan] = []
    for word in words[1:]:
        found = buffer.find(word, idx)
        if found == -1:
            logger.debug("highlight.align.miss word={!r} offset={}", word, idx)
            break
        if found > idx:
            spans.append(AlignedSpan(idx, found))
        spans.append(AlignedSpan(found, found + len(word), word))
        idx = found + len(word)

    if idx < len(buffer):
        spans.append(AlignedSpan(idx, len(buffer)))
    return spans
