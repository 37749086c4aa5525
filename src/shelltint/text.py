"""Styled text accumulation on top of prompt_toolkit fragments."""

from __future__ import annotations

from collections.abc import Iterable

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.formatted_text.utils import fragment_list_to_text

StyleAndText = tuple[str, str]


class StyledTextBuilder:
    """Append-only accumulator of ``(style, text)`` fragments."""

    def __init__(self) -> None:
        self._fragments: list[StyleAndText] = []

    def append(self, text: str, style: str = "") -> StyledTextBuilder:
        if text:
            self._fragments.append((style, text))
        return self

    def extend(self, fragments: Iterable[tuple[str, ...]]) -> StyledTextBuilder:
        # Mouse handlers (third item) are dropped.
        for fragment in fragments:
            self.append(fragment[1], fragment[0])
        return self

    def build(self) -> FormattedText:
        return FormattedText(list(self._fragments))


def unstyled(text: str) -> FormattedText:
    return StyledTextBuilder().append(text).build()


def plain_text(fragments: Iterable[tuple[str, ...]]) -> str:
    """Return the text of ``fragments`` with all styling removed."""

    return fragment_list_to_text(list(fragments))
