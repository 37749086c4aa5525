"""Sub-highlighters plugged into the dispatcher.

Each one turns a slice of text into styled fragments without changing the
text. Slots that are not configured are ``None``; the dispatcher then passes
the slice through unstyled.
"""

from __future__ import annotations

from itertools import groupby
from typing import Protocol

from loguru import logger
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles.pygments import pygments_token_to_classname
from pygments.lexer import Lexer as PygmentsLexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .editor import EditorSnapshot, RegionType
from .errors import UnknownLexerError
from .text import StyledTextBuilder, plain_text, unstyled


class SyntaxHighlighter(Protocol):
    def highlight(self, text: str) -> FormattedText: ...


def highlight_with(highlighter: SyntaxHighlighter | None, text: str) -> FormattedText:
    if highlighter is None:
        return unstyled(text)
    return highlighter.highlight(text)


class FixedStyleHighlighter:
    """Paint the whole text with one style."""

    def __init__(self, style: str) -> None:
        self.style = style

    def highlight(self, text: str) -> FormattedText:
        return StyledTextBuilder().append(text, self.style).build()


class PygmentsHighlighter:
    """Highlight text with a Pygments lexer using ``class:pygments.*`` styles."""

    def __init__(self, lexer: PygmentsLexer) -> None:
        self.lexer = lexer

    @classmethod
    def by_name(cls, name: str) -> PygmentsHighlighter:
        try:
            lexer = get_lexer_by_name(name, stripnl=False, stripall=False, ensurenl=False)
        except ClassNotFound as exc:
            raise UnknownLexerError(f"unknown pygments lexer: {name}") from exc
        return cls(lexer)

    def highlight(self, text: str) -> FormattedText:
        builder = StyledTextBuilder()
        for token_type, value in self.lexer.get_tokens(text):
            builder.append(value, "class:" + pygments_token_to_classname(token_type))
        fragments = builder.build()
        if plain_text(fragments) != text:
            logger.debug("highlight.pygments.diverged lexer={}", self.lexer.name)
            return unstyled(text)
        return fragments


class DefaultHighlighter:
    """Editor-state highlighting used while searching, selecting or on error.

    Marks occurrences of the search term, the active region and everything from
    the error position onward. Overlapping marks combine their styles.
    """

    def highlight(self, buffer: str, editor: EditorSnapshot) -> FormattedText:
        styles = [""] * len(buffer)

        def mark(start: int, end: int, style: str) -> None:
            for i in range(max(start, 0), min(end, len(buffer))):
                styles[i] = f"{styles[i]} {style}".strip()

        if editor.error_pattern is not None:
            for match in editor.error_pattern.finditer(buffer):
                mark(match.start(), match.end(), "class:error")
        if editor.error_index > -1:
            mark(editor.error_index, len(buffer), "class:error")
        if editor.region is not RegionType.NONE and editor.region_range is not None:
            mark(*editor.region_range, "class:selection")
        if editor.search_term:
            start = buffer.find(editor.search_term)
            while start != -1:
                end = start + len(editor.search_term)
                mark(start, end, "class:search")
                start = buffer.find(editor.search_term, end)

        builder = StyledTextBuilder()
        position = 0
        for style, group in groupby(styles):
            size = len(list(group))
            builder.append(buffer[position : position + size], style)
            position += size
        return builder.build()
