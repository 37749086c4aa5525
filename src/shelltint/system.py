"""Highlight dispatcher for the command line buffer.

Every edit of the input line goes through :meth:`SystemHighlighter.highlight`,
which picks one of these routes:

* editor is searching, selecting or flagging an error: default highlighting
* blank buffer: returned as is
* command registered for file highlighting: per-segment path coloring
* known command, alias or script: command/arguments split
* anything else: the language highlighter, when one is configured

The rendered text always equals the buffer.
"""

from __future__ import annotations

import threading
from enum import Enum

from prompt_toolkit.formatted_text import FormattedText

from .align import align_words
from .editor import EditorSnapshot
from .highlighters import DefaultHighlighter, SyntaxHighlighter, highlight_with
from .parser import ParseContext, Parser
from .paths import PathArgHighlighter, PathClassifier
from .registry import CommandRegistry
from .text import StyledTextBuilder, unstyled


class DispatchMode(Enum):
    DEFAULT = "default"
    FILE = "file"
    COMMAND = "command"
    LANGUAGE = "language"
    PLAIN = "plain"


def command_index(buffer: str) -> int:
    """Index of the first whitespace after the leading token, or -1."""

    found = False
    for i, char in enumerate(buffer):
        if not char.isspace():
            found = True
        elif found:
            return i
    return -1


class SystemHighlighter:
    def __init__(
        self,
        parser: Parser,
        registry: CommandRegistry,
        classifier: PathClassifier,
        *,
        command_highlighter: SyntaxHighlighter | None = None,
        args_highlighter: SyntaxHighlighter | None = None,
        lang_highlighter: SyntaxHighlighter | None = None,
        default_highlighter: DefaultHighlighter | None = None,
    ) -> None:
        self.parser = parser
        self.registry = registry
        self.command_highlighter = command_highlighter
        self.args_highlighter = args_highlighter
        self.lang_highlighter = lang_highlighter
        self.default_highlighter = default_highlighter or DefaultHighlighter()
        self.path_highlighter = PathArgHighlighter(classifier, args_highlighter)
        self._file_highlight: frozenset[str] = frozenset()
        self._lock = threading.Lock()

    @property
    def file_highlight(self) -> frozenset[str]:
        return self._file_highlight

    def add_file_highlight(self, *commands: str) -> None:
        """Highlight the arguments of ``commands`` as filesystem paths."""

        with self._lock:
            self._file_highlight = self._file_highlight | frozenset(commands)

    def dispatch_mode(self, buffer: str, editor: EditorSnapshot) -> DispatchMode:
        return self._route(buffer, editor)

    def highlight(self, buffer: str, editor: EditorSnapshot) -> FormattedText:
        mode = self._route(buffer, editor)
        if mode is DispatchMode.DEFAULT:
            return self.default_highlighter.highlight(buffer, editor)
        if mode is DispatchMode.FILE:
            return self._file_highlight_buffer(buffer, editor)
        if mode is DispatchMode.COMMAND:
            return self._command_highlight_buffer(buffer)
        if mode is DispatchMode.LANGUAGE:
            return highlight_with(self.lang_highlighter, buffer)
        return unstyled(buffer)

    def _route(self, buffer: str, editor: EditorSnapshot) -> DispatchMode:
        if editor.wants_default_highlight():
            return DispatchMode.DEFAULT
        trimmed = buffer.strip()
        if not trimmed:
            return DispatchMode.PLAIN
        command = self.parser.get_command(trimmed.split()[0])
        if command in self._file_highlight:
            return DispatchMode.FILE
        if self.registry.is_command_or_script(command) or self.registry.is_command_alias(command):
            return DispatchMode.COMMAND
        if self.lang_highlighter is not None:
            return DispatchMode.LANGUAGE
        return DispatchMode.PLAIN

    def _file_highlight_buffer(self, buffer: str, editor: EditorSnapshot) -> FormattedText:
        idx = command_index(buffer)
        builder = StyledTextBuilder()
        if idx < 0:
            return builder.extend(highlight_with(self.command_highlighter, buffer)).build()

        builder.extend(highlight_with(self.command_highlighter, buffer[:idx]))
        words = self.parser.parse(buffer, len(buffer) + 1, ParseContext.COMPLETE)
        for span in align_words(buffer, words, start=idx):
            if span.word is None:
                builder.append(buffer[span.start : span.end])
            else:
                builder.extend(self.path_highlighter.highlight_arg(span.word, editor))
        return builder.build()

    def _command_highlight_buffer(self, buffer: str) -> FormattedText:
        if self.command_highlighter is None and self.args_highlighter is None:
            return unstyled(buffer)
        idx = command_index(buffer)
        builder = StyledTextBuilder()
        if idx < 0:
            return builder.extend(highlight_with(self.command_highlighter, buffer)).build()
        builder.extend(highlight_with(self.command_highlighter, buffer[:idx]))
        builder.extend(highlight_with(self.args_highlighter, buffer[idx:]))
        return builder.build()
