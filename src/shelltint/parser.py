"""Command parsing helpers."""

from __future__ import annotations

import re
import shlex
from enum import Enum
from typing import Protocol

from .errors import ParseError

ASSIGN_PREFIX_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*=(?=\S)")


class ParseContext(Enum):
    ACCEPT_LINE = "accept_line"
    COMPLETE = "complete"


class Parser(Protocol):
    def get_command(self, token: str) -> str: ...

    def parse(self, buffer: str, cursor: int, context: ParseContext) -> list[str]: ...


class ShellParser:
    """Shell-rule word splitter with a completion mode tolerant of open quotes."""

    def parse(self, buffer: str, cursor: int, context: ParseContext = ParseContext.ACCEPT_LINE) -> list[str]:
        text = buffer[: max(cursor, 0)]
        lexer = shlex.shlex(text, posix=True)
        lexer.whitespace_split = True
        lexer.commenters = ""

        words: list[str] = []
        while True:
            try:
                word = lexer.get_token()
            except ValueError as exc:
                if context is not ParseContext.COMPLETE:
                    raise ParseError(str(exc)) from exc
                # shlex keeps the characters consumed so far
                if lexer.token or lexer.state in lexer.quotes:
                    words.append(lexer.token)
                break
            if word is None:
                break
            words.append(word)
        return words

    def get_command(self, token: str) -> str:
        """Normalize the first token of a line to the command name it invokes."""

        name = token.strip()
        if ASSIGN_PREFIX_RE.match(name):
            name = name.split("=", 1)[1]
        if name.startswith(":"):
            name = name[1:]
        words = self.parse(name, len(name), ParseContext.COMPLETE)
        return words[0] if words else name
