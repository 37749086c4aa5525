from __future__ import annotations

from pathlib import Path

import pytest

from shelltint.editor import EditorSnapshot, PathConventions
from shelltint.highlighters import FixedStyleHighlighter
from shelltint.parser import ShellParser
from shelltint.paths import PathClassifier
from shelltint.styles import LsColorsResolver
from shelltint.system import SystemHighlighter

LS_COLORS = "di=01;34:ln=01;36:ex=01;32:fi=00;37:*.go=00;33:*.tar=01;31"


class StubRegistry:
    def __init__(self, commands: tuple[str, ...] = (), aliases: tuple[str, ...] = ()) -> None:
        self.commands = set(commands)
        self.aliases = set(aliases)

    def is_command_or_script(self, name: str) -> bool:
        return name in self.commands

    def is_command_alias(self, name: str) -> bool:
        return name in self.aliases


class RecordingHighlighter:
    """Paints text with one style and records each call."""

    def __init__(self, style: str) -> None:
        self.style = style
        self.calls: list[str] = []

    def highlight(self, text: str):
        self.calls.append(text)
        return [(self.style, text)] if text else []


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LS_COLORS", raising=False)
    for name in ("SHELLTINT_LS_COLORS", "SHELLTINT_FILE_HIGHLIGHT", "SHELLTINT_ARGS_LEXER", "SHELLTINT_LANG_LEXER"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def resolver() -> LsColorsResolver:
    return LsColorsResolver.from_string(LS_COLORS)


@pytest.fixture
def classifier(resolver: LsColorsResolver, tmp_path: Path) -> PathClassifier:
    return PathClassifier(resolver, track_exec_bit=True, cwd=tmp_path)


@pytest.fixture
def editor() -> EditorSnapshot:
    return EditorSnapshot(conventions=PathConventions(separator="/"))


@pytest.fixture
def registry() -> StubRegistry:
    return StubRegistry(commands=("git", "echo"), aliases=("ll",))


@pytest.fixture
def args_highlighter() -> RecordingHighlighter:
    return RecordingHighlighter("class:args")


@pytest.fixture
def system(classifier: PathClassifier, registry: StubRegistry, args_highlighter: RecordingHighlighter) -> SystemHighlighter:
    highlighter = SystemHighlighter(
        ShellParser(),
        registry,
        classifier,
        command_highlighter=FixedStyleHighlighter("class:command"),
        args_highlighter=args_highlighter,
    )
    highlighter.add_file_highlight("cat", "ls")
    return highlighter
