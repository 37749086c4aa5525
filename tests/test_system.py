from pathlib import Path

import pytest

from shelltint.editor import EditorSnapshot, RegionType
from shelltint.parser import ShellParser
from shelltint.system import DispatchMode, SystemHighlighter, command_index
from shelltint.text import plain_text

FILE = "ansigray"
DIR = "bold ansiblue"


def test_command_index() -> None:
    assert command_index("ls -la") == 2
    assert command_index("ls") == -1
    assert command_index("  ls -la") == 4
    assert command_index("ls\t-la") == 2
    assert command_index("") == -1


@pytest.mark.parametrize("buffer", ["", "   ", "\t"])
def test_blank_buffer_is_unchanged(system: SystemHighlighter, editor: EditorSnapshot, buffer: str) -> None:
    assert plain_text(system.highlight(buffer, editor)) == buffer
    assert all(style == "" for style, _ in system.highlight(buffer, editor))


def test_file_command_scenario(system: SystemHighlighter, editor: EditorSnapshot, tmp_path: Path) -> None:
    (tmp_path / "file.txt").write_text("x\n", encoding="utf-8")
    result = system.highlight("cat file.txt", editor)
    assert list(result) == [("class:command", "cat"), ("", " "), (FILE, "file.txt")]


def test_unknown_command_without_language_is_unstyled(system: SystemHighlighter, editor: EditorSnapshot) -> None:
    assert system.dispatch_mode("unknowncmd --flag", editor) is DispatchMode.PLAIN
    assert list(system.highlight("unknowncmd --flag", editor)) == [("", "unknowncmd --flag")]


def test_missing_path_segments_are_unstyled(system: SystemHighlighter, editor: EditorSnapshot) -> None:
    result = system.highlight("ls /no/such/path", editor)
    assert plain_text(result) == "ls /no/such/path"
    assert result[0] == ("class:command", "ls")
    assert all(style == "" for style, _ in result[1:])


def test_file_command_with_flags_and_quotes(system: SystemHighlighter, editor: EditorSnapshot, tmp_path: Path) -> None:
    (tmp_path / "my dir").mkdir()
    buffer = "ls -la 'my dir' "
    result = system.highlight(buffer, editor)
    assert plain_text(result) == buffer
    assert ("class:args", "-la") in result
    assert (DIR, "my dir") in result


def test_file_command_with_unterminated_quote(system: SystemHighlighter, editor: EditorSnapshot) -> None:
    buffer = 'cat "half open'
    assert plain_text(system.highlight(buffer, editor)) == buffer


def test_registered_command_splits_command_and_args(
    system: SystemHighlighter, editor: EditorSnapshot, args_highlighter
) -> None:
    result = system.highlight("git commit -m x", editor)
    assert list(result) == [("class:command", "git"), ("class:args", " commit -m x")]
    assert args_highlighter.calls == [" commit -m x"]


def test_alias_is_treated_as_command(system: SystemHighlighter, editor: EditorSnapshot) -> None:
    assert system.dispatch_mode("ll", editor) is DispatchMode.COMMAND
    assert list(system.highlight("ll", editor)) == [("class:command", "ll")]


def test_command_without_stylers_is_unstyled(classifier, registry, editor: EditorSnapshot) -> None:
    highlighter = SystemHighlighter(ShellParser(), registry, classifier)
    assert list(highlighter.highlight("git status", editor)) == [("", "git status")]


def test_language_highlighter_gets_whole_buffer(classifier, registry, editor: EditorSnapshot, args_highlighter) -> None:
    highlighter = SystemHighlighter(ShellParser(), registry, classifier, lang_highlighter=args_highlighter)
    assert highlighter.dispatch_mode("print(1)", editor) is DispatchMode.LANGUAGE
    assert list(highlighter.highlight("print(1)", editor)) == [("class:args", "print(1)")]


def test_editor_state_defers_to_default_highlighting(system: SystemHighlighter) -> None:
    editor = EditorSnapshot(search_term="at")
    assert system.dispatch_mode("cat file", editor) is DispatchMode.DEFAULT
    assert ("class:search", "at") in system.highlight("cat file", editor)

    selecting = EditorSnapshot(region=RegionType.LINE, region_range=(0, 3))
    assert system.dispatch_mode("cat file", selecting) is DispatchMode.DEFAULT


def test_empty_search_term_does_not_defer(system: SystemHighlighter) -> None:
    assert system.dispatch_mode("cat file", EditorSnapshot(search_term="")) is DispatchMode.FILE


def test_add_file_highlight_is_idempotent(system: SystemHighlighter, editor: EditorSnapshot) -> None:
    system.add_file_highlight("less", "cat")
    system.add_file_highlight("less")
    assert system.file_highlight == frozenset({"cat", "ls", "less"})
    assert system.dispatch_mode("less notes", editor) is DispatchMode.FILE


def test_file_highlight_is_case_sensitive(system: SystemHighlighter, editor: EditorSnapshot) -> None:
    assert system.dispatch_mode("CAT notes", editor) is DispatchMode.PLAIN


@pytest.mark.parametrize(
    "buffer",
    [
        "cat",
        "  cat  a  b  ",
        "cat a\\ b 'c d' \"e",
        "ls -- -x ./src/../src//",
        "git log --oneline",
        "x=cat notes",
        "echo 'unterminated",
        "cat \x00bad",
        "cat a\nb",
    ],
)
def test_highlight_is_lossless(system: SystemHighlighter, editor: EditorSnapshot, buffer: str) -> None:
    assert plain_text(system.highlight(buffer, editor)) == buffer
