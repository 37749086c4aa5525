"""Wire settings into a ready-to-use highlighter."""

from __future__ import annotations

import os

from prompt_toolkit.styles import BaseStyle, Style, merge_styles, style_from_pygments_cls
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .config import Settings
from .editor import EditorSnapshot, PathConventions
from .errors import InvalidStyleError
from .highlighters import FixedStyleHighlighter, PygmentsHighlighter
from .parser import ShellParser
from .paths import PathClassifier
from .registry import SystemCommandRegistry
from .styles import LsColorsResolver
from .system import SystemHighlighter

EDITOR_STYLE_RULES = {
    "command": "bold",
    "search": "reverse",
    "selection": "bg:ansibrightblack",
    "error": "ansired underline",
}


def build_resolver(settings: Settings) -> LsColorsResolver:
    if settings.ls_colors:
        return LsColorsResolver.from_string(settings.ls_colors)
    return LsColorsResolver.from_env()


def build_conventions(settings: Settings) -> PathConventions:
    return PathConventions(separator=os.sep, drive_letters=settings.drive_letters)


def build_snapshot(settings: Settings) -> EditorSnapshot:
    """Snapshot of an idle editor: no search, selection or error marker."""

    return EditorSnapshot(use_forward_slash=settings.use_forward_slash, conventions=build_conventions(settings))


def build_highlighter(settings: Settings) -> SystemHighlighter:
    registry = SystemCommandRegistry(
        settings.commands,
        settings.aliases,
        settings.scripts,
        search_path=settings.search_path,
    )
    classifier = PathClassifier(
        build_resolver(settings),
        track_exec_bit=settings.track_exec_bit,
        cwd=settings.working_dir,
    )
    highlighter = SystemHighlighter(
        ShellParser(),
        registry,
        classifier,
        command_highlighter=FixedStyleHighlighter(settings.command_style) if settings.command_style else None,
        args_highlighter=PygmentsHighlighter.by_name(settings.args_lexer) if settings.args_lexer else None,
        lang_highlighter=PygmentsHighlighter.by_name(settings.lang_lexer) if settings.lang_lexer else None,
    )
    highlighter.add_file_highlight(*settings.file_highlight)
    return highlighter


def build_style(settings: Settings) -> BaseStyle:
    try:
        pygments_style = get_style_by_name(settings.pygments_style)
    except ClassNotFound as exc:
        raise InvalidStyleError(f"unknown pygments style: {settings.pygments_style}") from exc
    return merge_styles([style_from_pygments_cls(pygments_style), Style.from_dict(EDITOR_STYLE_RULES)])
