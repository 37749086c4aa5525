"""Filesystem-aware highlighting of path arguments."""

from __future__ import annotations

import os
import re
import stat
from enum import Enum
from pathlib import Path

from loguru import logger
from prompt_toolkit.formatted_text import FormattedText

from .editor import EditorSnapshot
from .highlighters import SyntaxHighlighter, highlight_with
from .styles import StyleResolver
from .text import StyledTextBuilder, unstyled

FLAG_MARKER = "-"
DRIVE_RE = re.compile(r"^[A-Za-z]:")


class PathSegmentStyle(Enum):
    """Classification of one path segment, valued by its LS_COLORS key."""

    SYMLINK = "ln"
    DIRECTORY = "di"
    EXECUTABLE = "ex"
    EXTENSION = "*"
    REGULAR_FILE = "fi"
    UNSTYLED = ""


def extension_pattern(name: str) -> str | None:
    """Return the ``*.ext`` lookup key for ``name``, or None without a dot."""

    idx = name.rfind(".")
    if idx == -1:
        return None
    return "*" + name[idx:]


class PathClassifier:
    """Classify paths the way ``ls --color`` does.

    Precedence is symlink, directory, executable, extension pattern, regular
    file. Anything else, including paths that do not exist, is unstyled.
    """

    def __init__(self, resolver: StyleResolver, *, track_exec_bit: bool = True, cwd: Path | None = None) -> None:
        self.resolver = resolver
        self.track_exec_bit = track_exec_bit
        self.cwd = cwd

    def classify(self, path: str, name: str | None = None) -> PathSegmentStyle:
        return self._inspect(path, name)[0]

    def style_for(self, path: str, name: str | None = None) -> str:
        return self._inspect(path, name)[1]

    def _target(self, path: str) -> str:
        target = os.path.expanduser(path)
        if self.cwd is not None and not os.path.isabs(target):
            target = os.path.join(self.cwd, target)
        return target

    def _inspect(self, path: str, name: str | None) -> tuple[PathSegmentStyle, str]:
        if not path:
            return PathSegmentStyle.UNSTYLED, ""
        target = self._target(path)
        try:
            st: os.stat_result | None = os.lstat(target)
        except (FileNotFoundError, NotADirectoryError):
            st = None

        if st is not None:
            if stat.S_ISLNK(st.st_mode):
                return self._role(PathSegmentStyle.SYMLINK)
            if stat.S_ISDIR(st.st_mode):
                return self._role(PathSegmentStyle.DIRECTORY)
            if self.track_exec_bit and os.access(target, os.X_OK):
                return self._role(PathSegmentStyle.EXECUTABLE)

        pattern = extension_pattern(name if name is not None else os.path.basename(path))
        if pattern is not None:
            style = self.resolver.resolve(pattern)
            if style:
                return PathSegmentStyle.EXTENSION, style

        if st is not None and stat.S_ISREG(st.st_mode):
            return self._role(PathSegmentStyle.REGULAR_FILE)
        return PathSegmentStyle.UNSTYLED, ""

    def _role(self, kind: PathSegmentStyle) -> tuple[PathSegmentStyle, str]:
        return kind, self.resolver.resolve(kind.value)


def drive_prefix(arg: str, separator: str) -> str:
    """Return the leading ``C:`` or ``C:<sep>`` of ``arg``, if any."""

    if DRIVE_RE.match(arg) is None:
        return ""
    if len(arg) == 2:
        return arg
    if arg[2] == separator[0]:
        return arg[:3]
    return ""


class PathArgHighlighter:
    """Color each segment of an argument according to what it names on disk."""

    def __init__(self, classifier: PathClassifier, args_highlighter: SyntaxHighlighter | None = None) -> None:
        self.classifier = classifier
        self.args_highlighter = args_highlighter

    def highlight_arg(self, arg: str, editor: EditorSnapshot) -> FormattedText:
        if arg.startswith(FLAG_MARKER):
            return highlight_with(self.args_highlighter, arg)
        try:
            return self._highlight_path(arg, editor)
        except Exception as exc:
            logger.debug("highlight.path.fallback arg={!r} error={!r}", arg, exc)
            return unstyled(arg)

    def _highlight_path(self, arg: str, editor: EditorSnapshot) -> FormattedText:
        separator = editor.separator
        prefix = drive_prefix(arg, separator) if editor.conventions.drive_letters else ""

        builder = StyledTextBuilder().append(prefix)
        current = prefix
        for i, component in enumerate(arg[len(prefix) :].split(separator)):
            if i:
                builder.append(separator)
                current += separator
            if not component:
                continue
            current += component
            builder.append(component, self.classifier.style_for(current, component))
        return builder.build()
