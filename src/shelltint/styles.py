"""Resolve file roles and extension patterns to prompt_toolkit styles.

Styles come from the ``LS_COLORS`` syntax used by GNU ``ls``::

    di=01;34:ln=01;36:ex=01;32:*.go=0;32

Each value is a list of SGR parameters which is translated into the
space-separated style tokens prompt_toolkit understands (``bold ansiblue``).
An empty string means "no style configured".
"""

from __future__ import annotations

import os
from typing import Protocol

from loguru import logger

DEFAULT_LS_COLORS = "di=1;91:ex=1;92:ln=1;96:fi="

_ATTRIBUTES = {
    1: "bold",
    3: "italic",
    4: "underline",
    5: "blink",
    7: "reverse",
    8: "hidden",
}

_BASIC_COLORS = (
    "ansiblack",
    "ansired",
    "ansigreen",
    "ansiyellow",
    "ansiblue",
    "ansimagenta",
    "ansicyan",
    "ansigray",
)

_BRIGHT_COLORS = (
    "ansibrightblack",
    "ansibrightred",
    "ansibrightgreen",
    "ansibrightyellow",
    "ansibrightblue",
    "ansibrightmagenta",
    "ansibrightcyan",
    "ansiwhite",
)

_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


class StyleResolver(Protocol):
    def resolve(self, key: str) -> str: ...


def xterm_256_to_color(index: int) -> str:
    """Return the prompt_toolkit color of an xterm 256-color palette entry.

    The 16 system colors map to ``ansi*`` names, the rest to ``#rrggbb``.
    """

    if not 0 <= index <= 255:
        raise ValueError(f"color index out of range: {index}")
    if index < 8:
        return _BASIC_COLORS[index]
    if index < 16:
        return _BRIGHT_COLORS[index - 8]
    if index < 232:
        index -= 16
        r, g, b = index // 36, (index // 6) % 6, index % 6
        return f"#{_CUBE_LEVELS[r]:02x}{_CUBE_LEVELS[g]:02x}{_CUBE_LEVELS[b]:02x}"
    level = 8 + (index - 232) * 10
    return f"#{level:02x}{level:02x}{level:02x}"


def sgr_to_style(value: str) -> str:
    """Translate an SGR parameter list such as ``01;38;5;208`` to a style string."""

    codes = [int(part) if part else 0 for part in value.split(";")]
    tokens: list[str] = []
    i = 0
    while i < len(codes):
        code = codes[i]
        i += 1
        if code == 0:
            tokens.clear()
        elif code in _ATTRIBUTES:
            tokens.append(_ATTRIBUTES[code])
        elif 30 <= code <= 37:
            tokens.append(_BASIC_COLORS[code - 30])
        elif 40 <= code <= 47:
            tokens.append(f"bg:{_BASIC_COLORS[code - 40]}")
        elif 90 <= code <= 97:
            tokens.append(_BRIGHT_COLORS[code - 90])
        elif 100 <= code <= 107:
            tokens.append(f"bg:{_BRIGHT_COLORS[code - 100]}")
        elif code in (38, 48):
            prefix = "" if code == 38 else "bg:"
            mode = codes[i] if i < len(codes) else None
            if mode == 5 and i + 1 < len(codes):
                tokens.append(prefix + xterm_256_to_color(codes[i + 1]))
                i += 2
            elif mode == 2 and i + 3 < len(codes):
                r, g, b = (min(max(c, 0), 255) for c in codes[i + 1 : i + 4])
                tokens.append(f"{prefix}#{r:02x}{g:02x}{b:02x}")
                i += 4
            else:
                raise ValueError(f"incomplete extended color in {value!r}")
    return " ".join(tokens)


class LsColorsResolver:
    """Style lookup table built from an ``LS_COLORS`` string."""

    def __init__(self, styles: dict[str, str] | None = None) -> None:
        self._styles: dict[str, str] = dict(styles or {})

    @classmethod
    def from_string(cls, ls_colors: str) -> LsColorsResolver:
        styles: dict[str, str] = {}
        for entry in ls_colors.split(":"):
            if not entry:
                continue
            key, sep, value = entry.partition("=")
            if not sep or not key:
                logger.debug("styles.ls_colors.skip entry={!r}", entry)
                continue
            try:
                styles[key] = sgr_to_style(value)
            except ValueError:
                logger.debug("styles.ls_colors.skip entry={!r}", entry)
        return cls(styles)

    @classmethod
    def from_env(cls, default: str = DEFAULT_LS_COLORS) -> LsColorsResolver:
        return cls.from_string(os.environ.get("LS_COLORS") or default)

    def resolve(self, key: str) -> str:
        return self._styles.get(key, "")

    def keys(self) -> list[str]:
        return list(self._styles)
