"""Command, alias and script lookup."""

from __future__ import annotations

import shutil
from collections.abc import Iterable, Mapping
from typing import Protocol


class CommandRegistry(Protocol):
    def is_command_or_script(self, name: str) -> bool: ...

    def is_command_alias(self, name: str) -> bool: ...


class SystemCommandRegistry:
    """Registry of shell commands, aliases and scripts.

    With ``search_path`` enabled, any executable found on ``PATH`` also counts
    as a command.
    """

    def __init__(
        self,
        commands: Iterable[str] = (),
        aliases: Mapping[str, str] | None = None,
        scripts: Iterable[str] = (),
        *,
        search_path: bool = True,
    ) -> None:
        self._commands = set(commands)
        self._aliases = dict(aliases or {})
        self._scripts = set(scripts)
        self._search_path = search_path

    def register_command(self, *names: str) -> None:
        self._commands.update(names)

    def add_alias(self, name: str, expansion: str) -> None:
        self._aliases[name] = expansion

    def is_command_or_script(self, name: str) -> bool:
        if not name:
            return False
        if name in self._commands or name in self._scripts:
            return True
        return self._search_path and shutil.which(name) is not None

    def is_command_alias(self, name: str) -> bool:
        return name in self._aliases
