"""Configuration management for shelltint."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_utils import configure_logging

DEFAULT_FILE_HIGHLIGHT = ["cat", "cd", "less", "ls", "nano", "vi"]


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SHELLTINT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Path highlighting
    ls_colors: Optional[str] = Field(None, description="LS_COLORS override; falls back to the LS_COLORS variable")
    use_forward_slash: bool = Field(default=False, description="Treat '/' as the path separator on every platform")
    drive_letters: bool = Field(default=os.name == "nt", description="Recognise 'C:' style drive prefixes")
    track_exec_bit: bool = Field(default=os.name != "nt", description="Platform has a meaningful executable bit")
    working_dir: Optional[Path] = Field(None, description="Directory relative paths are resolved against")
    file_highlight: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FILE_HIGHLIGHT),
        description="Commands whose arguments are highlighted as paths",
    )

    # Command registry
    commands: list[str] = Field(default_factory=list, description="Extra command names known to the shell")
    aliases: dict[str, str] = Field(default_factory=dict, description="Alias name to expansion")
    scripts: list[str] = Field(default_factory=list, description="Script names runnable as commands")
    search_path: bool = Field(default=True, description="Count executables on PATH as commands")

    # Sub-highlighters
    command_style: str = Field(default="class:command", description="Style applied to the command token")
    args_lexer: Optional[str] = Field(default="bash", description="Pygments lexer for command arguments")
    lang_lexer: Optional[str] = Field(None, description="Pygments lexer for non-command input")
    pygments_style: str = Field(default="default", description="Pygments style name")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")


def get_settings(**overrides: object) -> Settings:
    """Get application settings.

    Args:
        overrides: Field values taking precedence over environment and ``.env``

    Returns:
        Settings instance
    """
    settings = Settings(**overrides)

    configure_logging(settings.log_level)

    return settings
