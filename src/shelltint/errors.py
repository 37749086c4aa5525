"""Application-level exception types for shelltint."""

from __future__ import annotations


class ShelltintError(Exception):
    """Base exception for shelltint."""


class ConfigurationError(ShelltintError):
    """Base exception for configuration and startup validation errors."""


class UnknownLexerError(ConfigurationError):
    """Raised when a configured Pygments lexer name cannot be found."""


class InvalidStyleError(ConfigurationError):
    """Raised when a configured Pygments style name cannot be found."""


class ParseError(ShelltintError):
    """Raised when a buffer cannot be split into words outside completion mode."""
