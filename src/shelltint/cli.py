"""Command line entry points for shelltint."""

from __future__ import annotations

from typing import NoReturn

import typer
from loguru import logger
from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.patch_stdout import patch_stdout
from rich.console import Console
from rich.table import Table

from .bootstrap import build_conventions, build_highlighter, build_snapshot, build_style
from .config import Settings, get_settings
from .errors import ConfigurationError
from .lexer import SystemLexer
from .logging_utils import configure_logging
from .system import SystemHighlighter

EXIT_COMMANDS = ("exit", "quit")

app = typer.Typer(
    name="shelltint",
    help="Highlight command-line input the way it is typed.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _exit_with_error(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def _load(**overrides: object) -> tuple[Settings, SystemHighlighter]:
    try:
        settings = get_settings(**overrides)
        return settings, build_highlighter(settings)
    except ConfigurationError as exc:
        _exit_with_error(exc)


@app.command()
def render(
    buffer: str = typer.Argument(..., help="Input line to highlight"),
    forward_slash: bool = typer.Option(False, "--forward-slash", help="Use '/' as the path separator"),
    spans: bool = typer.Option(False, "--spans", help="Show the styled fragments as a table"),
) -> None:
    """Print BUFFER highlighted."""

    overrides: dict[str, object] = {"use_forward_slash": True} if forward_slash else {}
    settings, highlighter = _load(**overrides)
    fragments = highlighter.highlight(buffer, build_snapshot(settings))

    if spans:
        table = Table("style", "text")
        for style, text, *_ in fragments:
            table.add_row(style or "-", repr(text))
        Console().print(table)
        return

    try:
        style = build_style(settings)
    except ConfigurationError as exc:
        _exit_with_error(exc)
    print_formatted_text(fragments, style=style)


@app.command()
def mode(buffer: str = typer.Argument(..., help="Input line to classify")) -> None:
    """Print which highlighter BUFFER is routed to."""

    settings, highlighter = _load()
    typer.echo(highlighter.dispatch_mode(buffer, build_snapshot(settings)).value)


@app.command()
def repl() -> None:
    """Read lines interactively with live highlighting."""

    settings, highlighter = _load()
    configure_logging(settings.log_level, profile="repl")
    try:
        style = build_style(settings)
    except ConfigurationError as exc:
        _exit_with_error(exc)

    lexer = SystemLexer(highlighter, build_conventions(settings), use_forward_slash=settings.use_forward_slash)
    session: PromptSession[str] = PromptSession(lexer=lexer, style=style)
    snapshot = build_snapshot(settings)
    while True:
        try:
            with patch_stdout():
                line = session.prompt("> ")
        except (EOFError, KeyboardInterrupt):
            break
        if line.strip() in EXIT_COMMANDS:
            break
        if not line.strip():
            continue
        logger.info("repl.accept mode={} line={!r}", highlighter.dispatch_mode(line, snapshot).value, line)
