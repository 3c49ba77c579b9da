"""LinuxBuddy CLI — Typer + Rich terminal interface.

Commands: bash, general, model.
Anything piped into stdin is sent to the model as context for the question.
"""

from __future__ import annotations

import asyncio
import logging
import sys

import typer
from rich.console import Console

from linuxbuddy import __version__
from linuxbuddy.chat import ChatService
from linuxbuddy.exceptions import LinuxBuddyError
from linuxbuddy.output.spinner import Spinner
from linuxbuddy.output.styled import StyledWriter
from linuxbuddy.providers.litellm_provider import LiteLLMProvider
from linuxbuddy.schemas.chat import ResponseType
from linuxbuddy.schemas.settings import Settings
from linuxbuddy.settings import load_settings, save_model

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="linuxbuddy",
    help="Ask a local model for bash commands or general answers.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

_VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v",
    help="Show the raw response (including reasoning) and echo the prompt.",
)


# ── Version callback ───────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"linuxbuddy {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """LinuxBuddy — ask a local model for bash commands or general answers."""


# ── Helpers ──────────────────────────────────────────────────────


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if verbose:
        logging.getLogger("linuxbuddy").setLevel(logging.DEBUG)


def _read_piped_input() -> str:
    """Return everything piped into stdin, or "" for an interactive terminal."""
    stdin = sys.stdin
    if stdin is None:
        return ""
    try:
        if stdin.isatty():
            return ""
    except (AttributeError, ValueError):
        return ""
    return stdin.read()


def _build_service(settings: Settings) -> ChatService:
    writer = StyledWriter(sys.stdout, settings.style)
    return ChatService(
        LiteLLMProvider(settings),
        writer,
        Spinner(writer),
        verbose=settings.verbose,
    )


def _report_error(error: Exception, verbose: bool) -> None:
    if verbose:
        err_console.print_exception()
    else:
        err_console.print(f"[red]An error occurred:[/red] {error}", highlight=False)


def _ask(prompt: str, verbose: bool, response_type: ResponseType) -> None:
    """Shared body of the bash and general commands."""
    _configure_logging(verbose)
    try:
        context = _read_piped_input()
        if not prompt:
            return
        settings = load_settings(verbose=verbose)
        service = _build_service(settings)
        if response_type == ResponseType.BASH:
            asyncio.run(service.ask_bash(prompt, context))
        else:
            asyncio.run(service.ask_general(prompt, context))
    except LinuxBuddyError as e:
        _report_error(e, verbose)
        raise typer.Exit(1) from None
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        _report_error(e, verbose)
        raise typer.Exit(1) from None


# ── Commands ─────────────────────────────────────────────────────


@app.command()
def bash(
    prompt: str = typer.Argument(..., help="Prompt for the AI."),
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Ask the AI for a bash command."""
    _ask(prompt, verbose, ResponseType.BASH)


@app.command()
def general(
    prompt: str = typer.Argument(..., help="Prompt for the AI."),
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Ask the AI a general question."""
    _ask(prompt, verbose, ResponseType.TEXT)


@app.command()
def model(
    name: str | None = typer.Argument(
        None, help="Model name to save. Omit to show the current model.",
    ),
) -> None:
    """Set the model to use for completion."""
    _configure_logging(False)
    try:
        if name is None:
            settings = load_settings()
            console.print(settings.model, highlight=False)
            return
        path = save_model(name)
    except Exception as e:
        _report_error(e, False)
        raise typer.Exit(1) from None
    console.print(f"[green]Model saved[/green] to {path}", highlight=False)
