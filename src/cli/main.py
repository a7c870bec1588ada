"""`wiki` command: print the Wikipedia summary that best matches the input."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from typing import List, Optional

import typer
from rich.console import Console
from rich.text import Text

from adapters.http_client import build_client
from adapters.wikipedia import WikipediaClient
from cli.ui_components import ProgressReporter, render_result, searching_message
from core.config import AppSettings
from core.domain.errors import WikiLookupError
from core.logger import setup_logging
from core.services.lookup_pipeline import PipelineHooks, build_query, run_lookup

USAGE = "Usage: wiki <args>"

app = typer.Typer(
    add_completion=False,
    help="Look up WORDS on Wikipedia and print the article summary.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _package_version() -> str:
    try:
        return version("wiki-cli")
    except PackageNotFoundError:
        return "0.0.0+local"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"wiki {_package_version()}")
        raise typer.Exit()


@app.command(context_settings={"ignore_unknown_options": True})
def lookup(
    words: Optional[List[str]] = typer.Argument(
        None,
        help="Search phrase; all words are joined with single spaces.",
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP activity to stderr."),
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Resolve WORDS to the best-matching article and print its extract."""

    if not words:
        typer.echo(USAGE)
        return

    settings = AppSettings()
    setup_logging("DEBUG" if verbose else settings.log_level)
    query = build_query(words)

    try:
        with build_client(settings) as http, ProgressReporter(
            _console, interval_ms=settings.spinner_interval_ms
        ) as progress:
            hooks = PipelineHooks(
                title_resolved=lambda title: progress.set_message(searching_message(title)),
            )
            result = run_lookup(query, WikipediaClient(http, settings), hooks)
            progress.finish(render_result(result, settings.highlight_color))
    except WikiLookupError as exc:
        logger.debug("lookup for %r failed", query, exc_info=True)
        _err_console.print(Text(str(exc), style="bold red"), soft_wrap=True)
        raise typer.Exit(code=1) from exc


def run() -> None:
    app()


if __name__ == "__main__":
    run()
