"""Store construction and logging setup for CLI commands."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from reponotes.config import load_config
from reponotes.exceptions import LocalStoreError
from reponotes.store import NoteStore

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                rich_tracebacks=True,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
        force=True,
    )


def get_store() -> NoteStore:
    """Open the session's note store from configuration."""
    config = load_config()
    try:
        return NoteStore.from_config(config)
    except LocalStoreError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(1) from exc
