"""Set command for the reponotes CLI."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from reponotes.cli.utils import session
from reponotes.exceptions import LocalStoreError

console = Console()


def main(
    repo: str = typer.Argument(..., help="Repository as owner/name"),
    text: Optional[str] = typer.Argument(
        None, help="New note text (read from stdin when omitted)"
    ),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Read the note text from a file"
    ),
):
    """Replace the note attached to a repository. An empty note clears it."""
    if text is not None and file is not None:
        console.print("[bold red]Error:[/bold red] Pass either TEXT or --file, not both")
        raise typer.Exit(1)

    try:
        if file is not None:
            text = file.read_text(encoding="utf-8")
        elif text is None:
            text = typer.get_text_stream("stdin").read()
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    try:
        with session.get_store() as store:
            store.set(repo, text)
    except LocalStoreError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    if text:
        console.print(f"Saved note for [bold]{repo}[/bold]")
    else:
        console.print(f"Cleared note for [bold]{repo}[/bold]")
