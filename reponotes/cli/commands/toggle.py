"""Toggle command for the reponotes CLI."""

from typing import Optional

import typer
from rich.console import Console

from reponotes.cli.utils import session
from reponotes.exceptions import InvalidIndex, LocalStoreError
from reponotes.markup import is_checked

console = Console()


def main(
    repo: str = typer.Argument(..., help="Repository as owner/name"),
    line: int = typer.Argument(..., help="Zero-based line number of the checkbox"),
    checked: Optional[bool] = typer.Option(
        None, "--checked/--unchecked", help="Target state (flips when omitted)"
    ),
):
    """Set the state of a checkbox item in a repository note."""
    try:
        with session.get_store() as store:
            if checked is None:
                checked = not is_checked(store.get(repo), line)
            store.toggle_checkbox(repo, line, checked)
    except (InvalidIndex, LocalStoreError) as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    state = "checked" if checked else "unchecked"
    console.print(f"Line {line} of [bold]{repo}[/bold] is now {state}")
