"""Show command for the reponotes CLI."""

import typer
from rich.console import Console
from rich.rule import Rule

from reponotes.cli.utils import session
from reponotes.markup import NoteRenderer
from reponotes.markup.console import to_rich

console = Console()


def main(
    repo: str = typer.Argument(..., help="Repository as owner/name"),
):
    """Render the note attached to a repository."""
    with session.get_store() as store:
        text = store.get(repo)

    if not text:
        console.print(f"[yellow]No note for[/yellow] [bold]{repo}[/bold]")
        return

    console.print(Rule(repo, align="left"))
    console.print(to_rich(NoteRenderer().render(text)))
