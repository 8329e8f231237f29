"""Export command for the reponotes CLI."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from reponotes.cli.utils import session
from reponotes.markup import NoteRenderer, RenderConfig

console = Console()


def main(
    repo: str = typer.Argument(..., help="Repository as owner/name"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="File to write (stdout when omitted)"
    ),
    full_page: bool = typer.Option(
        False, "--full-page", help="Wrap output in a full HTML page"
    ),
    read_only: bool = typer.Option(
        False, "--read-only", help="Emit disabled checkboxes"
    ),
):
    """Render a repository note to HTML."""
    with session.get_store() as store:
        text = store.get(repo)

    renderer = NoteRenderer(RenderConfig(interactive_checkboxes=not read_only))
    html = renderer.render_html(text)
    if full_page:
        html = renderer.render_full_page(repo, html)

    if output is None:
        typer.echo(html)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding="utf-8")
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)
    console.print(f"Exported [bold]{repo}[/bold] to {output}")
