#!/usr/bin/env python
"""Command Line Interface for reponotes."""

import typer

from reponotes.cli.commands import export, list_notes, set_note, show, toggle
from reponotes.cli.utils import session

app = typer.Typer(help="Formatted notes for your repositories")

# Add commands
app.command("show")(show.main)
app.command("set")(set_note.main)
app.command("toggle")(toggle.main)
app.command("list")(list_notes.main)
app.command("export")(export.main)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
):
    """Keep formatted notes per repository, mirrored to a remote endpoint."""
    session.setup_logging(verbose)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
