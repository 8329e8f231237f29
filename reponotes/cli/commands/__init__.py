"""Command modules for the reponotes CLI."""

# Import all command modules here for easy access
from reponotes.cli.commands import export, list_notes, set_note, show, toggle

__all__ = ["export", "list_notes", "set_note", "show", "toggle"]
