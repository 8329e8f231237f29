"""List command for the reponotes CLI."""

from rich.console import Console
from rich.table import Table

from reponotes.cli.utils import session
from reponotes.markup import Checkbox, classify, split_lines

console = Console()


def main():
    """List every repository that has a note."""
    with session.get_store() as store:
        notes = {repo: text for repo, text in store.notes().items() if text}

    if not notes:
        console.print("No notes found")
        return

    table = Table("Repository", "Lines", "Open tasks")
    for repo in sorted(notes):
        blocks = classify(notes[repo])
        open_tasks = sum(
            1 for b in blocks if isinstance(b, Checkbox) and not b.checked
        )
        table.add_row(repo, str(len(split_lines(notes[repo])[0])), str(open_tasks))

    console.print(table)
