from __future__ import annotations

from collections import defaultdict
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from famtext.cli.utils import fail, load_people
from famtext.core.exceptions import TreeImportError

console = Console()


def stats_command(
    source: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show people per generation for a text file or a tree JSON file.
    """
    try:
        people = load_people(source, verbose=verbose)
    except TreeImportError as exc:
        fail(exc)
        raise typer.Exit(code=1)
    except ValueError as exc:
        console.print(f"[bold red]Invalid tree document:[/] {exc}")
        raise typer.Exit(code=1)

    by_level = defaultdict(list)
    for person in people:
        by_level[person.level].append(person.name)

    table = Table(title="Family Tree Statistics")
    table.add_column("Level", justify="right", style="bold")
    table.add_column("People", justify="right")
    table.add_column("Names")

    for level in sorted(by_level):
        names = by_level[level]
        table.add_row(str(level), str(len(names)), ", ".join(names))

    table.add_section()
    table.add_row("Total", str(len(people)), f"{len(by_level)} generation(s)")

    console.print(table)
