from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from famtext.cli.utils import fail, import_file
from famtext.core.pipeline import tree_file_path

console = Console()


def import_command(
    text_file: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write the tree JSON to this file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Import a free-text family description and emit tree JSON.
    """
    result = import_file(text_file, indent=2 if pretty else None, verbose=verbose)

    if result.error is not None:
        fail(result.error)
        raise typer.Exit(code=1)

    if out is None:
        typer.echo(result.document)
        return

    target = tree_file_path(out)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(result.document, encoding="utf-8")

    if verbose:
        console.log(f"Wrote {len(result.people)} person(s) to {target}")
