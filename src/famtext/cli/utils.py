from __future__ import annotations

import time
from pathlib import Path
from typing import List

from rich.console import Console

from famtext.core.exceptions import TreeImportError
from famtext.exporter import OutputPerson, load_document
from famtext.import_core import ImportResult, TreeImporter

console = Console()
err_console = Console(stderr=True)


def import_file(path: Path, *, indent: int | None = None, verbose: bool = False) -> ImportResult:
    """
    Read a text file and run the importer on it.
    """
    t0 = time.perf_counter()

    text = path.read_text(encoding="utf-8-sig")
    result = TreeImporter(indent=indent).run(text)

    if verbose:
        console.log(f"Imported {path.name} in {time.perf_counter() - t0:.3f}s")

    return result


def load_people(path: Path, *, verbose: bool = False) -> List[OutputPerson]:
    """
    People from either an existing tree JSON file or a text file to import.
    Raises TreeImportError when the text cannot be imported.
    """
    if path.suffix.lower() == ".json":
        return load_document(path.read_text(encoding="utf-8"))

    result = import_file(path, verbose=verbose)
    if result.error is not None:
        raise result.error
    return result.people


def fail(error: TreeImportError) -> None:
    err_console.print(f"[bold red]Import failed:[/] {error.message}")
