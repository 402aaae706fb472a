from __future__ import annotations

import typer

from famtext.cli.commands.import_text import import_command
from famtext.cli.commands.stats import stats_command

app = typer.Typer(
    name="famtext",
    help="Free-text family tree importer",
    add_completion=False,
)

app.command("import")(import_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
