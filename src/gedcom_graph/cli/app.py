from __future__ import annotations

import typer

from gedcom_graph.cli.commands import (
    age_command,
    ancestors_command,
    descendants_command,
    export_command,
    find_command,
    relatives_command,
    roots_command,
    stats_command,
)

app = typer.Typer(
    name="gedcom-graph",
    help="GEDCOM parser and genealogy graph inspector",
    add_completion=False,
)

app.command("stats")(stats_command)
app.command("find")(find_command)
app.command("roots")(roots_command)
app.command("relatives")(relatives_command)
app.command("ancestors")(ancestors_command)
app.command("descendants")(descendants_command)
app.command("age")(age_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
