from __future__ import annotations

from pathlib import Path
from typing import Iterable

import typer
from rich.console import Console
from rich.table import Table

from gedcom_graph.cli.utils import display_name, load_gedcom
from gedcom_graph.models.entities import Individual

console = Console()


def _individual_table(title: str, individuals: Iterable[Individual]) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Sex")
    table.add_column("Born")
    table.add_column("Died")

    for indi in individuals:
        table.add_row(
            indi.id,
            display_name(indi),
            indi.sex,
            indi.birth.date if indi.birth else "",
            indi.death.date if indi.death else "",
        )
    return table


def find_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    query: str = typer.Argument(..., help="Case-insensitive name fragment"),
):
    """
    Find individuals whose name contains QUERY.
    """
    matches = load_gedcom(gedcom).find_individuals_by_name(query)
    if not matches:
        console.print(f"[yellow]No individuals match[/yellow] {query!r}")
        return
    console.print(_individual_table(f"Matches for {query!r}", matches))


def roots_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
):
    """
    List individuals without parent information.
    """
    roots = load_gedcom(gedcom).root_individuals()
    if not roots:
        console.print("[yellow]No root individuals found.[/yellow]")
        return
    console.print(_individual_table(f"{len(roots)} root individual(s)", roots))
