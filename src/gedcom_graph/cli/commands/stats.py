from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_graph.cli.utils import load_gedcom

console = Console()


def _year(value) -> str:
    return "" if value is None else str(value)


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    stats = load_gedcom(gedcom, verbose=verbose).stats()

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Individuals", str(stats.total_individuals))
    table.add_row("Families", str(stats.total_families))
    table.add_row("Notes", str(stats.total_notes))
    table.add_row("Submitters", str(stats.total_submitters))
    table.add_row("Male", str(stats.male_count))
    table.add_row("Female", str(stats.female_count))
    table.add_row("Unknown sex", str(stats.unknown_sex_count))

    console.print(table)

    if not stats.calendars:
        return

    ranges = Table(title="Birth and Death Years")
    ranges.add_column("Calendar", style="bold")
    ranges.add_column("Earliest birth", justify="right")
    ranges.add_column("Latest birth", justify="right")
    ranges.add_column("Earliest death", justify="right")
    ranges.add_column("Latest death", justify="right")

    for calendar, span in sorted(stats.calendars.items()):
        ranges.add_row(
            calendar,
            _year(span.earliest_birth),
            _year(span.latest_birth),
            _year(span.earliest_death),
            _year(span.latest_death),
        )

    console.print(ranges)
