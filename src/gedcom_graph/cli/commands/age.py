from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_graph.cli.utils import display_name, load_session, require_individual
from gedcom_graph.core.exceptions import DateContextError

console = Console()


def age_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    individual_id: str = typer.Argument(..., help="Individual pointer, e.g. @I1@"),
    calendar: Optional[str] = typer.Option(None, "--calendar", "-c", help="Calendar of the current date, e.g. AG"),
    year: Optional[int] = typer.Option(None, "--year", "-y", help="Current year in that calendar"),
    month: int = typer.Option(1, "--month", help="Current month (1-12)"),
    day: int = typer.Option(1, "--day", help="Current day (1-31)"),
):
    """
    Show an individual's age, optionally as of a fictional current date.
    """
    session = load_session(gedcom)
    individual = require_individual(session.graph, individual_id)

    if calendar is not None or year is not None:
        if calendar is None or year is None:
            console.print("[red]--calendar and --year must be given together[/red]")
            raise typer.Exit(code=2)
        try:
            session.date_context.set(calendar, year, month, day)
        except DateContextError as exc:
            console.print(f"[red]{exc}[/red]")
            raise typer.Exit(code=2)

    age = session.graph.age_of(individual.id, session.date_context)
    if age is None:
        console.print(f"[yellow]Age of {display_name(individual)} cannot be computed.[/yellow]")
        return

    console.print(f"{display_name(individual)}: {age}")
