from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from gedcom_graph.cli.utils import display_name, load_session, require_individual

console = Console()


def relatives_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    individual_id: str = typer.Argument(..., help="Individual pointer, e.g. @I1@"),
):
    """
    Show parents, spouses, children and siblings of one individual.
    """
    graph = load_session(gedcom).graph
    individual = require_individual(graph, individual_id)

    table = Table(title=f"Relatives of {display_name(individual)} {individual.id}")
    table.add_column("Relation", style="bold")
    table.add_column("ID")
    table.add_column("Name")

    for parent in graph.parents(individual.id):
        table.add_row(parent.relation, parent.individual.id, display_name(parent.individual))
    for spouse in graph.spouses(individual.id):
        table.add_row("spouse", spouse.individual.id, display_name(spouse.individual))
    for child in graph.children(individual.id):
        table.add_row("child", child.id, display_name(child))
    for sibling in graph.siblings(individual.id):
        table.add_row("sibling", sibling.id, display_name(sibling))

    console.print(table)


def _print_lineage(title: str, entries) -> None:
    console.print(f"[bold cyan]{title}[/bold cyan]")
    for entry in entries:
        indent = "  " * entry.depth
        console.print(f"{indent}{entry.relation}: {display_name(entry.individual)} {entry.individual.id}")


def _depth(value: Optional[int], session) -> int:
    limit = session.config.max_tree_depth
    if value is None:
        return limit
    if value > limit:
        console.print(f"[yellow]Depth limited to {limit} generations.[/yellow]")
        return limit
    return value


def ancestors_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    individual_id: str = typer.Argument(..., help="Individual pointer, e.g. @I1@"),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", min=1, help="Generations to walk"),
):
    """
    List ancestors, generation by generation.
    """
    session = load_session(gedcom)
    individual = require_individual(session.graph, individual_id)
    entries = session.graph.ancestors(individual.id, max_depth=_depth(depth, session))
    _print_lineage(f"Ancestors of {display_name(individual)}", entries)


def descendants_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    individual_id: str = typer.Argument(..., help="Individual pointer, e.g. @I1@"),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", min=1, help="Generations to walk"),
):
    """
    List descendants, generation by generation.
    """
    session = load_session(gedcom)
    individual = require_individual(session.graph, individual_id)
    entries = session.graph.descendants(individual.id, max_depth=_depth(depth, session))
    _print_lineage(f"Descendants of {display_name(individual)}", entries)
