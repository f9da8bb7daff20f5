from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_graph.cli.utils import load_gedcom, write_json
from gedcom_graph.exporter import graph_to_dict

console = Console()


def export_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
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
    Export GEDCOM data to JSON (stdout by default).
    """
    graph = load_gedcom(gedcom, verbose=verbose)

    if verbose:
        console.log("Exporting JSON")

    write_json(graph_to_dict(graph), out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")
