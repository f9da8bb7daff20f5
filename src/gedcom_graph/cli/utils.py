from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict

import typer
from rich.console import Console

from gedcom_graph.core.session import GedcomSession
from gedcom_graph.models.entities import Individual
from gedcom_graph.models.graph import GenealogyGraph

console = Console()


def load_session(path: Path, *, verbose: bool = False) -> GedcomSession:
    """
    Parse ``path`` into a fresh session.
    """
    t0 = time.perf_counter()

    session = GedcomSession()
    session.load(path)

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded GEDCOM in {elapsed:.2f}s")

    return session


def load_gedcom(path: Path, *, verbose: bool = False) -> GenealogyGraph:
    return load_session(path, verbose=verbose).graph


def require_individual(graph: GenealogyGraph, individual_id: str) -> Individual:
    """Look up an individual or exit with an error message."""
    individual = graph.get_individual(individual_id)
    if individual is None:
        console.print(f"[red]Individual not found:[/red] {individual_id}")
        raise typer.Exit(code=1)
    return individual


def display_name(individual: Individual) -> str:
    return individual.name.full or "(no name)"


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
