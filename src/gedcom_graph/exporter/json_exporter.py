"""
json_exporter.py
Structured JSON exporter for GenealogyGraph objects.

This exporter:
- Converts dataclasses and objects to dictionaries (NOT strings)
- Keeps record ids as the dictionary keys
- Is deterministic: records keep their file order
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

from gedcom_graph.logging import get_logger
from gedcom_graph.models.graph import GenealogyGraph

log = get_logger("json_exporter")


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - dataclasses -> dict (recursively)
    - mappings -> dict (recursively)
    - list / tuple / set -> list (recursively)
    - Anything else -> str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj):
        return {k: _to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, Mapping):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def graph_to_dict(graph: GenealogyGraph) -> Dict[str, Any]:
    """
    Convert the graph into a JSON-safe dict.
    """
    return {
        "counts": {
            "individuals": len(graph.individuals),
            "families": len(graph.families),
            "notes": len(graph.notes),
            "submitters": len(graph.submitters),
        },
        "header": _to_json_compatible(graph.header),
        "individuals": _to_json_compatible(graph.individuals),
        "families": _to_json_compatible(graph.families),
        "notes": _to_json_compatible(graph.notes),
        "submitters": _to_json_compatible(graph.submitters),
    }


def serialize_graph_to_json_string(graph: GenealogyGraph, indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(graph_to_dict(graph), separators=(",", ":"), ensure_ascii=False)
    return json.dumps(graph_to_dict(graph), indent=indent, ensure_ascii=False)


def export_graph_to_json(graph: GenealogyGraph, output_path: str | Path, indent: int | None = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting graph JSON to: %s (INDI=%d, FAM=%d, NOTE=%d, SUBM=%d)",
        output_path,
        len(graph.individuals),
        len(graph.families),
        len(graph.notes),
        len(graph.submitters),
    )

    json_str = serialize_graph_to_json_string(graph, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
