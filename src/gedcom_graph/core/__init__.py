"""
Error types, plus the session (core.session) that owns the current graph
and date context.
"""

from gedcom_graph.core.exceptions import DateContextError, GedcomGraphError, GedcomReadError

__all__ = [
    "DateContextError",
    "GedcomGraphError",
    "GedcomReadError",
]
