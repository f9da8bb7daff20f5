from __future__ import annotations

from .entities import (
    Address,
    ChangeDate,
    EventDetail,
    Family,
    GedcomVersion,
    Header,
    HeaderSource,
    Individual,
    MediaObject,
    NameParts,
    Note,
    NoteRef,
    Submitter,
)
from .graph import (
    CalendarRange,
    GenealogyGraph,
    LineageEntry,
    Relative,
    Spouse,
    TreeStats,
)

__all__ = [
    "Address",
    "CalendarRange",
    "ChangeDate",
    "EventDetail",
    "Family",
    "GedcomVersion",
    "GenealogyGraph",
    "Header",
    "HeaderSource",
    "Individual",
    "LineageEntry",
    "MediaObject",
    "NameParts",
    "Note",
    "NoteRef",
    "Relative",
    "Spouse",
    "Submitter",
    "TreeStats",
]
