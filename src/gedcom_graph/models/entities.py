from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


# -----------------------------
# Small atoms
# -----------------------------

@dataclass(slots=True)
class NameParts:
    """
    GEDCOM NAME value split into parts.

    ``full`` has the surname slashes removed: "John /Doe/" -> "John Doe".
    """
    full: str = ""
    given: str = ""
    surname: str = ""
    suffix: str = ""


@dataclass(slots=True)
class NoteRef:
    """
    A note attached to an individual or family.

    Exactly one of ``ref`` (an ``@N1@`` pointer to a Note record) or
    ``text`` (inline note text) is set.
    """
    ref: Optional[str] = None
    text: Optional[str] = None


@dataclass(slots=True)
class ChangeDate:
    """CHAN substructure: last-modified date and time."""
    date: Optional[str] = None
    time: Optional[str] = None


@dataclass(slots=True)
class Address:
    line: str = ""
    city: Optional[str] = None
    country: Optional[str] = None


@dataclass(slots=True)
class EventDetail:
    """
    A dated/placed event (birth, death, marriage, graduation, ...).

    Fields default to empty strings so a dateless event is still present.
    """
    date: str = ""
    place: str = ""
    time: str = ""
    type: str = ""
    note: str = ""
    address: Optional[Address] = None


@dataclass(slots=True)
class MediaObject:
    """Inline OBJE reference on an individual."""
    title: str = ""
    file: str = ""
    form: str = ""
    note: str = ""


# -----------------------------
# Records
# -----------------------------

@dataclass(slots=True)
class Individual:
    id: str
    name: NameParts = field(default_factory=NameParts)
    sex: str = ""

    birth: Optional[EventDetail] = None
    death: Optional[EventDetail] = None
    baptism: Optional[EventDetail] = None
    first_communion: Optional[EventDetail] = None
    graduations: List[EventDetail] = field(default_factory=list)
    residences: List[EventDetail] = field(default_factory=list)
    objects: List[MediaObject] = field(default_factory=list)

    notes: List[NoteRef] = field(default_factory=list)

    # Cross references, stored as raw pointers and resolved at query time
    families_as_child: List[str] = field(default_factory=list)   # FAMC
    families_as_spouse: List[str] = field(default_factory=list)  # FAMS

    change_date: Optional[ChangeDate] = None


@dataclass(slots=True)
class Family:
    id: str
    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)

    marriage: Optional[EventDetail] = None
    divorce: Optional[EventDetail] = None
    number_of_children: Optional[int] = None

    notes: List[NoteRef] = field(default_factory=list)
    change_date: Optional[ChangeDate] = None


@dataclass(slots=True)
class Note:
    id: str
    text: str = ""
    change_date: Optional[ChangeDate] = None


@dataclass(slots=True)
class Submitter:
    id: str
    name: str = ""
    change_date: Optional[ChangeDate] = None


# -----------------------------
# Header
# -----------------------------

@dataclass(slots=True)
class HeaderSource:
    name: str = ""
    version: Optional[str] = None
    corporation: Optional[str] = None
    address: Optional[str] = None


@dataclass(slots=True)
class GedcomVersion:
    version: Optional[str] = None
    form: Optional[str] = None


@dataclass(slots=True)
class Header:
    """Free-form file metadata; not linked to any other record."""
    source: Optional[HeaderSource] = None
    destination: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    submitter: Optional[str] = None
    file: Optional[str] = None
    gedcom: Optional[GedcomVersion] = None
    encoding: Optional[str] = None
    language: Optional[str] = None
    copyright: Optional[str] = None
