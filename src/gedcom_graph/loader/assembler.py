# src/gedcom_graph/loader/assembler.py

"""
Record assembly: flat token stream -> individuals, families, notes,
submitters and the header.

GEDCOM nests by level number rather than brackets. The assembler keeps a
level-indexed context stack where ``stack[level]`` is the attach target for
tags at ``level + 1``. Entries are overwritten as tags open and the whole
stack is reset at every level-0 line; nothing is popped.

Events follow a two-state machine: Idle, or one event open. Opening any
event while another is open commits the earlier one into its record. A
record boundary (next level-0 line, ``TRLR`` or end of input) commits the
open event as well, so a dateless event is still recorded as present.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from gedcom_graph.loader.names import parse_name
from gedcom_graph.loader.tokenizer import Token, is_pointer
from gedcom_graph.logging import get_logger
from gedcom_graph.models.entities import (
    Address,
    ChangeDate,
    EventDetail,
    Family,
    GedcomVersion,
    Header,
    HeaderSource,
    Individual,
    MediaObject,
    Note,
    NoteRef,
    Submitter,
)
from gedcom_graph.models.graph import GenealogyGraph

log = get_logger(__name__)

Record = Union[Individual, Family, Note, Submitter, Header]

# Event tag -> record field. Single-valued fields hold the last occurrence.
INDIVIDUAL_EVENT_FIELDS: Dict[str, str] = {
    "BIRT": "birth",
    "DEAT": "death",
    "BAPM": "baptism",
    "FCOM": "first_communion",
}
INDIVIDUAL_EVENT_LISTS: Dict[str, str] = {
    "GRAD": "graduations",
    "RESI": "residences",
    "OBJE": "objects",
}
FAMILY_EVENT_FIELDS: Dict[str, str] = {
    "MARR": "marriage",
    "DIV": "divorce",
}


# ---------------------------------------------------------------------------
# Attach targets held on the context stack
# ---------------------------------------------------------------------------

@dataclass
class EventFrame:
    """An event opened on a record but not yet committed."""
    tag: str
    detail: Union[EventDetail, MediaObject]


@dataclass
class EventNote:
    """Continuation target for the inline note of an event."""
    frame: EventFrame


class RecordAssembler:
    """
    Stateful line-by-line record builder.

    Usage:
        assembler = RecordAssembler()
        for token in tokens:
            assembler.feed(token)
        graph = assembler.finish()
    """

    def __init__(self) -> None:
        self.header = Header()
        self.individuals: Dict[str, Individual] = {}
        self.families: Dict[str, Family] = {}
        self.notes: Dict[str, Note] = {}
        self.submitters: Dict[str, Submitter] = {}

        self._record: Optional[Record] = None
        self._event: Optional[EventFrame] = None
        self._stack: List[object] = []
        self._finished = False

    # ------------------------------------------------------------------ #
    # Driving
    # ------------------------------------------------------------------ #

    def feed(self, token: Token) -> None:
        if self._finished:
            return

        if token.level == 0:
            self._open_record(token)
            return

        if self._record is None:
            return

        parent = self._parent(token.level)
        target = self._dispatch(token.tag, token.value, parent)
        self._register(token.level, target)

    def feed_all(self, tokens: Iterable[Token]) -> "RecordAssembler":
        for token in tokens:
            self.feed(token)
        return self

    def finish(self) -> GenealogyGraph:
        """Commit the last open record and build the graph."""
        self._finalize_record()
        self._finished = True

        log.info(
            "Assembled %d individuals, %d families, %d notes, %d submitters",
            len(self.individuals),
            len(self.families),
            len(self.notes),
            len(self.submitters),
        )
        return GenealogyGraph(
            header=self.header,
            individuals=self.individuals,
            families=self.families,
            notes=self.notes,
            submitters=self.submitters,
        )

    # ------------------------------------------------------------------ #
    # Stack helpers
    # ------------------------------------------------------------------ #

    def _parent(self, level: int) -> Optional[object]:
        if level - 1 < len(self._stack):
            return self._stack[level - 1]
        return None

    def _register(self, level: int, target: Optional[object]) -> None:
        if level < len(self._stack):
            self._stack[level] = target
        else:
            self._stack.extend([None] * (level - len(self._stack)))
            self._stack.append(target)

    # ------------------------------------------------------------------ #
    # Level 0
    # ------------------------------------------------------------------ #

    def _open_record(self, token: Token) -> None:
        self._finalize_record()

        tag, pointer, value = token.tag, token.pointer, token.value
        record: Optional[Record] = None

        if tag == "HEAD":
            record = self.header
        elif tag == "TRLR":
            self._finished = True
            return
        elif pointer:
            if tag == "INDI":
                record = Individual(id=pointer)
            elif tag == "FAM":
                record = Family(id=pointer)
            elif tag == "NOTE":
                record = Note(id=pointer, text=value)
            elif tag == "SUBM":
                record = Submitter(id=pointer)
            else:
                log.debug("Ignoring unsupported %s record %s", tag, pointer)
        elif tag == "SUBM" and value:
            record = Submitter(id=value)
        else:
            log.debug("Ignoring level-0 %s line %d without pointer", tag, token.lineno)

        self._record = record
        self._stack = [record]

    def _finalize_record(self) -> None:
        record = self._record
        if record is None:
            return

        self._commit_event()

        if isinstance(record, Individual):
            self._store(self.individuals, record)
        elif isinstance(record, Family):
            self._store(self.families, record)
        elif isinstance(record, Note):
            self._store(self.notes, record)
        elif isinstance(record, Submitter):
            self._store(self.submitters, record)

        self._record = None
        self._event = None
        self._stack = []

    @staticmethod
    def _store(table: Dict[str, object], record) -> None:
        if record.id in table:
            log.warning("Duplicate record id %s; keeping the first occurrence", record.id)
            return
        table[record.id] = record

    # ------------------------------------------------------------------ #
    # Events
    # ------------------------------------------------------------------ #

    def _open_event(self, tag: str, detail: Union[EventDetail, MediaObject]) -> EventFrame:
        self._commit_event()
        self._event = EventFrame(tag=tag, detail=detail)
        return self._event

    def _commit_event(self) -> None:
        frame, record = self._event, self._record
        if frame is None:
            return
        self._event = None

        if isinstance(record, Individual):
            if frame.tag in INDIVIDUAL_EVENT_FIELDS:
                setattr(record, INDIVIDUAL_EVENT_FIELDS[frame.tag], frame.detail)
            elif frame.tag in INDIVIDUAL_EVENT_LISTS:
                getattr(record, INDIVIDUAL_EVENT_LISTS[frame.tag]).append(frame.detail)
        elif isinstance(record, Family) and frame.tag in FAMILY_EVENT_FIELDS:
            setattr(record, FAMILY_EVENT_FIELDS[frame.tag], frame.detail)

    # ------------------------------------------------------------------ #
    # Level > 0
    # ------------------------------------------------------------------ #

    def _dispatch(self, tag: str, value: str, parent: Optional[object]) -> Optional[object]:
        record = self._record
        if isinstance(record, Individual):
            return self._individual_tag(record, tag, value, parent)
        if isinstance(record, Family):
            return self._family_tag(record, tag, value, parent)
        if isinstance(record, Note):
            return self._note_tag(record, tag, value, parent)
        if isinstance(record, Header):
            return self._header_tag(record, tag, value, parent)
        if isinstance(record, Submitter):
            return self._submitter_tag(record, tag, value, parent)
        return None

    def _individual_tag(self, indi: Individual, tag: str, value: str, parent) -> Optional[object]:
        if parent is indi:
            if tag == "NAME":
                if not indi.name.full:
                    indi.name = parse_name(value)
                return None
            if tag == "SEX":
                indi.sex = value
                return None
            if tag in INDIVIDUAL_EVENT_FIELDS or tag in ("GRAD", "RESI"):
                return self._open_event(tag, EventDetail())
            if tag == "OBJE":
                return self._open_event(tag, MediaObject())
            if tag == "FAMC":
                self._commit_event()
                indi.families_as_child.append(value)
                return None
            if tag == "FAMS":
                self._commit_event()
                indi.families_as_spouse.append(value)
                return None

        if isinstance(parent, EventFrame) and isinstance(parent.detail, MediaObject):
            media = parent.detail
            if tag == "TITL":
                media.title = value
                return None
            if tag == "FILE":
                media.file = value
                return parent
            if tag == "FORM":
                media.form = value
                return None
            if tag == "NOTE" and not is_pointer(value):
                media.note = value
                return EventNote(parent)

        return self._common_tag(indi, tag, value, parent)

    def _family_tag(self, fam: Family, tag: str, value: str, parent) -> Optional[object]:
        if parent is fam:
            if tag == "HUSB":
                fam.husband = value
                return None
            if tag == "WIFE":
                fam.wife = value
                return None
            if tag == "CHIL":
                fam.children.append(value)
                return None
            if tag in FAMILY_EVENT_FIELDS:
                return self._open_event(tag, EventDetail())
            if tag == "NCHI":
                fam.number_of_children = int(value) if value.strip().isdecimal() else None
                return None

        return self._common_tag(fam, tag, value, parent)

    def _common_tag(self, record: Union[Individual, Family], tag: str, value: str, parent) -> Optional[object]:
        """Event sub-tags, notes, continuations and change dates."""
        if isinstance(parent, EventFrame) and isinstance(parent.detail, EventDetail):
            detail = parent.detail
            if tag == "DATE":
                detail.date = value
                return parent
            if tag == "PLAC":
                detail.place = value
                return None
            if tag == "TYPE":
                detail.type = value
                return None
            if tag == "TIME":
                detail.time = value
                return None
            if tag == "ADDR":
                detail.address = Address(line=value)
                return detail.address
            if tag == "NOTE" and not is_pointer(value):
                detail.note = value
                return EventNote(parent)

        if isinstance(parent, Address):
            if tag == "CITY":
                parent.city = value
            elif tag == "CTRY":
                parent.country = value
            elif tag in ("CONT", "CONC"):
                parent.line = _continue(parent.line, tag, value)
            return None

        if tag == "NOTE":
            if is_pointer(value):
                record.notes.append(NoteRef(ref=value))
                return None
            note = NoteRef(text=value)
            record.notes.append(note)
            return note

        if tag in ("CONT", "CONC"):
            if isinstance(parent, EventNote):
                parent.frame.detail.note = _continue(parent.frame.detail.note, tag, value)
            elif isinstance(parent, NoteRef) and parent.text is not None:
                parent.text = _continue(parent.text, tag, value)
            return None

        if tag == "CHAN" and parent is record:
            self._commit_event()
            record.change_date = ChangeDate()
            return record.change_date

        return _change_date_tag(tag, value, parent)

    def _note_tag(self, note: Note, tag: str, value: str, parent) -> Optional[object]:
        if parent is note:
            if tag in ("CONT", "CONC"):
                note.text = _continue(note.text, tag, value)
                return None
            if tag == "CHAN":
                note.change_date = ChangeDate()
                return note.change_date
            return None

        return _change_date_tag(tag, value, parent)

    def _submitter_tag(self, subm: Submitter, tag: str, value: str, parent) -> Optional[object]:
        if parent is subm:
            if tag == "NAME":
                subm.name = value
                return None
            if tag == "CHAN":
                subm.change_date = ChangeDate()
                return subm.change_date
            return None

        return _change_date_tag(tag, value, parent)

    def _header_tag(self, header: Header, tag: str, value: str, parent) -> Optional[object]:
        if parent is header:
            if tag == "SOUR":
                header.source = HeaderSource(name=value)
                return header.source
            if tag == "GEDC":
                header.gedcom = GedcomVersion()
                return header.gedcom
            if tag == "DATE":
                header.date = value
                return header
            if tag == "TIME":
                header.time = value
            elif tag == "DEST":
                header.destination = value
            elif tag == "SUBM":
                header.submitter = value
            elif tag == "FILE":
                header.file = value
            elif tag == "CHAR":
                header.encoding = value
            elif tag == "LANG":
                header.language = value
            elif tag == "COPR":
                header.copyright = value
            return None

        if isinstance(parent, HeaderSource):
            if tag == "VERS":
                parent.version = value
            elif tag == "NAME":
                parent.name = value
            elif tag == "CORP":
                parent.corporation = value
            elif tag == "ADDR":
                parent.address = value
            return None

        if isinstance(parent, GedcomVersion):
            if tag == "VERS":
                parent.version = value
            elif tag == "FORM":
                parent.form = value
            return None

        return None


def _continue(text: str, tag: str, value: str) -> str:
    """Apply a CONT (new line) or CONC (same line) continuation."""
    if tag == "CONT":
        return f"{text}\n{value}"
    return text + value


def _change_date_tag(tag: str, value: str, parent) -> Optional[object]:
    if isinstance(parent, ChangeDate):
        if tag == "DATE":
            parent.date = value
            return parent
        if tag == "TIME":
            parent.time = value
    return None


def assemble(tokens: Iterable[Token]) -> GenealogyGraph:
    """Assemble a token stream into a GenealogyGraph."""
    return RecordAssembler().feed_all(tokens).finish()
