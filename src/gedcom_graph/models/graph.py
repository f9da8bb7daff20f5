from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Set

from gedcom_graph.config import DEFAULT_MAX_TREE_DEPTH
from gedcom_graph.dates import (
    DateContext,
    calculate_year_difference,
    get_current_date,
    parse_gedcom_date,
)
from gedcom_graph.models.entities import (
    Family,
    Header,
    Individual,
    Note,
    NoteRef,
    Submitter,
)


# -----------------------------
# Query results
# -----------------------------

@dataclass(frozen=True)
class Relative:
    """A related individual plus how they relate ("father", "mother", ...)."""
    relation: str
    individual: Individual


@dataclass(frozen=True)
class Spouse:
    family_id: str
    individual: Individual


@dataclass(frozen=True)
class LineageEntry:
    """One step of an ancestor/descendant walk; depth 1 = parents or children."""
    depth: int
    relation: str
    individual: Individual


@dataclass
class CalendarRange:
    earliest_birth: Optional[int] = None
    latest_birth: Optional[int] = None
    earliest_death: Optional[int] = None
    latest_death: Optional[int] = None


@dataclass
class TreeStats:
    total_individuals: int = 0
    total_families: int = 0
    total_notes: int = 0
    total_submitters: int = 0
    male_count: int = 0
    female_count: int = 0
    unknown_sex_count: int = 0
    calendars: Dict[str, CalendarRange] = field(default_factory=dict)


def _widen(current_min: Optional[int], current_max: Optional[int], year: int):
    low = year if current_min is None else min(current_min, year)
    high = year if current_max is None else max(current_max, year)
    return low, high


class GenealogyGraph:
    """
    Read-only view over the parsed records.

    Links between records are plain pointer strings. Every lookup tolerates
    pointers to records that do not exist: they resolve to None or are
    skipped, never raise. Walks that can revisit people (bad data can make
    someone their own ancestor) carry a ``visited`` set.

    The maps are read-only views. The records inside them are shared with
    every caller and are read-only by contract once assembly finishes: no
    query mutates them, and callers must not either.
    """

    def __init__(
        self,
        header: Optional[Header] = None,
        individuals: Optional[Dict[str, Individual]] = None,
        families: Optional[Dict[str, Family]] = None,
        notes: Optional[Dict[str, Note]] = None,
        submitters: Optional[Dict[str, Submitter]] = None,
    ) -> None:
        self.header = header or Header()
        self.individuals: Mapping[str, Individual] = MappingProxyType(dict(individuals or {}))
        self.families: Mapping[str, Family] = MappingProxyType(dict(families or {}))
        self.notes: Mapping[str, Note] = MappingProxyType(dict(notes or {}))
        self.submitters: Mapping[str, Submitter] = MappingProxyType(dict(submitters or {}))

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return (
            f"<GenealogyGraph individuals={len(self.individuals)} "
            f"families={len(self.families)}>"
        )

    # ------------------------------------------------------------------ #
    # Lookup
    # ------------------------------------------------------------------ #

    def get_individual(self, individual_id: Optional[str]) -> Optional[Individual]:
        if not individual_id:
            return None
        return self.individuals.get(individual_id)

    def get_family(self, family_id: Optional[str]) -> Optional[Family]:
        if not family_id:
            return None
        return self.families.get(family_id)

    def get_note(self, note_id: Optional[str]) -> Optional[Note]:
        if not note_id:
            return None
        return self.notes.get(note_id)

    def get_submitter(self, submitter_id: Optional[str]) -> Optional[Submitter]:
        if not submitter_id:
            return None
        return self.submitters.get(submitter_id)

    def all_individuals(self) -> List[Individual]:
        return list(self.individuals.values())

    def all_families(self) -> List[Family]:
        return list(self.families.values())

    def find_individuals_by_name(self, query: str) -> List[Individual]:
        """Case-insensitive substring match on full, given or surname."""
        needle = (query or "").lower()
        return [
            indi
            for indi in self.individuals.values()
            if needle in indi.name.full.lower()
            or needle in indi.name.given.lower()
            or needle in indi.name.surname.lower()
        ]

    def resolve_note(self, note: NoteRef) -> str:
        """Text of an inline note, or of the Note record it points to."""
        if note.ref:
            record = self.get_note(note.ref)
            return record.text if record is not None else note.ref
        return note.text or ""

    # ------------------------------------------------------------------ #
    # Relationships
    # ------------------------------------------------------------------ #

    def _families(self, family_ids: Iterable[str]) -> Iterable[Family]:
        for family_id in family_ids:
            family = self.get_family(family_id)
            if family is not None:
                yield family

    def parents(self, individual_id: str, visited: Optional[Set[str]] = None) -> List[Relative]:
        """Fathers and mothers across every FAMC family, minus ``visited`` ids."""
        individual = self.get_individual(individual_id)
        if individual is None:
            return []

        result: List[Relative] = []
        for family in self._families(individual.families_as_child):
            for relation, parent_id in (("father", family.husband), ("mother", family.wife)):
                parent = self.get_individual(parent_id)
                if parent is not None and (visited is None or parent.id not in visited):
                    result.append(Relative(relation, parent))
        return result

    def children(self, individual_id: str, visited: Optional[Set[str]] = None) -> List[Individual]:
        """Children across every FAMS family, minus ``visited`` ids."""
        individual = self.get_individual(individual_id)
        if individual is None:
            return []

        result: List[Individual] = []
        for family in self._families(individual.families_as_spouse):
            for child_id in family.children:
                child = self.get_individual(child_id)
                if child is not None and (visited is None or child.id not in visited):
                    result.append(child)
        return result

    def spouses(self, individual_id: str) -> List[Spouse]:
        individual = self.get_individual(individual_id)
        if individual is None:
            return []

        result: List[Spouse] = []
        for family in self._families(individual.families_as_spouse):
            if family.husband == individual_id:
                partner_id = family.wife
            elif family.wife == individual_id:
                partner_id = family.husband
            else:
                continue
            partner = self.get_individual(partner_id)
            if partner is not None:
                result.append(Spouse(family.id, partner))
        return result

    def siblings(self, individual_id: str) -> List[Individual]:
        individual = self.get_individual(individual_id)
        if individual is None:
            return []

        result: List[Individual] = []
        for family in self._families(individual.families_as_child):
            for sibling_id in family.children:
                if sibling_id == individual_id:
                    continue
                sibling = self.get_individual(sibling_id)
                if sibling is not None:
                    result.append(sibling)
        return result

    def root_individuals(self) -> List[Individual]:
        """Individuals with no resolvable parent."""
        return [indi for indi in self.individuals.values() if not self.parents(indi.id)]

    # ------------------------------------------------------------------ #
    # Bounded walks
    # ------------------------------------------------------------------ #

    def ancestors(
        self,
        individual_id: str,
        max_depth: int = DEFAULT_MAX_TREE_DEPTH,
        visited: Optional[Set[str]] = None,
    ) -> List[LineageEntry]:
        """
        Depth-first ancestor walk, at most ``max_depth`` generations up.

        Each person appears at most once, even when the data loops back on
        itself or the same person is reachable along two lines.
        """
        visited = set() if visited is None else visited
        if self.get_individual(individual_id) is None:
            return []

        visited.add(individual_id)
        return self._walk(individual_id, max_depth, visited, self._parent_steps)

    def descendants(
        self,
        individual_id: str,
        max_depth: int = DEFAULT_MAX_TREE_DEPTH,
        visited: Optional[Set[str]] = None,
    ) -> List[LineageEntry]:
        """Depth-first descendant walk, the mirror image of ``ancestors``."""
        visited = set() if visited is None else visited
        if self.get_individual(individual_id) is None:
            return []

        visited.add(individual_id)
        return self._walk(individual_id, max_depth, visited, self._child_steps)

    def _parent_steps(self, individual_id, visited):
        return [(r.relation, r.individual) for r in self.parents(individual_id, visited)]

    def _child_steps(self, individual_id, visited):
        return [("child", child) for child in self.children(individual_id, visited)]

    @staticmethod
    def _walk(start_id, max_depth, visited, steps) -> List[LineageEntry]:
        """
        Depth-first walk driven by an explicit stack of (pending steps, depth)
        pairs, so long lineages do not hit the interpreter recursion limit.
        """
        lineage: List[LineageEntry] = []
        stack = [(iter(steps(start_id, visited)), 1)] if max_depth >= 1 else []

        while stack:
            pending, depth = stack[-1]
            step = next(pending, None)
            if step is None:
                stack.pop()
                continue

            relation, person = step
            if person.id in visited:
                continue
            visited.add(person.id)
            lineage.append(LineageEntry(depth, relation, person))
            if depth < max_depth:
                stack.append((iter(steps(person.id, visited)), depth + 1))

        return lineage

    # ------------------------------------------------------------------ #
    # Dates and statistics
    # ------------------------------------------------------------------ #

    def age_of(self, individual_id: str, context: Optional[DateContext] = None) -> Optional[int]:
        """
        Age at death, or current age for the living.

        "Now" comes from ``context`` for fictional calendars. None when the
        birth date is missing or unparseable, or no comparable end date exists.
        """
        individual = self.get_individual(individual_id)
        if individual is None or individual.birth is None:
            return None

        born = parse_gedcom_date(individual.birth.date)
        if born is None:
            return None

        if individual.death is not None and individual.death.date:
            end = parse_gedcom_date(individual.death.date)
        elif individual.death is not None:
            return None
        else:
            end = get_current_date(born.calendar, context)

        return calculate_year_difference(born, end)

    def living_individuals(self) -> List[Individual]:
        return [indi for indi in self.individuals.values() if indi.death is None]

    def birthdays(self) -> List[Individual]:
        """Individuals with a full birth date, ordered by month and day."""
        dated = []
        for indi in self.individuals.values():
            born = parse_gedcom_date(indi.birth.date) if indi.birth else None
            if born is not None and born.precision == "day":
                dated.append(((born.month, born.day), indi))
        dated.sort(key=lambda pair: pair[0])
        return [indi for _, indi in dated]

    def stats(self) -> TreeStats:
        stats = TreeStats(
            total_individuals=len(self.individuals),
            total_families=len(self.families),
            total_notes=len(self.notes),
            total_submitters=len(self.submitters),
        )

        for indi in self.individuals.values():
            if indi.sex == "M":
                stats.male_count += 1
            elif indi.sex == "F":
                stats.female_count += 1
            else:
                stats.unknown_sex_count += 1

            born = parse_gedcom_date(indi.birth.date) if indi.birth else None
            if born is not None:
                span = stats.calendars.setdefault(born.calendar, CalendarRange())
                span.earliest_birth, span.latest_birth = _widen(
                    span.earliest_birth, span.latest_birth, born.year
                )

            died = parse_gedcom_date(indi.death.date) if indi.death else None
            if died is not None:
                span = stats.calendars.setdefault(died.calendar, CalendarRange())
                span.earliest_death, span.latest_death = _widen(
                    span.earliest_death, span.latest_death, died.year
                )

        return stats
