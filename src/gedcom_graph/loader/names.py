# src/gedcom_graph/loader/names.py

from __future__ import annotations

from gedcom_graph.models.entities import NameParts


def parse_name(name_value: str) -> NameParts:
    """
    Split a GEDCOM NAME value into its parts.

        "John Michael /Doe/"  -> given="John Michael", surname="Doe"
        "Paul /Atreides/ III" -> suffix="III"
        "Alia"                -> given="Alia" (no slashes: all given name)

    ``full`` is the value with the surname slashes removed.
    """
    if not name_value:
        return NameParts()

    value = name_value.strip()

    if value.count("/") >= 2:
        given, _, rest = value.partition("/")
        surname, _, suffix = rest.partition("/")
        full = " ".join(value.replace("/", " ").split())
        return NameParts(
            full=full,
            given=given.strip(),
            surname=surname.strip(),
            suffix=suffix.strip(),
        )

    return NameParts(full=value, given=value)
