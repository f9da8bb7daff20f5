# src/gedcom_graph/dates/parser.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional


# ---------------------------------------------------------------------------
# Month and modifier tables
# ---------------------------------------------------------------------------

GREGORIAN = "GREGORIAN"

MONTHS: Dict[str, int] = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}
MONTH_NAMES = {number: name for name, number in MONTHS.items()}

# Keyword -> standard code
MODIFIERS: Dict[str, str] = {
    "ABT": "ABT",
    "ABOUT": "ABT",
    "BEF": "BEF",
    "BEFORE": "BEF",
    "AFT": "AFT",
    "AFTER": "AFT",
    "BET": "BET",
    "BETWEEN": "BET",
    "EST": "EST",
    "ESTIMATED": "EST",
    "CAL": "CAL",
    "CALCULATED": "CAL",
}

_MODIFIER_RE = re.compile(
    r"^(" + "|".join(sorted(MODIFIERS, key=len, reverse=True)) + r")\s+(.+)$",
    re.IGNORECASE,
)
# Case-sensitive: calendar suffixes are written in capitals.
_CALENDAR_RE = re.compile(r"\s+([A-Z]{2,4})$")
_DAY_MONTH_YEAR_RE = re.compile(r"^(\d+)\s+([A-Z]+)\s+(\d+)$", re.IGNORECASE)
_MONTH_YEAR_RE = re.compile(r"^([A-Z]+)\s+(\d+)$", re.IGNORECASE)
_YEAR_RE = re.compile(r"^(\d+)$")
_RANGE_AND_RE = re.compile(r"\s+AND\s+", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedDate:
    """
    A GEDCOM date in a (possibly fictional) calendar.

    Attributes:
        calendar: "GREGORIAN" or a 2-4 letter suffix such as "AG".
        year: Year number within the calendar.
        month: 1-12, defaults to 1 when absent from the source.
        day: Day of month, defaults to 1 when absent from the source.
        modifier: ABT, BEF, AFT, BET, EST, CAL or None.
        original: The source string.
        precision: "day", "month" or "year", whichever the source gave.
    """
    calendar: str
    year: int
    month: int = 1
    day: int = 1
    modifier: Optional[str] = None
    original: str = ""
    precision: str = "day"


def _split_modifier(text: str):
    match = _MODIFIER_RE.match(text)
    if not match:
        return None, text
    return MODIFIERS[match.group(1).upper()], match.group(2).strip()


def _split_calendar(text: str):
    match = _CALENDAR_RE.search(text)
    if match and match.group(1) not in MONTHS:
        return match.group(1), text[: match.start()].strip()
    return GREGORIAN, text


def parse_gedcom_date(date_str: Optional[str]) -> Optional[ParsedDate]:
    """
    Parse a GEDCOM date string.

        "20 JUN 1979"   -> GREGORIAN 1979-06-20
        "JUN 1979"      -> GREGORIAN 1979-06-01
        "ABT 10191 AG"  -> AG 10191-01-01, modifier ABT

    Returns None when nothing usable can be extracted; that is a normal
    outcome for free-text dates, not an error.
    """
    if not date_str:
        return None

    text = date_str.strip()
    modifier, core = _split_modifier(text)

    # "BET x AND y": date the range by its lower bound. Either bound may
    # carry the calendar suffix.
    if modifier == "BET":
        bounds = _RANGE_AND_RE.split(core, maxsplit=1)
        calendar, core = _split_calendar(bounds[0].strip())
        if calendar == GREGORIAN and len(bounds) > 1:
            calendar, _ = _split_calendar(bounds[1].strip())
    else:
        calendar, core = _split_calendar(core)

    match = _DAY_MONTH_YEAR_RE.match(core)
    if match:
        day, month_name, year = match.groups()
        month = MONTHS.get(month_name.upper())
        if month is not None:
            if not 1 <= int(day) <= 31:
                return None
            return ParsedDate(
                calendar=calendar,
                year=int(year),
                month=month,
                day=int(day),
                modifier=modifier,
                original=date_str,
                precision="day",
            )

    match = _MONTH_YEAR_RE.match(core)
    if match:
        month_name, year = match.groups()
        month = MONTHS.get(month_name.upper())
        if month is not None:
            return ParsedDate(
                calendar=calendar,
                year=int(year),
                month=month,
                modifier=modifier,
                original=date_str,
                precision="month",
            )

    match = _YEAR_RE.match(core)
    if match:
        return ParsedDate(
            calendar=calendar,
            year=int(match.group(1)),
            modifier=modifier,
            original=date_str,
            precision="year",
        )

    return None


def calculate_year_difference(
    from_date: Optional[ParsedDate],
    to_date: Optional[ParsedDate],
) -> Optional[int]:
    """
    Whole years from ``from_date`` to ``to_date`` (an age).

    One year is subtracted when the anniversary has not yet been reached in
    the end year. Dates in different calendars cannot be compared and give
    None.
    """
    if from_date is None or to_date is None:
        return None
    if from_date.calendar != to_date.calendar:
        return None

    years = to_date.year - from_date.year
    if (to_date.month, to_date.day) < (from_date.month, from_date.day):
        years -= 1
    return years


def format_parsed_date(date: Optional[ParsedDate], include_calendar: bool = True) -> str:
    """Render a ParsedDate back into GEDCOM style, e.g. "ABT 10191 AG"."""
    if date is None:
        return ""

    parts = []
    if date.modifier:
        parts.append(date.modifier)

    if date.precision == "day":
        parts.append(f"{date.day} {MONTH_NAMES[date.month]} {date.year}")
    elif date.precision == "month":
        parts.append(f"{MONTH_NAMES[date.month]} {date.year}")
    else:
        parts.append(str(date.year))

    if include_calendar and date.calendar != GREGORIAN:
        parts.append(date.calendar)

    return " ".join(parts)


def detect_calendar(date_str: Optional[str]) -> str:
    """Calendar tag of a date string; GREGORIAN when unparseable."""
    parsed = parse_gedcom_date(date_str)
    return parsed.calendar if parsed else GREGORIAN
