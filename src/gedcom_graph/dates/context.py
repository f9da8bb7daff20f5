# src/gedcom_graph/dates/context.py

from __future__ import annotations

from dataclasses import replace
from datetime import date as Date
from typing import Optional

from gedcom_graph.core.exceptions import DateContextError
from gedcom_graph.dates.parser import GREGORIAN, ParsedDate, format_parsed_date


class DateContext:
    """
    The "current date" of a fictional calendar.

    Ages of living people need a "now". For the Gregorian calendar that is
    the wall clock; for a fictional calendar ("10191 AG") someone has to say
    what year it is. A DateContext holds that override. The owner (the CLI
    session) creates one and passes it to every age calculation.
    """

    def __init__(self) -> None:
        self._current: Optional[ParsedDate] = None

    def set(self, calendar: str, year: int, month: int = 1, day: int = 1) -> ParsedDate:
        if not calendar or not str(calendar).strip():
            raise DateContextError("Date context needs a calendar")
        if not isinstance(year, int) or isinstance(year, bool):
            raise DateContextError(f"Date context year must be an integer, got {year!r}")
        if not 1 <= month <= 12:
            raise DateContextError(f"Month must be 1-12, got {month}")
        if not 1 <= day <= 31:
            raise DateContextError(f"Day must be 1-31, got {day}")

        current = ParsedDate(
            calendar=str(calendar).strip().upper(),
            year=year,
            month=month,
            day=day,
        )
        self._current = replace(current, original=format_parsed_date(current))
        return self._current

    def get(self) -> Optional[ParsedDate]:
        return self._current

    def clear(self) -> None:
        self._current = None

    def now(self, calendar: str = GREGORIAN, today: Optional[Date] = None) -> Optional[ParsedDate]:
        return get_current_date(calendar, self, today=today)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<DateContext {self._current.original if self._current else 'unset'}>"


def get_current_date(
    calendar: str = GREGORIAN,
    context: Optional[DateContext] = None,
    today: Optional[Date] = None,
) -> Optional[ParsedDate]:
    """
    "Now" in the given calendar.

    - The context override, if it is set for this calendar.
    - Otherwise the wall-clock date, for GREGORIAN only.
    - Otherwise None: there is no "now" in a fictional calendar nobody set.
    """
    override = context.get() if context is not None else None
    if override is not None and override.calendar == calendar:
        return override

    if calendar != GREGORIAN:
        return None

    today = today or Date.today()
    return ParsedDate(
        calendar=GREGORIAN,
        year=today.year,
        month=today.month,
        day=today.day,
        original=today.isoformat(),
    )
