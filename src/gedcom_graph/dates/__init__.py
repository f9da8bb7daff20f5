"""
Multi-calendar GEDCOM dates.

    from gedcom_graph.dates import parse_gedcom_date, calculate_year_difference
"""

from gedcom_graph.dates.context import DateContext, get_current_date
from gedcom_graph.dates.parser import (
    GREGORIAN,
    MONTHS,
    ParsedDate,
    calculate_year_difference,
    detect_calendar,
    format_parsed_date,
    parse_gedcom_date,
)

__all__ = [
    "GREGORIAN",
    "MONTHS",
    "DateContext",
    "ParsedDate",
    "calculate_year_difference",
    "detect_calendar",
    "format_parsed_date",
    "get_current_date",
    "parse_gedcom_date",
]
