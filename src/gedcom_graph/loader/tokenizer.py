# src/gedcom_graph/loader/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from gedcom_graph.loader.encoding import read_gedcom_file
from gedcom_graph.logging import get_logger

log = get_logger(__name__)

LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the decoded text.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Optional cross-reference identifier, e.g. "@I1@" or None.
        tag: GEDCOM tag, e.g. "INDI", "FAM", "HEAD", "NOTE", "CONT".
        value: The line value (payload) as a string (may be empty).
        raw: The original line content without surrounding whitespace.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line cannot be parsed according to basic syntax."""


def is_pointer(text: str) -> bool:
    """True for a cross-reference of the form ``@...@``."""
    return len(text) > 2 and text.startswith("@") and text.endswith("@")


def _is_valid_tag(tag: str) -> bool:
    # Alphanumeric, with underscores allowed for vendor tags such as _UID.
    return bool(tag) and tag.replace("_", "").isalnum()


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    Grammar, after trimming surrounding whitespace:
        <level> [<pointer>] <tag> [<value>]

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "1 NOTE This is a note"

    Raises:
        GedcomSyntaxError: the line does not follow the grammar.
    """
    raw = line.strip()

    # Handle optional byte-order mark on the very first line.
    if raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff").lstrip()

    if not raw:
        raise GedcomSyntaxError(f"Empty or whitespace-only line at {lineno}")

    # --- 1. Extract level -------------------------------------------------
    parts = raw.split(None, 1)
    if len(parts) == 1:
        raise GedcomSyntaxError(
            f"Line {lineno}: missing tag (only level found) -> {raw!r}"
        )

    level_str, rest = parts
    if not level_str.isdecimal():
        raise GedcomSyntaxError(
            f"Line {lineno}: level is not numeric -> {level_str!r} in {raw!r}"
        )

    level = int(level_str)

    # --- 2. Extract optional pointer -------------------------------------
    pointer: Optional[str] = None

    if rest.startswith("@"):
        ptr_parts = rest.split(None, 1)
        if len(ptr_parts) == 1:
            # Something like "0 @I1@" with no tag is invalid.
            raise GedcomSyntaxError(
                f"Line {lineno}: pointer present but no tag -> {raw!r}"
            )
        pointer, rest = ptr_parts
        if not is_pointer(pointer):
            raise GedcomSyntaxError(
                f"Line {lineno}: malformed pointer {pointer!r} in {raw!r}"
            )

    # --- 3. Extract tag and optional value --------------------------------
    tag_parts = rest.split(None, 1)
    tag = tag_parts[0]
    value = tag_parts[1] if len(tag_parts) > 1 else ""

    if not _is_valid_tag(tag):
        raise GedcomSyntaxError(
            f"Line {lineno}: invalid tag {tag!r} in {raw!r}"
        )

    return Token(
        lineno=lineno,
        level=level,
        pointer=pointer,
        tag=tag,
        value=value,
        raw=raw,
    )


def format_line(token: Token) -> str:
    """Re-synthesize ``LEVEL [XREF] TAG [VALUE]`` from a token."""
    parts = [str(token.level)]
    if token.pointer:
        parts.append(token.pointer)
    parts.append(token.tag)
    if token.value:
        parts.append(token.value)
    return " ".join(parts)


def iter_tokens(lines: Union[str, Iterable[str]]) -> Iterator[Token]:
    """
    Yield a Token for every well-formed line.

    Blank lines produce nothing. Lines that break the grammar are logged as
    warnings and skipped, so one bad line never aborts a file.
    """
    if isinstance(lines, str):
        lines = LINE_BREAK.split(lines)

    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        try:
            yield tokenize_line(line, lineno=lineno)
        except GedcomSyntaxError as exc:
            log.warning("Skipping unparseable line: %s", exc)


def tokenize_file(path: Union[str, Path]) -> Iterator[Token]:
    """
    Yield Token objects for every well-formed line in the given file.

    The file is decoded according to its declared ``CHAR`` encoding.

    Raises:
        GedcomReadError: if `path` cannot be read.
    """
    yield from iter_tokens(read_gedcom_file(path))
