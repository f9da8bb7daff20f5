# src/gedcom_graph/loader/encoding.py

"""
Character encoding resolution for raw GEDCOM bytes.

GEDCOM declares its own encoding in the header (``1 CHAR <token>``). The
header always comes first, so scanning a bounded prefix is enough to find
it. Unknown or missing declarations never fail: they fall back to a
single-byte Latin-1 decode, which accepts every byte value.
"""

from __future__ import annotations

import codecs
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from gedcom_graph.config import DEFAULT_ANSEL_SCAN_LIMIT, DEFAULT_HEADER_PREVIEW_SIZE
from gedcom_graph.core.exceptions import GedcomReadError
from gedcom_graph.loader.ansel import decode_ansel, is_ansel
from gedcom_graph.logging import get_logger

log = get_logger(__name__)

CHAR_PATTERN = re.compile(r"1\s+CHAR\s+([\w-]+)")

FALLBACK_CODEC = "latin-1"
ANSEL = "ansel"

# Declared CHAR token -> Python codec name
DECLARED_CODECS = {
    "ASCII": "ascii",
    "UNICODE": "utf-8",
    "UTF-8": "utf-8",
    "UTF8": "utf-8",
    "UTF-16": "utf-16",
    "UTF16": "utf-16",
}


@dataclass(frozen=True)
class ResolvedEncoding:
    """
    Outcome of encoding resolution.

    Attributes:
        declared: The upper-cased ``CHAR`` token from the header, or None.
        codec: Python codec used to decode, or ``"ansel"`` for the custom decoder.
    """
    declared: Optional[str]
    codec: str

    @property
    def ansel(self) -> bool:
        return self.codec == ANSEL


def _preview_text(data: bytes, preview_size: int) -> str:
    """Decode the header preview for the CHAR scan."""
    preview = data[:preview_size]

    # UTF-16 headers are unreadable as ASCII; use the BOM to decode them.
    if preview.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return preview.decode("utf-16", errors="ignore")

    return preview.decode("ascii", errors="replace")


def find_declared_charset(
    data: bytes,
    preview_size: int = DEFAULT_HEADER_PREVIEW_SIZE,
) -> Optional[str]:
    """Return the upper-cased ``1 CHAR`` token found in the header preview."""
    match = CHAR_PATTERN.search(_preview_text(data, preview_size))
    if not match:
        return None
    return match.group(1).upper()


def resolve_encoding(
    data: bytes,
    *,
    preview_size: int = DEFAULT_HEADER_PREVIEW_SIZE,
    ansel_scan_limit: int = DEFAULT_ANSEL_SCAN_LIMIT,
    fallback: str = FALLBACK_CODEC,
) -> ResolvedEncoding:
    """
    Choose a decoding strategy for ``data``.

    - ``ANSEL``: the custom decoder if combining bytes are present, otherwise
      the fallback (files mislabeled as ANSEL are usually Latin-1).
    - ``ASCII``, ``UNICODE``/``UTF-8``/``UTF8``, ``UTF-16``/``UTF16``: the
      matching codec.
    - anything else, or no declaration: the fallback.
    """
    declared = find_declared_charset(data, preview_size)

    if declared == "ANSEL":
        if is_ansel(data, ansel_scan_limit):
            return ResolvedEncoding(declared=declared, codec=ANSEL)
        log.info("File declares ANSEL but has no combining bytes; using %s", fallback)
        return ResolvedEncoding(declared=declared, codec=fallback)

    codec = DECLARED_CODECS.get(declared or "")
    if codec is None:
        if declared:
            log.info("Unrecognized GEDCOM encoding %r; using %s", declared, fallback)
        return ResolvedEncoding(declared=declared, codec=fallback)

    return ResolvedEncoding(declared=declared, codec=codec)


def decode_gedcom_bytes(
    data: bytes,
    *,
    preview_size: int = DEFAULT_HEADER_PREVIEW_SIZE,
    ansel_scan_limit: int = DEFAULT_ANSEL_SCAN_LIMIT,
    fallback: str = FALLBACK_CODEC,
) -> str:
    """Decode a whole GEDCOM buffer according to its declared encoding."""
    resolved = resolve_encoding(
        data,
        preview_size=preview_size,
        ansel_scan_limit=ansel_scan_limit,
        fallback=fallback,
    )
    log.debug("Decoding GEDCOM as %s (declared %s)", resolved.codec, resolved.declared)

    if resolved.ansel:
        return decode_ansel(data)

    codec = resolved.codec
    if codec == "utf-8" and data.startswith(codecs.BOM_UTF8):
        codec = "utf-8-sig"

    return data.decode(codec, errors="replace")


def read_gedcom_file(
    path: Union[str, Path],
    *,
    preview_size: int = DEFAULT_HEADER_PREVIEW_SIZE,
    ansel_scan_limit: int = DEFAULT_ANSEL_SCAN_LIMIT,
    fallback: str = FALLBACK_CODEC,
) -> str:
    """
    Read and decode a GEDCOM file.

    Raises:
        GedcomReadError: if the file cannot be read.
    """
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except OSError as exc:
        raise GedcomReadError(file_path, exc.strerror or str(exc)) from exc

    log.info("Loaded %d bytes from %s", len(data), file_path)
    return decode_gedcom_bytes(
        data,
        preview_size=preview_size,
        ansel_scan_limit=ansel_scan_limit,
        fallback=fallback,
    )
