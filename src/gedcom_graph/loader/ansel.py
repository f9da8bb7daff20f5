# src/gedcom_graph/loader/ansel.py

"""
ANSEL (ANSI Z39.47) to Unicode decoding.

ANSEL stores a diacritical mark as a separate byte *before* the letter it
modifies. Unicode puts combining marks *after* the base character, so the
decoder swaps each (mark, base) pair, preferring a precomposed character
where one exists.
"""

from __future__ import annotations

from typing import Dict, Tuple

from gedcom_graph.config import DEFAULT_ANSEL_SCAN_LIMIT

COMBINING_FIRST = 0xE0
COMBINING_LAST = 0xFE


# ---------------------------------------------------------------------------
# Mark byte -> Unicode combining character
# ---------------------------------------------------------------------------

ANSEL_COMBINING: Dict[int, str] = {
    0xE0: "\u0309",  # hook above
    0xE1: "\u0300",  # grave
    0xE2: "\u0301",  # acute
    0xE3: "\u0302",  # circumflex
    0xE4: "\u0303",  # tilde
    0xE5: "\u0304",  # macron
    0xE6: "\u0306",  # breve
    0xE7: "\u0307",  # dot above
    0xE8: "\u0308",  # diaeresis
    0xE9: "\u030C",  # caron
    0xEA: "\u030A",  # ring above
    0xEB: "\u0327",  # cedilla
    0xEC: "\u0328",  # ogonek
    0xED: "\u0323",  # dot below
    0xEE: "\u0324",  # diaeresis below
    0xEF: "\u0325",  # ring below
    0xF0: "\u031C",  # half ring below left
    0xF1: "\u032E",  # breve below
    0xF2: "\u0333",  # double low line
    0xF3: "\u0323",  # dot below
    0xF4: "\u0324",  # diaeresis below
    0xF5: "\u0325",  # ring below
    0xF6: "\u0326",  # comma below
    0xF7: "\u0327",  # cedilla
    0xF8: "\u0328",  # ogonek
    0xF9: "\u032D",  # circumflex below
    0xFA: "\u0331",  # macron below
    0xFB: "\u032E",  # breve below
    0xFC: "\u0323",  # dot below
    0xFD: "\u0323",  # dot below
    0xFE: "\u0313",  # comma above
}


# ---------------------------------------------------------------------------
# (mark byte, base letter) -> precomposed character
# ---------------------------------------------------------------------------

def _precomposed(mark: int, pairs: str) -> Dict[Tuple[int, str], str]:
    """Expand 'aáAÁ...' style pair strings into table entries."""
    return {(mark, pairs[i]): pairs[i + 1] for i in range(0, len(pairs), 2)}


ANSEL_PRECOMPOSED: Dict[Tuple[int, str], str] = {
    **_precomposed(0xE2, "aáAÁeéEÉiíIÍoóOÓuúUÚyýYÝ"),
    **_precomposed(0xE1, "aàAÀeèEÈiìIÌoòOÒuùUÙ"),
    **_precomposed(0xE3, "aâAÂeêEÊiîIÎoôOÔuûUÛ"),
    **_precomposed(0xE4, "aãAÃnñNÑoõOÕ"),
    **_precomposed(0xE8, "aäAÄeëEËiïIÏoöOÖuüUÜyÿ"),
    **_precomposed(0xEA, "aåAÅ"),
    **_precomposed(0xEB, "cçCÇ"),
}


def _is_combining(byte: int) -> bool:
    return COMBINING_FIRST <= byte <= COMBINING_LAST


def decode_ansel(data: bytes) -> str:
    """
    Decode an ANSEL byte buffer into a Unicode string.

    - A combining byte followed by another byte is emitted as the base
      character with its mark (precomposed when the table has it).
    - Bytes below 0x80 are ASCII.
    - Bytes >= 0xA0 outside a mark pair pass through as the code point of
      the same value.
    - Remaining bytes (0x80-0x9F) carry no printable meaning and are dropped.
    """
    result = []
    i = 0
    length = len(data)

    while i < length:
        byte = data[i]

        if _is_combining(byte) and i + 1 < length:
            base = chr(data[i + 1])

            precomposed = ANSEL_PRECOMPOSED.get((byte, base))
            if precomposed is not None:
                result.append(precomposed)
                i += 2
                continue

            mark = ANSEL_COMBINING.get(byte)
            if mark is not None:
                result.append(base + mark)
                i += 2
                continue

        if byte < 0x80 or byte >= 0xA0:
            result.append(chr(byte))

        i += 1

    return "".join(result)


def is_ansel(data: bytes, scan_limit: int = DEFAULT_ANSEL_SCAN_LIMIT) -> bool:
    """Return True if any ANSEL combining byte occurs within ``scan_limit`` bytes."""
    return any(_is_combining(b) for b in data[:scan_limit])
