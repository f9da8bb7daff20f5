# tests/test_ansel.py

from __future__ import annotations

from gedcom_graph.loader import decode_ansel, is_ansel


def test_plain_ascii_passes_through() -> None:
    assert decode_ansel(b"0 HEAD\n1 CHAR ANSEL") == "0 HEAD\n1 CHAR ANSEL"


def test_mark_before_letter_becomes_precomposed() -> None:
    assert decode_ansel(b"\xe2a") == "á"
    assert decode_ansel(b"Jos\xe2e") == "José"
    assert decode_ansel(b"M\xe8uller") == "Müller"
    assert decode_ansel(b"Fran\xebcois") == "François"


def test_mark_without_precomposed_form_follows_the_letter() -> None:
    # caron + c has no entry in the precomposed table
    assert decode_ansel(b"\xe9c") == "c\u030c"


def test_trailing_mark_byte_is_kept_as_code_point() -> None:
    assert decode_ansel(b"ab\xe2") == "abâ"


def test_c1_control_bytes_are_dropped() -> None:
    assert decode_ansel(b"a\x85b") == "ab"


def test_is_ansel_detects_combining_bytes() -> None:
    assert is_ansel(b"Jos\xe2e")
    assert not is_ansel(b"plain ascii")


def test_is_ansel_respects_scan_limit() -> None:
    data = b"x" * 50 + b"\xe2e"
    assert not is_ansel(data, scan_limit=50)
    assert is_ansel(data, scan_limit=60)
