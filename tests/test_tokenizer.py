# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom_graph.core.exceptions import GedcomReadError
from gedcom_graph.loader import (
    GedcomSyntaxError,
    format_line,
    iter_tokens,
    tokenize_file,
    tokenize_line,
)
from gedcom_graph.utils import mock_file_path


def test_tokenize_line_simple_head() -> None:
    token = tokenize_line("0 HEAD", lineno=1)
    assert token.lineno == 1
    assert token.level == 0
    assert token.pointer is None
    assert token.tag == "HEAD"
    assert token.value == ""


def test_tokenize_line_with_pointer_and_tag_only() -> None:
    token = tokenize_line("0 @I1@ INDI", lineno=1)
    assert token.level == 0
    assert token.pointer == "@I1@"
    assert token.tag == "INDI"
    assert token.value == ""


def test_tokenize_line_with_value() -> None:
    line = "1 NOTE This is a test note"
    token = tokenize_line(line, lineno=10)
    assert token.level == 1
    assert token.pointer is None
    assert token.tag == "NOTE"
    assert token.value == "This is a test note"
    assert token.raw == line


def test_tokenize_line_value_may_be_a_pointer() -> None:
    token = tokenize_line("1 FAMS @F1@")
    assert token.pointer is None
    assert token.tag == "FAMS"
    assert token.value == "@F1@"


def test_tokenize_line_trims_surrounding_whitespace() -> None:
    token = tokenize_line("   2 DATE 12 MAY 1900  \r")
    assert token.level == 2
    assert token.value == "12 MAY 1900"


def test_tokenize_line_with_bom_on_first_line() -> None:
    token = tokenize_line("\ufeff0 HEAD", lineno=1)
    assert token.level == 0
    assert token.tag == "HEAD"


def test_tokenize_line_accepts_vendor_tags() -> None:
    assert tokenize_line("1 _UID 1234").tag == "_UID"


@pytest.mark.parametrize(
    "line",
    [
        "X HEAD",
        "0 ",
        "0",
        "0 @I1@",
        "0 @I1 INDI",
        "1 NA-ME John",
    ],
)
def test_tokenize_line_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line(line, lineno=1)


def test_format_line_reproduces_the_line() -> None:
    for line in ("0 HEAD", "0 @I1@ INDI", "1 NAME John /Smith/", "0 @N1@ NOTE Some text"):
        assert format_line(tokenize_line(line)) == line


def test_iter_tokens_skips_blank_and_malformed_lines() -> None:
    text = "0 HEAD\r\n\r\nbad line\r\n1 CHAR UTF-8\n0 TRLR"
    tokens = list(iter_tokens(text))
    assert [t.tag for t in tokens] == ["HEAD", "CHAR", "TRLR"]
    # Line numbers still count the skipped lines.
    assert [t.lineno for t in tokens] == [1, 4, 5]


def test_iter_tokens_accepts_a_line_iterable() -> None:
    tokens = list(iter_tokens(["0 HEAD", "", "0 TRLR"]))
    assert [t.tag for t in tokens] == ["HEAD", "TRLR"]


def test_tokenize_file_reads_existing_mock_file() -> None:
    tokens = list(tokenize_file(mock_file_path("family.ged")))
    assert tokens[0].tag == "HEAD"
    assert tokens[-1].tag == "TRLR"
    assert any(t.pointer == "@I1@" and t.tag == "INDI" for t in tokens)


def test_tokenize_file_missing_raises_read_error(tmp_path) -> None:
    with pytest.raises(GedcomReadError):
        list(tokenize_file(tmp_path / "missing.ged"))
