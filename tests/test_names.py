# tests/test_names.py

from __future__ import annotations

from gedcom_graph.loader import parse_name


def test_given_and_surname() -> None:
    name = parse_name("John Michael /Doe/")
    assert name.full == "John Michael Doe"
    assert name.given == "John Michael"
    assert name.surname == "Doe"
    assert name.suffix == ""


def test_suffix_after_surname() -> None:
    name = parse_name("Paul /Atreides/ III")
    assert name.full == "Paul Atreides III"
    assert name.surname == "Atreides"
    assert name.suffix == "III"


def test_surname_only() -> None:
    name = parse_name("/Harkonnen/")
    assert name.full == "Harkonnen"
    assert name.given == ""
    assert name.surname == "Harkonnen"


def test_no_slashes_is_all_given() -> None:
    name = parse_name("Alia")
    assert name.full == "Alia"
    assert name.given == "Alia"
    assert name.surname == ""


def test_empty_value() -> None:
    name = parse_name("")
    assert name.full == ""
    assert name.given == ""
