# tests/test_assembler.py

from __future__ import annotations

import pytest

from gedcom_graph.loader import assemble, iter_tokens
from gedcom_graph.models import EventDetail, MediaObject, NoteRef
from gedcom_graph.parser_core import GEDCOMParser, parse_gedcom_file
from gedcom_graph.utils import mock_file_path


def _graph(text: str):
    return assemble(iter_tokens(text))


@pytest.fixture(scope="module")
def family_graph():
    return parse_gedcom_file(mock_file_path("family.ged"))


def test_record_counts(family_graph) -> None:
    assert len(family_graph.individuals) == 6
    assert len(family_graph.families) == 2
    assert len(family_graph.notes) == 1
    assert len(family_graph.submitters) == 1


def test_records_keep_file_order(family_graph) -> None:
    assert list(family_graph.individuals) == ["@I1@", "@I2@", "@I3@", "@I4@", "@I5@", "@I6@"]


def test_individual_core_fields(family_graph) -> None:
    john = family_graph.get_individual("@I1@")
    assert john.name.full == "John Smith"
    assert john.name.surname == "Smith"
    assert john.sex == "M"
    assert john.birth == EventDetail(date="12 MAY 1900", place="Springfield")
    assert john.death.date == "3 FEB 1970"
    assert john.death.place == "Shelbyville"
    assert john.families_as_spouse == ["@F1@"]
    assert john.notes == [NoteRef(ref="@N1@")]


def test_change_date_with_time(family_graph) -> None:
    john = family_graph.get_individual("@I1@")
    assert john.change_date.date == "1 JAN 2020"
    assert john.change_date.time == "10:15:00"


def test_residence_address_and_graduation(family_graph) -> None:
    robert = family_graph.get_individual("@I3@")
    assert robert.name.suffix == "Jr."
    [residence] = robert.residences
    assert residence.address.line == "12 Elm Street"
    assert residence.address.city == "Springfield"
    assert residence.address.country == "USA"
    [graduation] = robert.graduations
    assert graduation.date == "JUN 1948"
    assert graduation.type == "High school"
    assert robert.families_as_child == ["@F1@"]
    assert robert.families_as_spouse == ["@F2@"]


def test_event_note_continuation_and_inline_note(family_graph) -> None:
    alice = family_graph.get_individual("@I4@")
    assert alice.baptism.note == "Baptised at\nSt. Mary's"
    assert alice.notes == [NoteRef(text="Loved gardening and music")]


def test_dateless_event_is_present(family_graph) -> None:
    daniel = family_graph.get_individual("@I6@")
    assert daniel.death is not None
    assert daniel.death.date == ""
    assert daniel.sex == ""

    divorced = family_graph.get_family("@F2@")
    assert divorced.divorce == EventDetail()


def test_family_fields(family_graph) -> None:
    fam = family_graph.get_family("@F1@")
    assert fam.husband == "@I1@"
    assert fam.wife == "@I2@"
    assert fam.children == ["@I3@", "@I4@"]
    assert fam.marriage.date == "14 FEB 1928"
    assert fam.number_of_children == 2


def test_note_record_with_continuation(family_graph) -> None:
    note = family_graph.get_note("@N1@")
    assert note.text == "First of the family\nto settle in Springfield."


def test_submitter(family_graph) -> None:
    subm = family_graph.get_submitter("@U1@")
    assert subm.name == "Ada Archivist"
    assert subm.change_date.date == "4 MAR 2021"


def test_header(family_graph) -> None:
    header = family_graph.header
    assert header.source.name == "Family Tree Builder"
    assert header.source.version == "2.1"
    assert header.source.corporation == "Example Software"
    assert header.destination == "ANSTFILE"
    assert header.date == "5 MAR 2021"
    assert header.time == "14:02:11"
    assert header.submitter == "@U1@"
    assert header.file == "family.ged"
    assert header.gedcom.version == "5.5.1"
    assert header.gedcom.form == "LINEAGE-LINKED"
    assert header.encoding == "UTF-8"
    assert header.language == "English"
    assert header.copyright == "Public domain"


def test_unterminated_last_record_is_kept() -> None:
    graph = _graph("0 @I1@ INDI\n1 NAME A /B/\n1 BIRT\n2 DATE 1900")
    indi = graph.get_individual("@I1@")
    assert indi.birth.date == "1900"


def test_records_after_trailer_are_ignored() -> None:
    graph = _graph("0 @I1@ INDI\n0 TRLR\n0 @I2@ INDI\n")
    assert list(graph.individuals) == ["@I1@"]


def test_duplicate_ids_keep_first_record() -> None:
    graph = _graph("0 @I1@ INDI\n1 NAME First\n0 @I1@ INDI\n1 NAME Second\n")
    assert graph.get_individual("@I1@").name.full == "First"


def test_first_name_wins() -> None:
    graph = _graph("0 @I1@ INDI\n1 NAME Main /Name/\n1 NAME Alias /Other/\n")
    assert graph.get_individual("@I1@").name.full == "Main Name"


def test_opening_event_commits_previous_one() -> None:
    graph = _graph(
        "0 @I1@ INDI\n"
        "1 BIRT\n"
        "2 DATE 1900\n"
        "1 DEAT\n"
        "2 DATE 1950\n"
        "2 PLAC Rome\n"
    )
    indi = graph.get_individual("@I1@")
    assert indi.birth == EventDetail(date="1900")
    assert indi.death == EventDetail(date="1950", place="Rome")


def test_event_subtags_do_not_leak_to_record_level() -> None:
    # A level-1 DATE belongs to nothing: it must not touch the open event.
    graph = _graph("0 @I1@ INDI\n1 BIRT\n2 DATE 1900\n1 DATE 1999\n")
    assert graph.get_individual("@I1@").birth.date == "1900"


def test_media_object() -> None:
    graph = _graph(
        "0 @I1@ INDI\n"
        "1 OBJE\n"
        "2 TITL Portrait\n"
        "2 FILE portrait.jpg\n"
        "3 FORM jpg\n"
        "1 SEX F\n"
    )
    indi = graph.get_individual("@I1@")
    assert indi.objects == [MediaObject(title="Portrait", file="portrait.jpg", form="jpg")]
    assert indi.sex == "F"


def test_non_numeric_child_count() -> None:
    graph = _graph("0 @F1@ FAM\n1 NCHI several\n")
    assert graph.get_family("@F1@").number_of_children is None


def test_unknown_records_and_tags_are_ignored() -> None:
    graph = _graph(
        "0 @S1@ SOUR\n"
        "1 TITL Census\n"
        "0 @I1@ INDI\n"
        "1 _CUSTOM value\n"
        "2 DATE 1900\n"
        "1 NAME Kept /Name/\n"
    )
    assert len(graph.individuals) == 1
    assert graph.get_individual("@I1@").name.full == "Kept Name"
    assert graph.get_individual("@I1@").birth is None


def test_parse_bytes_decodes_declared_encoding() -> None:
    data = "0 HEAD\n1 CHAR UTF-8\n0 @I1@ INDI\n1 NAME Zoë /Brontë/\n0 TRLR\n".encode("utf-8")
    graph = GEDCOMParser().parse_bytes(data)
    assert graph.get_individual("@I1@").name.surname == "Brontë"
    assert graph.header.encoding == "UTF-8"
