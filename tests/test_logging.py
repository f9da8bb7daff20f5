# tests/test_logging.py

from __future__ import annotations

from gedcom_graph.logging import get_logger, list_active_loggers


def test_module_loggers_live_under_project_namespace() -> None:
    log = get_logger("loader.sample")
    assert log.name == "gedcom_graph.loader.sample"
    assert log.propagate is True
    assert "gedcom_graph.loader.sample" in list_active_loggers()


def test_qualified_names_are_not_prefixed_twice() -> None:
    assert get_logger("gedcom_graph.models.graph").name == "gedcom_graph.models.graph"


def test_base_logger_does_not_propagate_to_root() -> None:
    base = get_logger()
    assert base.name == "gedcom_graph"
    assert base.propagate is False
    assert base.handlers
