# tests/test_config.py

from __future__ import annotations

from gedcom_graph.config import get_config, load_config


def test_project_config_defaults() -> None:
    cfg = get_config()
    assert cfg.header_preview_size == 1000
    assert cfg.ansel_scan_limit == 10000
    assert cfg.max_tree_depth == 20
    assert cfg.default_encoding == "latin-1"


def test_missing_config_file_uses_defaults(tmp_path) -> None:
    cfg = load_config(tmp_path / "absent.yml")
    assert cfg.max_tree_depth == 20
    assert cfg.debug is False


def test_config_overrides(tmp_path) -> None:
    path = tmp_path / "custom.yml"
    path.write_text(
        "debug: true\n"
        "parsing:\n"
        "  header_preview_size: 2048\n"
        "traversal:\n"
        "  max_tree_depth: 3\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.debug is True
    assert cfg.header_preview_size == 2048
    assert cfg.ansel_scan_limit == 10000
    assert cfg.max_tree_depth == 3
