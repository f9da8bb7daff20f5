# tests/test_pathing.py

from __future__ import annotations

from gedcom_graph.config import CONFIG_PATH
from gedcom_graph.utils import (
    default_config_path,
    mock_file_path,
    project_root,
    resolve_project_path,
)


def test_relative_paths_anchor_at_project_root() -> None:
    assert resolve_project_path("logs") == project_root() / "logs"


def test_absolute_paths_pass_through(tmp_path) -> None:
    assert resolve_project_path(tmp_path) == tmp_path


def test_config_path_points_at_shipped_yaml() -> None:
    assert default_config_path() == CONFIG_PATH
    assert CONFIG_PATH.is_file()


def test_mock_files_exist() -> None:
    for name in ("family.ged", "fictional.ged", "cycle.ged"):
        assert mock_file_path(name).is_file()
