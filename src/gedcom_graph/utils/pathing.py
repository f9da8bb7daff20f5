# src/gedcom_graph/utils/pathing.py

"""
Project-relative locations: the YAML config, the log directory and the
GEDCOM fixtures under mock_files/.

Everything resolves against the checkout root (the directory holding
src/, config/, mock_files/ and tests/), so the parser behaves the same
whatever the current working directory is.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

# <root>/src/gedcom_graph/utils/pathing.py
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

CONFIG_FILENAME = "gedcom_graph.yml"
MOCK_FILES_DIR = "mock_files"


def project_root() -> Path:
    return _PROJECT_ROOT


def resolve_project_path(path: Union[str, Path]) -> Path:
    """
    Anchor a relative path at the project root; absolute paths are
    returned unchanged.
    """
    candidate = Path(path).expanduser()
    if candidate.is_absolute():
        return candidate
    return project_root() / candidate


def default_config_path() -> Path:
    return resolve_project_path(Path("config") / CONFIG_FILENAME)


def mock_file_path(filename: Union[str, Path]) -> Path:
    """Absolute path of a GEDCOM fixture, e.g. ``mock_file_path("family.ged")``."""
    return resolve_project_path(Path(MOCK_FILES_DIR) / filename)
