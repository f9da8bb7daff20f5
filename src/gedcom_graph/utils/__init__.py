# src/gedcom_graph/utils/__init__.py

from .pathing import (
    default_config_path,
    mock_file_path,
    project_root,
    resolve_project_path,
)

__all__ = [
    "default_config_path",
    "mock_file_path",
    "project_root",
    "resolve_project_path",
]
