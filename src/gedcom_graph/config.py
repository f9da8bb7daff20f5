import yaml
from pathlib import Path

from gedcom_graph.utils.pathing import default_config_path

CONFIG_PATH = default_config_path()

DEFAULT_HEADER_PREVIEW_SIZE = 1000
DEFAULT_ANSEL_SCAN_LIMIT = 10000
DEFAULT_MAX_TREE_DEPTH = 20


class GGConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.parsing = data.get("parsing", {}) or {}
        self.traversal = data.get("traversal", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def header_preview_size(self) -> int:
        return int(self.parsing.get("header_preview_size", DEFAULT_HEADER_PREVIEW_SIZE))

    @property
    def ansel_scan_limit(self) -> int:
        return int(self.parsing.get("ansel_scan_limit", DEFAULT_ANSEL_SCAN_LIMIT))

    @property
    def default_encoding(self) -> str:
        return str(self.parsing.get("default_encoding", "latin-1"))

    @property
    def max_tree_depth(self) -> int:
        return int(self.traversal.get("max_tree_depth", DEFAULT_MAX_TREE_DEPTH))


def load_config(path=None) -> 'GGConfig':
    """
    Load configuration from YAML.

    A missing file is not an error: every setting has a built-in default.
    """
    config_path = Path(path) if path is not None else CONFIG_PATH
    if not config_path.exists():
        return GGConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GGConfig(data)

_config_cache = None

def get_config() -> 'GGConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
