"""
parser_core.py
Central parsing engine with full logging integration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from gedcom_graph.config import get_config
from gedcom_graph.loader.assembler import assemble
from gedcom_graph.loader.encoding import decode_gedcom_bytes, read_gedcom_file
from gedcom_graph.loader.tokenizer import iter_tokens
from gedcom_graph.logging import get_logger
from gedcom_graph.models.graph import GenealogyGraph


class GEDCOMParser:
    """
    High-level parser:
      - reads and decodes the file (declared CHAR encoding)
      - tokenizes, skipping malformed lines
      - assembles records into a GenealogyGraph

    Each call builds a brand-new graph; nothing is shared between runs.
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")

    def _decode_options(self):
        return {
            "preview_size": self.cfg.header_preview_size,
            "ansel_scan_limit": self.cfg.ansel_scan_limit,
            "fallback": self.cfg.default_encoding,
        }

    def parse_text(self, text: str) -> GenealogyGraph:
        graph = assemble(iter_tokens(text))
        if self.cfg.debug:
            self.log.debug(f"Graph built: {graph!r}")
        return graph

    def parse_bytes(self, data: bytes) -> GenealogyGraph:
        return self.parse_text(decode_gedcom_bytes(data, **self._decode_options()))

    def run(self, input_path: Union[str, Path]) -> GenealogyGraph:
        """
        Full parse sequence.

        Raises:
            GedcomReadError: the file could not be read. Malformed content
            never raises.
        """
        self.log.info(f"Parsing GEDCOM input: {input_path}")
        try:
            text = read_gedcom_file(input_path, **self._decode_options())
        except Exception:
            self.log.exception("Reading GEDCOM input failed.")
            raise

        graph = self.parse_text(text)
        self.log.info("Parser run completed. Graph ready.")
        return graph


def parse_gedcom_file(path: Union[str, Path], config=None) -> GenealogyGraph:
    """Convenience wrapper: ``GEDCOMParser(config).run(path)``."""
    return GEDCOMParser(config=config).run(path)
