# src/gedcom_graph/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    bytes -> read_gedcom_file / decode_gedcom_bytes -> text
    text  -> iter_tokens -> Token stream
    Token stream -> assemble -> GenealogyGraph
"""

from __future__ import annotations

from .ansel import decode_ansel, is_ansel
from .assembler import RecordAssembler, assemble
from .encoding import (
    ResolvedEncoding,
    decode_gedcom_bytes,
    find_declared_charset,
    read_gedcom_file,
    resolve_encoding,
)
from .names import parse_name
from .tokenizer import (
    GedcomSyntaxError,
    Token,
    format_line,
    iter_tokens,
    tokenize_file,
    tokenize_line,
)

__all__ = [
    "GedcomSyntaxError",
    "RecordAssembler",
    "ResolvedEncoding",
    "Token",
    "assemble",
    "decode_ansel",
    "decode_gedcom_bytes",
    "find_declared_charset",
    "format_line",
    "is_ansel",
    "iter_tokens",
    "parse_name",
    "read_gedcom_file",
    "resolve_encoding",
    "tokenize_file",
    "tokenize_line",
]
