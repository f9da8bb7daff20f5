"""
gedcom_graph: parse GEDCOM files into a queryable genealogy graph.
"""

__version__ = "0.1.0"
