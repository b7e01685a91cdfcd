# -*- coding: utf-8 -*-
"""
Post-processing subpackage: presentation of graphs and shortest-path results.

This subpackage re-exports user-facing functions so they can be imported directly:

- `print_graph`, `format_adjacency` – textual adjacency dump
- `print_distances`, `format_distances` – distance report
- `to_dot`, `write_dot` – Graphviz DOT export
- `to_networkx` – conversion to a NetworkX graph
"""

from __future__ import annotations

from .report import format_adjacency, print_graph, format_distances, print_distances
from .export import to_dot, write_dot, to_networkx

__all__ = [
    "format_adjacency",
    "print_graph",
    "format_distances",
    "print_distances",
    "to_dot",
    "write_dot",
    "to_networkx",
]
