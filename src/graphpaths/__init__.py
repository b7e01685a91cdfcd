# -*- coding: utf-8 -*-
"""
`graphpaths` — undirected weighted graphs and single-source shortest paths.

This top-level package exposes three user-facing subpackages:

- `graphpaths.core`      – the graph store (`Graph`) and its error types
- `graphpaths.analysis`  – Dijkstra shortest-path computation and edge list tables
- `graphpaths.post`      – text reports, DOT and NetworkX exports

`graphpaths.demo` holds the `run` entry function and the demonstration program.
"""

from __future__ import annotations

__all__ = ["core", "analysis", "post", "__version__"]

# Optional version placeholder; replace at build time if needed
__version__ = "1.0.0"
