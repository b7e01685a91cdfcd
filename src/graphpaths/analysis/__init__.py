# -*- coding: utf-8 -*-
"""
Analysis subpackage : shortest-path computation and edge list construction.

For most users, the class `ShortestPaths` is the entry point to run Dijkstra and
produce the distance table. The plain function `shortest_path_lengths` returns the
raw distance labels; `create_edgelist` lives in `graphpaths.analysis.edgelist` and
is intentionally not re-exported here.
"""

from __future__ import annotations

from .dijkstra import ShortestPaths, shortest_path_lengths
# Advanced (not re-exported): from .edgelist import create_edgelist  # import explicitly if needed

__all__ = ["ShortestPaths", "shortest_path_lengths"]
