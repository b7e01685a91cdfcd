# -*- coding: utf-8 -*-
"""
Core constants for graphpaths.

This module centralizes:

- the demonstration graph (``DEMO_VERTEX_COUNT``, ``DEMO_EDGES``, ``DEMO_SOURCE``).
- default export settings (``DEFAULT_DOT_FILE``).
- the label used for unreachable vertices in reports (``INFINITY_LABEL``).
"""

from __future__ import annotations

from typing import List, Tuple

__all__ = [
    "DEMO_VERTEX_COUNT",
    "DEMO_EDGES",
    "DEMO_SOURCE",
    "DEMO_DISTANCES",
    "DEFAULT_DOT_FILE",
    "INFINITY_LABEL",
]


# -----------------------------------------------------------------------------
# Demonstration graph
# -----------------------------------------------------------------------------
DEMO_VERTEX_COUNT: int = 5

# (2, 1, 3) re-inserts the pair (1, 2): its weight becomes 3.
DEMO_EDGES: List[Tuple[int, int, int]] = [
    (0, 1, 10),
    (0, 2, 5),
    (1, 2, 2),
    (1, 3, 1),
    (2, 1, 3),
    (2, 3, 9),
    (2, 4, 2),
    (3, 4, 4),
]
""" Edge list of the demonstration graph, as ``(src, dest, weight)``. """

DEMO_SOURCE: int = 0

DEMO_DISTANCES: List[int] = [0, 8, 5, 9, 7]
""" Expected distances from ``DEMO_SOURCE`` (0→2→1→3 and 0→2→4). """

# -----------------------------------------------------------------------------
# Export / report
# -----------------------------------------------------------------------------
DEFAULT_DOT_FILE: str = "graph.dot"

INFINITY_LABEL: str = "Infinity"
