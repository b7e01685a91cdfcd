# -*- coding: utf-8 -*-
"""
Core subpackage: the undirected weighted graph store and its error types.
"""

from __future__ import annotations

from .graph import (
    Graph,
    InvalidArgumentError,
    OutOfRangeError,
    DuplicateEdgeError,
    GraphUserWarning,
)

__all__ = [
    "Graph",
    "InvalidArgumentError",
    "OutOfRangeError",
    "DuplicateEdgeError",
    "GraphUserWarning",
]
