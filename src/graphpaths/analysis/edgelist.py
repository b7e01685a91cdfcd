# -*- coding: utf-8 -*-
"""
Edge list table for network analysis (graphpaths).

This module defines the function `create_edgelist`, which flattens the undirected
edges of a `graphpaths.core.Graph` into a Polars DataFrame, one row per distinct pair.
It is the tabular exchange format used by the NetworkX export.
"""

from __future__ import annotations

import polars as pl

from graphpaths.core.graph import Graph
from graphpaths.utils.utils import to_float

__all__ = ["create_edgelist", "EDGELIST_SCHEMA"]


EDGELIST_SCHEMA = {
    "from": pl.Int64,
    "to": pl.Int64,
    "weight": pl.Float64,
}
""" Column types of the edge list table. """


def create_edgelist(graph: Graph) -> pl.DataFrame:
    """
    Creates the list of undirected edges of `graph`.

    Parameters
    ----------
    graph : Graph
        Source graph store.

    Returns
    -------
    polars.DataFrame
        Columns:

        - 'from', 'to': Int64 (vertex identifiers, ``from <= to``)
        - 'weight': Float64 (edge weight)

        Sorted by 'from', 'to'. An empty graph gives an empty table with the same schema.

    Notes
    -----
    - Duplicate adjacency entries (``duplicate_policy='keep'``) collapse to a single row,
      since the store keeps a single weight per pair.
    """
    rows = list(graph.edges())
    return pl.DataFrame(
        {
            "from": [u for u, _, _ in rows],
            "to": [v for _, v, _ in rows],
            "weight": [to_float(w) for _, _, w in rows],
        },
        schema=EDGELIST_SCHEMA,
    ).sort(["from", "to"])
