# -*- coding: utf-8 -*-
"""
Graph description exports.

This module provides:

- `to_dot` / `write_dot` – Graphviz DOT text (``graph G { ... }``) with a ``weight``
  attribute per undirected edge.
- `to_networkx` – an undirected ``networkx.Graph`` built from the edge list table,
  for users who want NetworkX's drawing and analysis tools.

Notes
-----
- An undirected edge is stored in both adjacency lists; `to_dot` only emits an entry
  when ``i < j`` so that the two directions never produce two lines.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import networkx as nx

from graphpaths.analysis.edgelist import create_edgelist
from graphpaths.core.graph import Graph
from graphpaths.utils.utils import format_weight

__all__ = ["to_dot", "write_dot", "to_networkx"]


def to_dot(graph: Graph, *, name: str = "G") -> str:
    """
    Render `graph` as Graphviz DOT text.

    Parameters
    ----------
    graph : Graph
        Graph to export.
    name : str, optional
        Graph identifier in the DOT header. The default is ``"G"``.

    Returns
    -------
    str
        DOT text ending with a newline, e.g.::

            graph G {
              0 -- 1 [weight="10"];
            }

    Notes
    -----
    Self-loops (``i == j``) are not emitted. With ``duplicate_policy='keep'`` a repeated
    pair is emitted once per recorded adjacency entry.
    """
    lines = [f"graph {name} {{"]
    for i in range(graph.vertex_count):
        for j in graph.neighbors(i):
            if i < j:
                lines.append(f'  {i} -- {j} [weight="{format_weight(graph.weight(i, j))}"];')
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(graph: Graph, filename: Union[str, Path], *, verbose: bool = True) -> Path:
    """
    Write the DOT rendering of `graph` to `filename`.

    Parameters
    ----------
    graph : Graph
        Graph to export.
    filename : str or pathlib.Path
        Destination file; '~' is expanded. Existing files are overwritten.
    verbose : bool, optional
        Print a confirmation line. The default is True.

    Returns
    -------
    pathlib.Path
        The path written to.

    Raises
    ------
    TypeError
        If `filename` is neither `str` nor `pathlib.Path`.
    """
    if not isinstance(filename, (str, Path)):
        raise TypeError("`filename` must be a `str` or `pathlib.Path`.")

    path = Path(filename).expanduser()
    path.write_text(to_dot(graph), encoding="utf-8")

    if verbose:
        print(f"Graph visualized in {filename}")
    return path


def to_networkx(graph: Graph) -> nx.Graph:
    """
    Build an undirected ``networkx.Graph`` with a ``weight`` attribute per edge.

    Every vertex of `graph` is present, isolated ones included.

    Examples
    --------
    >>> g = Graph(3)
    >>> g.add_edge(0, 1, 4)
    >>> nxg = to_networkx(g)
    >>> sorted(nxg.nodes), nxg[0][1]["weight"]
    ([0, 1, 2], 4.0)
    """
    edgelist_df = create_edgelist(graph).to_pandas()

    nx_graph = nx.from_pandas_edgelist(
        edgelist_df,
        source="from",
        target="to",
        edge_attr="weight",
        create_using=nx.Graph,
    )
    nx_graph.add_nodes_from(range(graph.vertex_count))
    return nx_graph
