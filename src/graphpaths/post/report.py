# -*- coding: utf-8 -*-
"""
Plain-text reports: adjacency dump and shortest-path distances.

Both reports only use the read interface of `graphpaths.core.Graph`
(``vertex_count``, ``neighbors``, ``weight``). The ``format_*`` functions return the
text, the ``print_*`` functions write it to the console.
"""

from __future__ import annotations

from typing import Sequence, Union

from graphpaths.core.graph import Graph
from graphpaths.utils.utils import format_distance, format_weight

__all__ = [
    "format_adjacency",
    "print_graph",
    "format_distances",
    "print_distances",
]


def format_adjacency(graph: Graph) -> str:
    """
    One line per vertex: ``"i: j(w) k(w) "``, neighbours in insertion order.

    Examples
    --------
    >>> g = Graph(2)
    >>> g.add_edge(0, 1, 7)
    >>> format_adjacency(g).splitlines()
    ['0: 1(7) ', '1: 0(7) ']
    """
    lines = []
    for i in range(graph.vertex_count):
        entries = "".join(f"{j}({format_weight(graph.weight(i, j))}) " for j in graph.neighbors(i))
        lines.append(f"{i}: {entries}")
    return "\n".join(lines)


def print_graph(graph: Graph) -> None:
    print(format_adjacency(graph))


def format_distances(source: int, distances: Sequence[Union[int, float]]) -> str:
    """
    Distance report: a header line, then ``"Vertex i: d"`` (or ``Infinity``) per vertex.
    """
    lines = [f"Shortest paths from vertex {source}:"]
    lines.extend(f"Vertex {i}: {format_distance(d)}" for i, d in enumerate(distances))
    return "\n".join(lines)


def print_distances(source: int, distances: Sequence[Union[int, float]]) -> None:
    print(format_distances(source, distances))
