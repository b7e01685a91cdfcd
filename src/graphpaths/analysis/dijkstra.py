# -*- coding: utf-8 -*-
"""
Single-source shortest paths using Dijkstra over the graph store.

This module defines the function `shortest_path_lengths`, a heap-based Dijkstra over
the read interface of `graphpaths.core.Graph`, and the class `ShortestPaths`, a thin
wrapper that runs it from a configured source and formats the distance labels as a
Polars table.

Notes
-----
- The priority queue (``heapq``) has no decrease-key: an improved label pushes a new
  ``(distance, vertex)`` pair and the stale one is discarded when popped, because its
  vertex is already visited.
- Correctness relies on non-negative weights, which the graph store enforces.
"""

from __future__ import annotations

import heapq
import math
import time
from typing import List, Optional, Union

import polars as pl

from graphpaths.core.graph import Graph
from graphpaths.utils.config import GraphConfig
from graphpaths.utils.utils import is_unreachable, to_float, to_engineering_notation

__all__ = ["shortest_path_lengths", "ShortestPaths"]


# -----------------------------------------------------------------------------
# Engine
# -----------------------------------------------------------------------------
def shortest_path_lengths(graph: Graph, source: int) -> List[Union[int, float]]:
    """
    Compute the minimum path weight from `source` to every vertex of `graph`.

    Parameters
    ----------
    graph : Graph
        Graph to explore. It must not be mutated during the call.
    source : int
        Start vertex, in ``[0, n)``.

    Returns
    -------
    list
        Distance label per vertex id. The source has ``0``; unreachable vertices
        keep ``math.inf``.

    Raises
    ------
    OutOfRangeError
        If `source` is not a vertex of the graph.

    Examples
    --------
    >>> g = Graph(3)
    >>> g.add_edge(0, 1, 4)
    >>> shortest_path_lengths(g, 0)
    [0, 4, inf]
    """
    graph.validate_vertex(source, name="source")

    distance: List[Union[int, float]] = [math.inf] * graph.vertex_count
    visited = [False] * graph.vertex_count
    distance[source] = 0

    # (tentative distance, vertex): ties resolve on the smaller vertex id
    queue = [(0, source)]

    while queue:
        _, current = heapq.heappop(queue)
        if visited[current]:
            continue  # stale entry
        visited[current] = True

        for neighbor, weight in graph.weighted_neighbors(current):
            if visited[neighbor]:
                continue
            candidate = distance[current] + weight
            if candidate < distance[neighbor]:
                distance[neighbor] = candidate
                heapq.heappush(queue, (candidate, neighbor))

    return distance


# -----------------------------------------------------------------------------
# Class: ShortestPaths
# -----------------------------------------------------------------------------
class ShortestPaths:
    """
    Shortest-path distances from one source vertex of a `Graph`.

    Attributes
    ----------
    graph : Graph
        Graph the distances are computed on.
    config : GraphConfig
        Dataclass with validated configuration parameters (``source``, ``main_print``).
    source : int or None
        Source of the last run; set by ``process_dijkstra()``.
    elapsed : float or None
        Duration of the last run, in seconds.

    Methods
    -------
    process_dijkstra(source=None):
        Runs Dijkstra's algorithm and stores the distance labels and table.
    distance_to(vertex):
        Distance label of one vertex.
    reachable():
        Vertices with a finite distance.

    Notes
    -----
    - Results are not stored on the graph: each call of ``process_dijkstra()``
      recomputes them from scratch.
    - ``distances`` and ``table`` raise ``RuntimeError`` before the first run.
    """

    def __init__(self, graph: Graph, param: Union[dict, GraphConfig, None] = None) -> None:
        """
        Parameters
        ----------
        graph : Graph
            The graph store to query.
        param : dict or GraphConfig, optional
            Configuration parameters; only ``source`` and ``main_print`` are used here.
        """
        if not isinstance(graph, Graph):
            raise TypeError("Parameter 'graph' must be a graphpaths Graph.")

        # Case 1: param is a dictionary
        if isinstance(param, dict):
            self.config = GraphConfig(**param).validate()

        # Case 2: param is already a GraphConfig (or nothing)
        elif isinstance(param, GraphConfig):
            self.config = param
        elif param is None:
            self.config = GraphConfig()

        # Invalid type
        else:
            raise TypeError("Parameter 'param' must be a dictionary or a GraphConfig object.")

        self.graph = graph
        self.main_print = self.config.main_print

        # Placeholders for results
        self.source: Optional[int] = None
        self.elapsed: Optional[float] = None
        self._distances: Optional[List[Union[int, float]]] = None
        self._table: Optional[pl.DataFrame] = None


    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)


    @property
    def distances(self) -> List[Union[int, float]]:
        """Distance label per vertex (a copy)."""
        if self._distances is None:
            raise RuntimeError("No distances computed yet. Run 'process_dijkstra' first.")
        return list(self._distances)


    @property
    def table(self) -> pl.DataFrame:
        """
        Distance labels as a Polars DataFrame.

        Columns: ``vertex`` (Int64), ``distance`` (Float64, ``inf`` when unreachable),
        ``reachable`` (Boolean). Sorted by ``vertex``.
        """
        if self._table is None:
            raise RuntimeError("No distance table computed yet. Run 'process_dijkstra' first.")
        return self._table


    def process_dijkstra(self, source: Optional[int] = None) -> ShortestPaths:
        """
        Runs Dijkstra's algorithm from `source` (or ``config.source``).

        Parameters
        ----------
        source : int, optional
            Start vertex. Falls back to the configured ``source``.

        Returns
        -------
        self : ShortestPaths
            The updated instance with ``distances``, ``table``, ``source`` and ``elapsed`` set.

        Raises
        ------
        ValueError
            If no source is given and none is configured.
        OutOfRangeError
            If the source is not a vertex of the graph.
        """
        if source is None:
            self.config.validate_for_class(["source"])
            source = self.config.source

        n = self.graph.vertex_count
        self._log(
            f"Calculating shortest paths from vertex {source} "
            f"({to_engineering_notation(n)} vertices, "
            f"{to_engineering_notation(self.graph.number_of_edges())} edges)..."
        )

        start_time = time.perf_counter()
        distances = shortest_path_lengths(self.graph, source)
        self.elapsed = time.perf_counter() - start_time

        self._table = pl.DataFrame(
            {
                "vertex": list(range(n)),
                "distance": [to_float(d) for d in distances],
                "reachable": [not is_unreachable(d) for d in distances],
            },
            schema={"vertex": pl.Int64, "distance": pl.Float64, "reachable": pl.Boolean},
        )
        self._distances = distances
        self.source = source

        self._log(
            "Dijkstra's algorithm successfully completed.\n"
            f"Reachable vertices: {len(self.reachable())} / {n}.\n"
            f"Calculation time: {round(self.elapsed, 6)} seconds."
        )
        return self


    def distance_to(self, vertex: int) -> Union[int, float]:
        """Distance label of `vertex` (``math.inf`` when unreachable)."""
        self.graph.validate_vertex(vertex)
        return self.distances[vertex]


    def reachable(self) -> List[int]:
        """Vertices with a finite distance, in increasing id order (the source included)."""
        return [v for v, d in enumerate(self.distances) if not is_unreachable(d)]
