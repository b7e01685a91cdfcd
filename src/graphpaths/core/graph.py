# -*- coding: utf-8 -*-
"""
Undirected weighted graph store.

This module defines the class `Graph`, which owns a fixed number of vertices, their
adjacency lists and a sparse weight mapping, and validates structural invariants on
every mutation. It is the read-only data source of the shortest-path engine
(`graphpaths.analysis`) and of the presentation helpers (`graphpaths.post`).

Notes
-----
- Vertex ids are the integers ``0 .. n-1``; ``n`` is fixed at construction.
- Weights are stored once per unordered pair ``(min(u, v), max(u, v))``. A pair with
  no edge has no key, so ``weight(u, v)`` returns ``None`` rather than ``0``.
- Negative weights are rejected: the shortest-path engine relies on them being
  non-negative.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Dict, Iterator, List, Optional, Tuple, Union

__all__ = [
    "Graph",
    "InvalidArgumentError",
    "OutOfRangeError",
    "DuplicateEdgeError",
    "GraphUserWarning",
    "DUPLICATE_POLICIES",
]

Weight = Union[int, float]

DUPLICATE_POLICIES = ("merge", "keep", "reject")
""" Accepted values for ``Graph(duplicate_policy=...)``. """


class InvalidArgumentError(ValueError):
    """Argument with a valid type but an unacceptable value (e.g. vertex count <= 0)."""
    pass

class OutOfRangeError(IndexError):
    """Vertex id outside ``[0, n)``."""
    pass

class DuplicateEdgeError(InvalidArgumentError):
    """Edge inserted twice while the graph rejects duplicates."""
    pass

class GraphUserWarning(UserWarning):
    """Non-fatal structural issues detected while building a graph."""
    pass


# -----------------------------------------------------------------------------
# Class: Graph
# -----------------------------------------------------------------------------
class Graph:
    """
    Undirected graph with a fixed vertex count and non-negative edge weights.

    Attributes
    ----------
    duplicate_policy : str
        How a repeated insertion of the same pair is handled:

        - ``'merge'`` : the weight is updated, adjacency keeps one entry per direction.
        - ``'keep'`` : a further adjacency entry is recorded per direction and the weight
          is overwritten (a `GraphUserWarning` is emitted).
        - ``'reject'`` : `DuplicateEdgeError` is raised.
    main_print : bool
        Controls console output for structural changes.

    Methods
    -------
    add_edge(src, dest, weight):
        Insert (or update) the undirected edge ``src -- dest``.
    neighbors(v):
        Ordered list of the vertices adjacent to ``v``.
    weight(u, v):
        Stored weight of the pair, or ``None`` without an edge.
    edges():
        Iterate over distinct edges as ``(u, v, weight)`` with ``u <= v``.

    Examples
    --------
    >>> g = Graph(3)
    >>> g.add_edge(0, 1, 4)
    >>> g.neighbors(1)
    [0]
    >>> g.weight(1, 0), g.weight(0, 2)
    (4, None)
    """

    def __init__(
        self,
        vertex_count: int,
        *,
        duplicate_policy: str = "merge",
        main_print: bool = False,
    ) -> None:
        """
        Create ``vertex_count`` isolated vertices.

        Raises
        ------
        TypeError
            If `vertex_count` is not an integer.
        InvalidArgumentError
            If `vertex_count` is not positive or `duplicate_policy` is unknown.
        """
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int):
            raise TypeError(
                f"Number of vertices must be an integer, got {type(vertex_count).__name__}."
            )
        if vertex_count <= 0:
            raise InvalidArgumentError("Number of vertices must be positive.")
        if duplicate_policy not in DUPLICATE_POLICIES:
            raise InvalidArgumentError(
                f"Invalid 'duplicate_policy': {duplicate_policy}\n"
                f"It must be one of: {', '.join(DUPLICATE_POLICIES)}."
            )

        self._vertex_count = vertex_count
        self._adjacency: List[List[int]] = [[] for _ in range(vertex_count)]
        self._weights: Dict[Tuple[int, int], Weight] = {}
        self.duplicate_policy = duplicate_policy
        self.main_print = main_print


    def __len__(self) -> int:
        return self._vertex_count


    def __contains__(self, v: object) -> bool:
        return isinstance(v, int) and not isinstance(v, bool) and 0 <= v < self._vertex_count


    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self._vertex_count}, "
            f"edges={self.number_of_edges()}, duplicate_policy={self.duplicate_policy!r})"
        )


    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)


    def _warn(self, summary: str, details: List[str], *, stacklevel: int = 3) -> None:
        import warnings
        msg = "\n" + f"Graph — {summary}\n" + "\n".join(f"• {line}" for line in details)
        warnings.warn(msg, GraphUserWarning, stacklevel=stacklevel)


    @staticmethod
    def _key(u: int, v: int) -> Tuple[int, int]:
        return (u, v) if u <= v else (v, u)


    @property
    def vertex_count(self) -> int:
        """Number of vertices, fixed at construction."""
        return self._vertex_count


    def number_of_vertices(self) -> int:
        return self._vertex_count


    def number_of_edges(self) -> int:
        """Number of distinct undirected edges (duplicate adjacency entries count once)."""
        return len(self._weights)


    def validate_vertex(self, v: int, *, name: str = "vertex") -> int:
        """
        Check that `v` is a vertex id of this graph and return it.

        Raises
        ------
        TypeError
            If `v` is not an integer.
        OutOfRangeError
            If `v` is outside ``[0, n)``.
        """
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"'{name}' must be an integer, got {type(v).__name__}.")
        if not 0 <= v < self._vertex_count:
            raise OutOfRangeError(
                f"Vertex index out of range: {name}={v} (valid range is 0..{self._vertex_count - 1})."
            )
        return v


    def add_edge(self, src: int, dest: int, weight: Weight) -> None:
        """
        Insert the undirected edge ``src -- dest`` with the given weight.

        Parameters
        ----------
        src, dest : int
            End points, both in ``[0, n)``. ``src == dest`` records a self-loop.
        weight : int or float
            Non-negative edge weight, stored for both directions.

        Raises
        ------
        OutOfRangeError
            If an end point is not a vertex of the graph.
        TypeError
            If an end point is not an integer or the weight is not a real number.
        InvalidArgumentError
            If the weight is negative, NaN, infinite or beyond the float range.
        DuplicateEdgeError
            If the pair already exists and ``duplicate_policy == 'reject'``.

        Notes
        -----
        Every check runs before the structure is touched: a failing call leaves the
        graph exactly as it was.
        """
        self.validate_vertex(src, name="src")
        self.validate_vertex(dest, name="dest")
        if isinstance(weight, bool) or not isinstance(weight, Real):
            raise TypeError(f"Edge weight must be a real number, got {type(weight).__name__}.")
        if weight < 0:
            raise InvalidArgumentError(
                f"Edge weight must be non-negative, got {weight} for edge ({src}, {dest})."
            )
        try:
            finite = math.isfinite(weight)
        except OverflowError:
            finite = False
        if not finite:
            raise InvalidArgumentError(
                f"Edge weight must be finite and representable as a float, got {weight} for edge ({src}, {dest})."
            )

        key = self._key(src, dest)
        exists = key in self._weights

        if exists and self.duplicate_policy == "reject":
            raise DuplicateEdgeError(f"Edge ({src}, {dest}) already exists.")

        if exists and self.duplicate_policy == "keep":
            self._warn(
                f"duplicate edge ({src}, {dest})",
                [
                    "A second adjacency entry is recorded in both directions.",
                    f"Weight overwritten: {self._weights[key]} -> {weight}.",
                    "Use duplicate_policy='merge' to update the edge in place.",
                ],
            )

        if not exists or self.duplicate_policy == "keep":
            self._adjacency[src].append(dest)
            if src != dest:
                self._adjacency[dest].append(src)

        self._weights[key] = weight
        self._log(f"Edge ({src}, {dest}) {'updated' if exists else 'added'} with weight {weight}.")


    def neighbors(self, v: int) -> List[int]:
        """Return the neighbours of `v` in insertion order (a copy)."""
        self.validate_vertex(v)
        return list(self._adjacency[v])


    def weight(self, u: int, v: int) -> Optional[Weight]:
        """Return the weight of the pair ``(u, v)``, or ``None`` when there is no edge."""
        self.validate_vertex(u, name="u")
        self.validate_vertex(v, name="v")
        return self._weights.get(self._key(u, v))


    def has_edge(self, u: int, v: int) -> bool:
        return self.weight(u, v) is not None


    def weighted_neighbors(self, v: int) -> Iterator[Tuple[int, Weight]]:
        """
        Iterate over ``(neighbour, weight)`` pairs of `v`, in adjacency order.

        `v` is validated once; the adjacency list is read in place, so the graph must
        not be mutated while iterating.
        """
        self.validate_vertex(v)
        weights = self._weights
        for u in self._adjacency[v]:
            yield u, weights[(v, u) if v <= u else (u, v)]


    def edges(self) -> Iterator[Tuple[int, int, Weight]]:
        """Iterate over distinct edges as ``(u, v, weight)``, ``u <= v``, sorted by ``(u, v)``."""
        for u, v in sorted(self._weights):
            yield u, v, self._weights[(u, v)]
