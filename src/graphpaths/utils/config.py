# -*- coding: utf-8 -*-
"""
Configuration container for the graphpaths package.

This module defines the dataclass `GraphConfig`, which centralizes the parameters of a
run: graph size, edge list, source vertex, duplicate-edge handling and export settings.

**Use ``GraphConfig.describe()`` to display a clean summary of current settings.**

Notes
-----
* It is intended to be imported and the configuration object injected into the
  corresponding classes/functions (`ShortestPaths`, `graphpaths.demo.run`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import List, Optional, Tuple, Union

from graphpaths.core.graph import DUPLICATE_POLICIES
from graphpaths.utils.constant import DEFAULT_DOT_FILE

__all__ = ["GraphConfig"]


# -----------------------------------------------------------------------------
# GraphConfig
# -----------------------------------------------------------------------------
@dataclass
class GraphConfig:
    """
    Configuration class for building a graph and running shortest-path queries on it.

    **Use ``GraphConfig.describe()`` to display a clean summary of current settings.**

    Notes
    -----
    When initializing ``GraphConfig`` **directly** with a dictionary, you must unpack it
    with ``**param`` so that keys map to dataclass fields. In contrast, graphpaths
    classes accept either a ``dict`` or an existing ``GraphConfig`` and will handle
    conversion/validation internally.

    Examples
    --------
        >>> param = {"vertex_count": 3, "edges": [(0, 1, 2), (1, 2, 5)], "source": 0}
        >>> config = GraphConfig(**param).validate()
        >>> config.vertex_count
        3

    Attributes
    ----------
    vertex_count : Optional[int]
        Number of vertices of the graph (ids ``0 .. vertex_count-1``).
    edges : List[Tuple[int, int, float]]
        Undirected edges as ``(src, dest, weight)`` tuples, inserted in order.
    source : Optional[int]
        Source vertex of the shortest-path computation.
    duplicate_policy : str
        Handling of repeated pairs: ``'merge'``, ``'keep'`` or ``'reject'``
        (see `graphpaths.core.Graph`).
    dot_file : Optional[str]
        File name of the DOT export. ``None`` disables the export in the demo.
    main_print : bool
        Controls whether general execution information is printed to the console.
    required_fields : List[str]
        List of field names that are required for validation. This is set
        dynamically in the context of each class that uses GraphConfig.
    """

    vertex_count: Optional[int] = None  # Fixed size of the graph.
    edges: List[Tuple[int, int, Union[int, float]]] = field(default_factory=list)
    source: Optional[int] = None  # Start vertex for Dijkstra.
    duplicate_policy: str = "merge"
    dot_file: Optional[str] = DEFAULT_DOT_FILE
    main_print: bool = False  # Toggles general execution information in the console.

    # Custom field validation (e.g., required fields)
    required_fields: List[str] = field(default_factory=list)  # Dynamically set in each class.

    def validate(self) -> GraphConfig:
        """
        Validate that all required fields are provided and check complex formats.
        """
        for field_name in self.required_fields:
            if getattr(self, field_name) is None:
                raise ValueError(f"Required parameter '{field_name}' is missing.")

        self._validate_types()
        self._validate_edges()
        self._validate_duplicate_policy()

        return self

    def _validate_types(self) -> None:
        """
        Explicitly validate types for each field.
        """
        type_map = {
            "vertex_count": (int, type(None)),
            "edges": (list, tuple),
            "source": (int, type(None)),
            "duplicate_policy": (str,),
            "dot_file": (str, type(None)),
            "main_print": (bool,),
        }

        for field_name, expected_types in type_map.items():
            value = getattr(self, field_name)
            # bool is an int subclass; only accept it where it is the declared type
            if isinstance(value, bool) and bool not in expected_types:
                raise TypeError(f"Parameter '{field_name}' must be of type {expected_types}, got bool.")
            if not isinstance(value, expected_types):
                raise TypeError(
                    f"Parameter '{field_name}' must be of type {expected_types}, got {type(value).__name__}."
                )

    def _validate_edges(self) -> None:
        """
        Validate the shape of the edge tuples (range checks are left to the graph).
        """
        for position, edge in enumerate(self.edges):
            if not isinstance(edge, (list, tuple)) or len(edge) != 3:
                raise ValueError(
                    f"Edge #{position} must be a (src, dest, weight) triple, got {edge!r}."
                )
            src, dest, weight = edge
            if not all(isinstance(v, int) and not isinstance(v, bool) for v in (src, dest)):
                raise TypeError(f"Edge #{position}: end points must be integers, got {edge!r}.")
            if isinstance(weight, bool) or not isinstance(weight, Real):
                raise TypeError(f"Edge #{position}: weight must be a real number, got {edge!r}.")

    def _validate_duplicate_policy(self) -> None:
        if self.duplicate_policy not in DUPLICATE_POLICIES:
            raise ValueError(
                f"Invalid 'duplicate_policy': {self.duplicate_policy}\n"
                f"It must be one of: {', '.join(DUPLICATE_POLICIES)}."
            )

    def validate_for_class(self, required_fields: List[str]) -> None:
        """
        Validate that the specified required fields are present in the GraphConfig object.

        Parameters
        ----------
        required_fields : list of str
            List of field names that must be validated.

        Raises
        ------
        ValueError
            If any required field is missing.
        """
        missing_fields = [field for field in required_fields if getattr(self, field, None) is None]
        if missing_fields:
            raise ValueError(f"Missing required parameters: {', '.join(missing_fields)}")

    def describe(self) -> None:
        """
        Display a summary of the current graph configuration.
        """
        print("\nGraphConfig (graph settings):")
        print(f" - Vertices                 : {self.vertex_count}")
        print(f" - Edges                    : {len(self.edges)}")
        print(f" - Source vertex            : {self.source}")
        print(f" - Duplicate policy         : {self.duplicate_policy}")
        print(f" - DOT export file          : {self.dot_file or 'None'}")
        print(f" - Print summary            : {self.main_print}")


# -----------------------------------------------------------------------------
# Example usage (no side effects at import time)
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    from graphpaths.utils.constant import DEMO_EDGES, DEMO_SOURCE, DEMO_VERTEX_COUNT

    dct_param = {
        "vertex_count": DEMO_VERTEX_COUNT,
        "edges": list(DEMO_EDGES),
        "source": DEMO_SOURCE,
        "main_print": True,
    }

    config = GraphConfig(**dct_param, required_fields=["vertex_count", "source"])
    config.validate()
    config.describe()
