# -*- coding: utf-8 -*-
"""
Entry points: a pure `run` function and the demonstration program.

`run` builds a graph from a configuration, computes the shortest paths from the
configured source and hands the results to injected presentation callbacks. It
performs no output of its own, which keeps it usable headless (tests, notebooks).

`main` is the fixed demonstration: the 5-vertex graph of
`graphpaths.utils.constant`, an adjacency dump, a DOT export and the distance report
from vertex 0. It returns the process exit status: ``1`` when the graph cannot be
built, ``0`` otherwise.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union

from graphpaths.analysis.dijkstra import ShortestPaths
from graphpaths.core.graph import Graph
from graphpaths.post.export import write_dot
from graphpaths.post.report import print_distances, print_graph
from graphpaths.utils.config import GraphConfig
from graphpaths.utils.constant import DEMO_EDGES, DEMO_SOURCE, DEMO_VERTEX_COUNT, DEFAULT_DOT_FILE

__all__ = ["RunResult", "build_graph", "run", "demo_config", "main"]


@dataclass
class RunResult:
    """Graph and shortest-path results of one `run`."""

    graph: Graph
    paths: ShortestPaths

    @property
    def source(self) -> int:
        return self.paths.source

    @property
    def distances(self) -> List[Union[int, float]]:
        return self.paths.distances


def _as_config(param: Union[dict, GraphConfig]) -> GraphConfig:
    required_fields = ["vertex_count", "source"]

    if isinstance(param, dict):
        return GraphConfig(**param, required_fields=required_fields).validate()
    elif isinstance(param, GraphConfig):
        param.validate()
        param.validate_for_class(required_fields)
        return param
    raise TypeError("Parameter 'param' must be a dictionary or a GraphConfig object.")


def build_graph(config: GraphConfig) -> Graph:
    """
    Create the graph described by `config` and insert its edges in order.

    Raises
    ------
    InvalidArgumentError, OutOfRangeError, TypeError
        On the first invalid vertex count or edge; edges before it stay inserted.
    """
    graph = Graph(
        config.vertex_count,
        duplicate_policy=config.duplicate_policy,
        main_print=config.main_print,
    )
    for src, dest, weight in config.edges:
        graph.add_edge(src, dest, weight)
    return graph


def run(
    param: Union[dict, GraphConfig],
    *,
    dump: Optional[Callable[[Graph], object]] = None,
    export: Optional[Callable[[Graph], object]] = None,
    report: Optional[Callable[[int, Sequence[Union[int, float]]], object]] = None,
) -> RunResult:
    """
    Build the configured graph and compute shortest paths from the configured source.

    Parameters
    ----------
    param : dict or GraphConfig
        Requires ``vertex_count`` and ``source``; ``edges`` and ``duplicate_policy``
        are optional.
    dump : callable, optional
        Called as ``dump(graph)`` once the graph is built.
    export : callable, optional
        Called as ``export(graph)`` once the graph is built.
    report : callable, optional
        Called as ``report(source, distances)`` after the computation.

    Returns
    -------
    RunResult

    Raises
    ------
    ValueError, TypeError
        Invalid configuration (including `InvalidArgumentError`).
    OutOfRangeError
        An edge end point or the source is not a vertex of the graph.
    """
    config = _as_config(param)
    graph = build_graph(config)

    if dump is not None:
        dump(graph)
    if export is not None:
        export(graph)

    paths = ShortestPaths(graph, config).process_dijkstra()

    if report is not None:
        report(paths.source, paths.distances)

    return RunResult(graph=graph, paths=paths)


def demo_config(*, dot_file: Optional[str] = DEFAULT_DOT_FILE, main_print: bool = False) -> GraphConfig:
    """Configuration of the demonstration graph."""
    return GraphConfig(
        vertex_count=DEMO_VERTEX_COUNT,
        edges=list(DEMO_EDGES),
        source=DEMO_SOURCE,
        dot_file=dot_file,
        main_print=main_print,
    )


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="graphpaths",
        description="Build the demonstration graph, export it to DOT and run Dijkstra from vertex 0.",
    )
    parser.add_argument(
        "dot_file",
        nargs="?",
        default=DEFAULT_DOT_FILE,
        help=f"DOT output file (default: {DEFAULT_DOT_FILE}).",
    )
    parser.add_argument("--no-export", action="store_true", help="Skip the DOT export.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print execution details.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None, *, param: Union[dict, GraphConfig, None] = None) -> int:
    """
    Run the demonstration and return the exit status.

    Parameters
    ----------
    argv : sequence of str, optional
        Command-line arguments (defaults to ``sys.argv[1:]``).
    param : dict or GraphConfig, optional
        Replaces the demonstration configuration.
    """
    args = _parse_args(argv)

    if param is None:
        param = demo_config(
            dot_file=None if args.no_export else args.dot_file,
            main_print=args.verbose,
        )
    dot_file = param.get("dot_file", DEFAULT_DOT_FILE) if isinstance(param, dict) else getattr(param, "dot_file", None)

    export = None
    if dot_file is not None and not args.no_export:
        def export(graph: Graph) -> None:
            write_dot(graph, dot_file)

    try:
        run(param, dump=print_graph, export=export, report=print_distances)
    except (ValueError, IndexError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
