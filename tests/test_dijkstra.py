# -*- coding: utf-8 -*-
import math
import random

import networkx as nx
import polars as pl
import pytest

from graphpaths.analysis import ShortestPaths, shortest_path_lengths
from graphpaths.core import Graph, OutOfRangeError
from graphpaths.post import to_networkx
from graphpaths.utils import GraphConfig
from graphpaths.utils.constant import DEMO_DISTANCES


def _random_graph(make_graph, seed, n=12, m=20, max_weight=9):
    rng = random.Random(seed)
    edges = [(rng.randrange(n), rng.randrange(n), rng.randint(0, max_weight)) for _ in range(m)]
    return make_graph(n, edges), edges


def test_demo_distances(demo_graph):
    assert shortest_path_lengths(demo_graph, 0) == [0, 8, 5, 9, 7]
    assert shortest_path_lengths(demo_graph, 0) == DEMO_DISTANCES


def test_demo_distances_with_duplicate_adjacency(demo_graph_keep):
    # stale duplicate entries do not change the result
    assert shortest_path_lengths(demo_graph_keep, 0) == DEMO_DISTANCES


def test_single_vertex():
    assert shortest_path_lengths(Graph(1), 0) == [0]


def test_disconnected_vertices_are_infinite(disconnected_graph):
    distances = shortest_path_lengths(disconnected_graph, 0)
    assert distances[:3] == [0, 1, 3]
    assert all(math.isinf(d) for d in distances[3:])

    distances = shortest_path_lengths(disconnected_graph, 4)
    assert distances[3:5] == [7, 0]
    assert math.isinf(distances[0]) and math.isinf(distances[5])


def test_isolated_source():
    g = Graph(3)
    g.add_edge(1, 2, 1)
    distances = shortest_path_lengths(g, 0)
    assert distances[0] == 0
    assert math.isinf(distances[1]) and math.isinf(distances[2])


def test_zero_weight_edges():
    g = Graph(3)
    g.add_edge(0, 1, 0)
    g.add_edge(1, 2, 0)
    assert shortest_path_lengths(g, 2) == [0, 0, 0]


def test_self_loop_is_ignored():
    g = Graph(2)
    g.add_edge(0, 0, 3)
    g.add_edge(0, 1, 2)
    assert shortest_path_lengths(g, 0) == [0, 2]


@pytest.mark.parametrize("source", [-1, 5, 100])
def test_source_out_of_range(demo_graph, source):
    with pytest.raises(OutOfRangeError):
        shortest_path_lengths(demo_graph, source)


def test_repeated_runs_are_identical(demo_graph):
    first = shortest_path_lengths(demo_graph, 3)
    second = shortest_path_lengths(demo_graph, 3)
    assert first == second


@pytest.mark.parametrize("seed", range(10))
def test_edge_relaxation_holds(make_graph, seed):
    g, edges = _random_graph(make_graph, seed)
    distances = shortest_path_lengths(g, 0)

    assert distances[0] == 0
    for u, v, _ in edges:
        w = g.weight(u, v)
        assert distances[v] <= distances[u] + w
        assert distances[u] <= distances[v] + w
    for d in distances:
        assert math.isinf(d) or d >= 0


@pytest.mark.parametrize("seed", range(10))
def test_matches_networkx(make_graph, seed):
    g, _ = _random_graph(make_graph, seed, n=15, m=30)
    for source in (0, 7, 14):
        expected = nx.single_source_dijkstra_path_length(to_networkx(g), source)
        distances = shortest_path_lengths(g, source)
        for v, d in enumerate(distances):
            if v in expected:
                assert d == pytest.approx(expected[v])
            else:
                assert math.isinf(d)


# -----------------------------------------------------------------------------
# ShortestPaths
# -----------------------------------------------------------------------------
def test_process_dijkstra_returns_self_with_table(demo_graph):
    paths = ShortestPaths(demo_graph, {"source": 0})
    assert paths.process_dijkstra() is paths

    assert paths.source == 0
    assert paths.distances == [0, 8, 5, 9, 7]
    assert paths.elapsed >= 0

    table = paths.table
    assert isinstance(table, pl.DataFrame)
    assert table.columns == ["vertex", "distance", "reachable"]
    assert table.schema["vertex"] == pl.Int64
    assert table["distance"].to_list() == [0.0, 8.0, 5.0, 9.0, 7.0]
    assert table["reachable"].all()


def test_table_marks_unreachable(disconnected_graph):
    table = ShortestPaths(disconnected_graph).process_dijkstra(3).table
    assert table["reachable"].to_list() == [False, False, False, True, True, False]
    assert math.isinf(table["distance"][0])


def test_explicit_source_overrides_config(demo_graph):
    paths = ShortestPaths(demo_graph, GraphConfig(source=0)).process_dijkstra(4)
    assert paths.source == 4
    assert paths.distance_to(4) == 0
    assert paths.distance_to(0) == 7


def test_reachable(disconnected_graph):
    paths = ShortestPaths(disconnected_graph).process_dijkstra(1)
    assert paths.reachable() == [0, 1, 2]
    assert math.isinf(paths.distance_to(5))


def test_missing_source():
    with pytest.raises(ValueError, match="source"):
        ShortestPaths(Graph(2)).process_dijkstra()


def test_results_before_run():
    paths = ShortestPaths(Graph(2))
    with pytest.raises(RuntimeError):
        paths.distances
    with pytest.raises(RuntimeError):
        paths.table


def test_results_are_not_shared_between_runs(demo_graph):
    paths = ShortestPaths(demo_graph).process_dijkstra(0)
    distances = paths.distances
    distances[1] = -1
    assert paths.distances[1] == 8

    demo_graph.add_edge(0, 3, 1)
    assert paths.distances[3] == 9
    assert paths.process_dijkstra(0).distances[3] == 1


def test_invalid_arguments(demo_graph):
    with pytest.raises(TypeError):
        ShortestPaths("not a graph")
    with pytest.raises(TypeError):
        ShortestPaths(demo_graph, param=["source", 0])
    with pytest.raises(AttributeError):
        ShortestPaths(demo_graph).dist


def test_main_print(demo_graph, capsys):
    ShortestPaths(demo_graph, {"source": 0, "main_print": True}).process_dijkstra()
    out = capsys.readouterr().out
    assert "Calculating shortest paths from vertex 0" in out
    assert "Reachable vertices: 5 / 5." in out


def test_large_integer_weights_stay_exact():
    g = Graph(3)
    big = 10 ** 308
    g.add_edge(0, 1, big)
    g.add_edge(1, 2, big)

    paths = ShortestPaths(g).process_dijkstra(0)
    assert paths.distances == [0, big, 2 * big]
    assert paths.reachable() == [0, 1, 2]
    # beyond the float range in the table, still flagged reachable
    assert paths.table["reachable"].to_list() == [True, True, True]
    assert math.isinf(paths.table["distance"][2])


def test_relaxation_does_not_copy_adjacency(demo_graph, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("per-edge public query used during relaxation")

    monkeypatch.setattr(demo_graph, "neighbors", fail)
    monkeypatch.setattr(demo_graph, "weight", fail)
    assert shortest_path_lengths(demo_graph, 0) == DEMO_DISTANCES
