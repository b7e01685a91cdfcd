# -*- coding: utf-8 -*-
import math

import networkx as nx
import polars as pl
import pytest

from graphpaths.analysis.edgelist import create_edgelist
from graphpaths.core import Graph
from graphpaths.post import (
    format_adjacency,
    format_distances,
    print_distances,
    print_graph,
    to_dot,
    to_networkx,
    write_dot,
)

DEMO_DOT = """graph G {
  0 -- 1 [weight="10"];
  0 -- 2 [weight="5"];
  1 -- 2 [weight="3"];
  1 -- 3 [weight="1"];
  2 -- 3 [weight="9"];
  2 -- 4 [weight="2"];
  3 -- 4 [weight="4"];
}
"""


def test_adjacency_dump(demo_graph):
    assert format_adjacency(demo_graph).splitlines() == [
        "0: 1(10) 2(5) ",
        "1: 0(10) 2(3) 3(1) ",
        "2: 0(5) 1(3) 3(9) 4(2) ",
        "3: 1(1) 2(9) 4(4) ",
        "4: 2(2) 3(4) ",
    ]


def test_adjacency_dump_shows_duplicates(demo_graph_keep):
    lines = format_adjacency(demo_graph_keep).splitlines()
    assert lines[1] == "1: 0(10) 2(3) 3(1) 2(3) "
    assert lines[2] == "2: 0(5) 1(3) 1(3) 3(9) 4(2) "


def test_print_graph(demo_graph, capsys):
    print_graph(demo_graph)
    assert capsys.readouterr().out.startswith("0: 1(10) 2(5) \n1: ")


def test_distance_report():
    text = format_distances(0, [0, 8, math.inf])
    assert text == "Shortest paths from vertex 0:\nVertex 0: 0\nVertex 1: 8\nVertex 2: Infinity"


def test_print_distances(capsys):
    print_distances(2, [1.5, 0])
    assert capsys.readouterr().out == "Shortest paths from vertex 2:\nVertex 0: 1.5\nVertex 1: 0\n"


def test_dot_export(demo_graph):
    assert to_dot(demo_graph) == DEMO_DOT


def test_dot_export_emits_each_direction_once():
    g = Graph(2)
    g.add_edge(1, 0, 4)
    assert to_dot(g, name="H") == 'graph H {\n  0 -- 1 [weight="4"];\n}\n'


def test_dot_export_of_edgeless_graph():
    assert to_dot(Graph(3)) == "graph G {\n}\n"


def test_dot_export_keeps_duplicate_entries(demo_graph_keep):
    assert to_dot(demo_graph_keep).count("1 -- 2 ") == 2


def test_write_dot(demo_graph, tmp_path, capsys):
    target = tmp_path / "graph.dot"
    assert write_dot(demo_graph, target) == target
    assert target.read_text(encoding="utf-8") == DEMO_DOT
    assert capsys.readouterr().out == f"Graph visualized in {target}\n"


def test_write_dot_quiet(demo_graph, tmp_path, capsys):
    write_dot(demo_graph, str(tmp_path / "g.dot"), verbose=False)
    assert capsys.readouterr().out == ""


def test_write_dot_rejects_bad_filename(demo_graph):
    with pytest.raises(TypeError):
        write_dot(demo_graph, 42)


def test_edgelist_table(demo_graph_keep):
    table = create_edgelist(demo_graph_keep)
    assert table.columns == ["from", "to", "weight"]
    assert table.height == 7
    assert table.filter((pl.col("from") == 1) & (pl.col("to") == 2))["weight"].to_list() == [3.0]


def test_edgelist_table_of_edgeless_graph():
    table = create_edgelist(Graph(2))
    assert table.is_empty()
    assert table.schema["weight"] == pl.Float64


def test_to_networkx(demo_graph):
    nxg = to_networkx(demo_graph)
    assert isinstance(nxg, nx.Graph)
    assert not nxg.is_directed()
    assert nxg.number_of_nodes() == 5
    assert nxg.number_of_edges() == demo_graph.number_of_edges()
    assert nxg[2][1]["weight"] == 3


def test_to_networkx_keeps_isolated_vertices(disconnected_graph):
    nxg = to_networkx(disconnected_graph)
    assert sorted(nxg.nodes) == list(range(6))
    assert nxg.degree(5) == 0
