# -*- coding: utf-8 -*-
import pytest

from graphpaths.core import Graph, GraphUserWarning
from graphpaths.utils.constant import DEMO_EDGES, DEMO_VERTEX_COUNT


def _build(vertex_count, edges, **kwargs):
    g = Graph(vertex_count, **kwargs)
    for src, dest, weight in edges:
        g.add_edge(src, dest, weight)
    return g


@pytest.fixture
def make_graph():
    return _build


@pytest.fixture
def demo_graph():
    return _build(DEMO_VERTEX_COUNT, DEMO_EDGES)


@pytest.fixture
def demo_graph_keep():
    with pytest.warns(GraphUserWarning):
        g = _build(DEMO_VERTEX_COUNT, DEMO_EDGES, duplicate_policy="keep")
    return g


@pytest.fixture
def disconnected_graph():
    # components {0, 1, 2} and {3, 4}; vertex 5 is isolated
    return _build(6, [(0, 1, 1), (1, 2, 2), (3, 4, 7)])
