"""Shared fixtures for the MST tests"""

import pytest

from create_graph_files import create_random_graph
from grid_graph import Graph

SMALL_EDGES = [
    (0, 1, 10.0),
    (0, 2, 6.0),
    (0, 3, 5.0),
    (1, 3, 15.0),
    (2, 3, 4.0),
    (2, 4, 8.0),
    (3, 4, 12.0),
]

PROPERTY_EDGES = [
    (0, 1, 7.0),
    (0, 3, 5.0),
    (1, 2, 8.0),
    (1, 3, 9.0),
    (1, 4, 7.0),
    (2, 4, 5.0),
    (3, 4, 15.0),
    (3, 5, 6.0),
    (4, 5, 8.0),
]


@pytest.fixture
def small_graph():
    """The 5-vertex example whose Prim tree from vertex 0 costs 27"""
    return Graph.from_edges(5, SMALL_EDGES)


@pytest.fixture
def property_graph():
    return Graph.from_edges(6, PROPERTY_EDGES)


@pytest.fixture
def disconnected_graph():
    return Graph.from_edges(4, [(0, 1, 5.0), (2, 3, 5.0)])


@pytest.fixture(params=[(5, 0.5, 42), (6, 0.4, 100), (10, 0.8, 400), (20, 0.3, 500)])
def random_graph(request):
    num_nodes, edge_probability, seed = request.param
    return create_random_graph(num_nodes, edge_probability, seed)
