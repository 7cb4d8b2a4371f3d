"""Shared test fixtures."""

import pytest

from gdwg import Graph


@pytest.fixture
def animal_graph() -> Graph:
    """Fixture providing nodes {1, 2, 3} with string-weighted edges.

    Edge order: (1, 1, "pig"), (1, 2, "cat"), (1, 2, "dog"), (2, 1, "monkey").
    """
    graph = Graph([1, 2, 3])
    graph.insert_edge(1, 1, "pig")
    graph.insert_edge(1, 2, "cat")
    graph.insert_edge(1, 2, "dog")
    graph.insert_edge(2, 1, "monkey")
    return graph


@pytest.fixture
def char_edges():
    """Fixture providing edge triples with char weights."""
    return [(1, 1, "a"), (2, 1, "b"), (2, 1, "z"), (3, 5, "c")]


@pytest.fixture
def char_graph(char_edges) -> Graph:
    """Fixture providing a graph built from ``char_edges``."""
    return Graph.from_edges(char_edges)


@pytest.fixture
def numeric_graph() -> Graph:
    """Fixture providing the integer-weighted graph used for rendering."""
    graph = Graph.from_edges(
        [
            (4, 1, -4),
            (3, 2, 2),
            (2, 4, 2),
            (2, 1, 1),
            (6, 2, 5),
            (6, 3, 10),
            (1, 5, -1),
            (3, 6, -8),
            (4, 5, 3),
            (5, 2, 7),
        ]
    )
    graph.insert_node(64)
    return graph
