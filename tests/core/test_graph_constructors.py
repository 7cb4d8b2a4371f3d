"""
Tests for graph construction, copying and moving.
"""

import copy

from gdwg import Graph


def test_default_constructor():
    """Test that a default graph is empty and equals another default graph."""
    g1 = Graph()
    g2 = Graph()

    assert g1.empty()
    assert g1 == g2
    assert g1.nodes() == []
    assert list(g1) == []


def test_node_constructor():
    """Test construction from node values."""
    graph = Graph([1, 3, 5])

    assert not graph.empty()
    assert graph.is_node(1)
    assert graph.is_node(3)
    assert graph.is_node(5)
    assert not graph.is_node(4)


def test_node_constructor_collapses_duplicates():
    """Test that duplicate node values are stored once, in ascending order."""
    graph = Graph(["ddd", "aaa", "ccc", "aaa", "bbb"])

    assert graph.nodes() == ["aaa", "bbb", "ccc", "ddd"]


def test_node_constructor_accepts_generator():
    """Test construction from a single-pass iterable."""
    graph = Graph(n * n for n in range(4))

    assert graph.nodes() == [0, 1, 4, 9]


def test_from_edges_inserts_all_nodes(char_graph):
    """Test that every endpoint of the triples becomes a node."""
    assert not char_graph.empty()
    assert char_graph.nodes() == [1, 2, 3, 5]


def test_from_edges_connects_outgoing_only(char_graph):
    """Test that edges are directed from src to dst."""
    assert char_graph.is_connected(1, 1)
    assert char_graph.is_connected(2, 1)
    assert char_graph.is_connected(3, 5)
    assert not char_graph.is_connected(1, 2)
    assert not char_graph.is_connected(5, 3)


def test_from_edges_inserts_only_given_edges(char_graph):
    """Test that exactly the listed edges are present."""
    assert char_graph.weights(1, 1) == ["a"]
    assert char_graph.weights(2, 1) == ["b", "z"]
    assert char_graph.weights(3, 5) == ["c"]
    assert char_graph.edge_count() == 4


def test_from_edges_collapses_duplicate_triples():
    """Test that repeated triples yield one edge."""
    graph = Graph.from_edges([(1, 2, 0.5), (1, 2, 0.5), (1, 2, 1.5)])

    assert graph.weights(1, 2) == [0.5, 1.5]


def test_copy_is_equal_and_independent(char_graph):
    """Test that a copy equals the original and changes do not leak."""
    clone = char_graph.copy()

    assert clone == char_graph
    assert clone is not char_graph

    char_graph.insert_node(99)
    assert clone != char_graph
    clone.insert_node(99)
    assert clone == char_graph

    clone.erase_edge(2, 1, "z")
    assert char_graph.weights(2, 1) == ["b", "z"]


def test_copy_module_protocols(char_graph):
    """Test copy.copy and copy.deepcopy produce equal, independent graphs."""
    shallow = copy.copy(char_graph)
    deep = copy.deepcopy(char_graph)

    assert shallow == char_graph
    assert deep == char_graph
    deep.erase_node(1)
    assert char_graph.is_node(1)


def test_deepcopy_copies_values():
    """Test that deepcopy duplicates mutable node values."""
    graph = Graph.from_edges([([1, 2], [3], "w")])
    clone = copy.deepcopy(graph)

    assert clone == graph
    assert clone.nodes()[0] == graph.nodes()[0]
    assert clone.nodes()[0] is not graph.nodes()[0]


def test_assign_replaces_contents(char_graph):
    """Test copy assignment keeps the target object and copies contents."""
    target = Graph([42])
    result = target.assign(char_graph)

    assert result is target
    assert target == char_graph
    assert not target.is_node(42)

    char_graph.insert_node(99)
    assert target != char_graph


def test_assign_to_self_is_noop(char_graph):
    """Test that assigning a graph to itself changes nothing."""
    expected = char_graph.copy()

    char_graph.assign(char_graph)

    assert char_graph == expected


def test_move_transfers_contents(char_graph):
    """Test that moving leaves the source empty and the target equal to it."""
    expected = char_graph.copy()

    moved = char_graph.move()

    assert moved == expected
    assert char_graph.empty()
    assert char_graph.edge_count() == 0


def test_move_keeps_cursors_valid(char_graph):
    """Test that cursors from the source work on the moved-to graph."""
    cursor = char_graph.find(2, 1, "z")
    assert cursor != char_graph.end()

    moved = char_graph.move()

    assert cursor.get() == (2, 1, "z")
    assert moved.find(2, 1, "z") == cursor
    moved.erase_edge_at(cursor)
    assert moved.find(2, 1, "z") == moved.end()


def test_move_assign_transfers_contents(char_graph):
    """Test move assignment keeps the target object and empties the source."""
    expected = char_graph.copy()
    cursor = char_graph.find(2, 1, "z")
    target = Graph()

    result = target.move_assign(char_graph)

    assert result is target
    assert target == expected
    assert char_graph.empty()
    assert cursor.get() == (2, 1, "z")
    target.erase_edge_at(cursor)
    assert target.find(2, 1, "z") == target.end()


def test_move_assign_old_cursors_stay_foreign_to_source():
    """Test cursors of the assigned-to graph never compare equal to the source's."""
    target = Graph([1])
    source = Graph.from_edges([(5, 5, 1)])
    old_end = target.end()
    old_begin = target.begin()

    target.move_assign(source)

    assert old_end != source.end()
    assert old_begin != source.begin()
    assert old_end != target.end()
    assert source.empty()
    assert source.begin() == source.end()


def test_moved_from_graph_is_reusable(char_graph):
    """Test that the source of a move can be filled again independently."""
    moved = char_graph.move()

    char_graph.insert_node(7)
    char_graph.insert_edge(7, 7, "x")

    assert char_graph.nodes() == [7]
    assert not moved.is_node(7)
