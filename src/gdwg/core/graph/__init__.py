"""
Graph module for the gdwg package.

This module provides the generic directed weighted graph container with support for:
- Ordered node and edge storage with logarithmic lookups
- Parallel edges distinguished by weight, and self-loops
- Node replacement and merging with edge rewriting
- Bidirectional cursors that survive unrelated mutations and moves
- A deterministic textual rendering
"""

import copy as _copy
import logging
from typing import Any, Dict, Generic, Iterable, Iterator, List, Tuple

from ..exceptions import InvalidCursorError, PreconditionViolationError
from ..graph_operations.serialization import GraphSerializer
from ..models.edge import Edge
from ..models.node import NodeSlot
from ..types import E, N
from .cursor import EdgeCursor
from .edges import EdgeSet
from .nodes import NodeSet

logger = logging.getLogger(__name__)


class Graph(Generic[N, E]):
    """
    Directed weighted graph over ordered node and weight types.

    The graph stores distinct nodes and distinct (src, dst, weight) edges. Both
    are kept sorted: nodes by value, edges lexicographically by src, then dst,
    then weight. Node and weight values are treated as immutable once stored.

    Operations that require their node arguments to exist raise
    ``PreconditionViolationError`` before changing anything, so a failed call
    leaves the graph as it was.

    Attributes:
        _nodes (NodeSet): Node storage
        _edges (EdgeSet): Edge storage, referencing slots of ``_nodes``
    """

    def __init__(self, nodes: Iterable[N] = ()):
        """
        Initialize the graph, optionally with nodes.

        Args:
            nodes (Iterable[N]): Initial node values; duplicates collapse
        """
        self._nodes = NodeSet()
        self._edges = EdgeSet()
        for value in nodes:
            self._nodes.add(value)

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[N, N, E]]) -> "Graph[N, E]":
        """
        Create a graph from (src, dst, weight) triples.

        Endpoints are inserted as nodes when missing, then each edge is inserted.

        Args:
            edges (Iterable[Tuple[N, N, E]]): Edge triples

        Returns:
            Graph[N, E]: New graph containing the endpoints and edges
        """
        graph = cls()
        for src, dst, weight in edges:
            graph.insert_node(src)
            graph.insert_node(dst)
            graph.insert_edge(src, dst, weight)
        return graph

    def _require_nodes(self, operation: str, *values: N) -> List[NodeSlot]:
        """Slots of ``values``, raising the operation's precondition error if any is missing."""
        slots = [self._nodes.find(value) for value in values]
        if any(slot is None for slot in slots):
            raise PreconditionViolationError.for_operation(operation)
        return slots

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    def insert_node(self, value: N) -> bool:
        """
        Add a node.

        Args:
            value (N): Node value

        Returns:
            bool: True if added, False if the node already existed
        """
        return self._nodes.add(value)

    def insert_edge(self, src: N, dst: N, weight: E) -> bool:
        """
        Add an edge between two existing nodes.

        Args:
            src (N): Source node
            dst (N): Destination node
            weight (E): Edge weight

        Returns:
            bool: True if added, False if an identical edge already existed

        Raises:
            PreconditionViolationError: If src or dst is not a node
        """
        src_slot, dst_slot = self._require_nodes("insert_edge", src, dst)
        return self._edges.add(src_slot, dst_slot, weight)

    def replace_node(self, old_data: N, new_data: N) -> bool:
        """
        Replace a node by a new value, carrying its edges over.

        Args:
            old_data (N): Node to replace
            new_data (N): Replacement value

        Returns:
            bool: True if replaced, False if ``new_data`` is already a node

        Raises:
            PreconditionViolationError: If ``old_data`` is not a node
        """
        self._require_nodes("replace_node", old_data)
        if new_data in self._nodes:
            return False
        self._nodes.add(new_data)
        self.merge_replace_node(old_data, new_data)
        return True

    def merge_replace_node(self, old_data: N, new_data: N) -> None:
        """
        Merge one node into another.

        Every edge incident on ``old_data`` is redirected to ``new_data`` and
        ``old_data`` is removed. Edges that become identical are coalesced.

        Args:
            old_data (N): Node to merge away
            new_data (N): Node receiving its edges

        Raises:
            PreconditionViolationError: If either value is not a node
        """
        old_slot, new_slot = self._require_nodes("merge_replace_node", old_data, new_data)
        if old_slot is new_slot:
            return
        self._nodes.discard(old_data)
        rewritten, coalesced = self._edges.rehome(old_slot, new_slot)
        logger.debug(
            "Merged node %r into %r: %d edges rewritten, %d coalesced",
            old_data,
            new_data,
            rewritten,
            coalesced,
        )

    def erase_node(self, value: N) -> bool:
        """
        Remove a node and every edge incident on it.

        Args:
            value (N): Node to remove

        Returns:
            bool: True if removed, False if it was not a node
        """
        slot = self._nodes.discard(value)
        if slot is None:
            return False
        removed = self._edges.remove_incident(slot)
        logger.debug("Erased node %r with %d incident edges", value, removed)
        return True

    def erase_edge(self, src: N, dst: N, weight: E) -> bool:
        """
        Remove an edge by value.

        Returns:
            bool: True if removed, False if no such edge existed

        Raises:
            PreconditionViolationError: If src or dst is not a node
        """
        self._require_nodes("erase_edge", src, dst)
        return self._edges.discard(src, dst, weight)

    def erase_edge_at(self, cursor: EdgeCursor) -> EdgeCursor:
        """
        Remove the edge a cursor designates.

        Costs O(log |E|): the cursor holds its edge, not a position, so the edge
        is located again before removal.

        Args:
            cursor (EdgeCursor): Dereferenceable cursor into this graph

        Returns:
            EdgeCursor: Cursor at the edge that followed the removed one, or ``end()``

        Raises:
            InvalidCursorError: If the cursor is not dereferenceable in this graph
        """
        record = cursor._record_in(self._edges)
        if record is None:
            raise InvalidCursorError("cannot erase through the end cursor")
        return EdgeCursor(self._edges, self._edges.erase(record))

    def erase_edge_range(self, first: EdgeCursor, last: EdgeCursor) -> EdgeCursor:
        """
        Remove the edges in the half-open range [first, last).

        Args:
            first (EdgeCursor): First edge to remove
            last (EdgeCursor): Position to stop at

        Returns:
            EdgeCursor: A cursor equal to ``last``

        Raises:
            InvalidCursorError: If the range is not valid in this graph
        """
        start = first._record_in(self._edges)
        stop = last._record_in(self._edges)
        self._edges.erase_range(start, stop)
        return last.copy()

    def clear(self) -> None:
        """Remove all nodes and edges."""
        self._edges.clear()
        self._nodes.clear()
        logger.debug("Cleared graph")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def is_node(self, value: N) -> bool:
        """Check if a node exists in the graph."""
        return value in self._nodes

    def empty(self) -> bool:
        """Check if the graph has no nodes."""
        return len(self._nodes) == 0

    def is_connected(self, src: N, dst: N) -> bool:
        """
        Check if at least one edge goes from src to dst.

        Raises:
            PreconditionViolationError: If src or dst is not a node
        """
        self._require_nodes("is_connected", src, dst)
        return next(self._edges.between(src, dst), None) is not None

    def nodes(self) -> List[N]:
        """
        Get all nodes.

        Returns:
            List[N]: Node values in ascending order
        """
        return self._nodes.values()

    def weights(self, src: N, dst: N) -> List[E]:
        """
        Get the weights of the edges from src to dst.

        Returns:
            List[E]: Weights in ascending order

        Raises:
            PreconditionViolationError: If src or dst is not a node
        """
        self._require_nodes("weights", src, dst)
        return [record.weight for record in self._edges.between(src, dst)]

    def find(self, src: N, dst: N, weight: E) -> EdgeCursor:
        """
        Locate an edge.

        Returns:
            EdgeCursor: Cursor at the edge, or ``end()`` if it does not exist
        """
        return EdgeCursor(self._edges, self._edges.find(src, dst, weight))

    def connections(self, src: N) -> List[N]:
        """
        Get the nodes src has outgoing edges to.

        Returns:
            List[N]: Distinct destination nodes in ascending order

        Raises:
            PreconditionViolationError: If src is not a node
        """
        self._require_nodes("connections", src)
        lowest, highest = self._nodes.first().value, self._nodes.last().value
        result: List[N] = []
        for record in self._edges.from_source(src, lowest, highest):
            dst = record.dst.value
            # Runs of equal dst are contiguous
            if not result or result[-1] != dst:
                result.append(dst)
        return result

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    # ------------------------------------------------------------------
    # Range access
    # ------------------------------------------------------------------

    def begin(self) -> EdgeCursor:
        """Cursor at the first edge, equal to ``end()`` when there are no edges."""
        return EdgeCursor(self._edges, self._edges.first())

    def end(self) -> EdgeCursor:
        """Cursor one past the last edge."""
        return EdgeCursor(self._edges, None)

    def __iter__(self) -> Iterator[Edge]:
        """Iterate over edges in ascending (src, dst, weight) order."""
        return (record.to_edge() for record in self._edges)

    def __reversed__(self) -> Iterator[Edge]:
        return (record.to_edge() for record in reversed(self._edges))

    def __contains__(self, value: Any) -> bool:
        return value in self._nodes

    # ------------------------------------------------------------------
    # Copy and move
    # ------------------------------------------------------------------

    def _fill_from(self, nodes: List[N], edges: Iterable[Tuple[N, N, E]]) -> None:
        for value in nodes:
            self._nodes.add(value)
        for src, dst, weight in edges:
            self.insert_edge(src, dst, weight)

    def copy(self) -> "Graph[N, E]":
        """
        Create an independent graph with the same nodes and edges.

        Stored values are shared, not copied; use ``copy.deepcopy`` to copy them.
        """
        clone = type(self)()
        clone._fill_from(self.nodes(), self._edges.keys())
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Graph[N, E]":
        clone = type(self)()
        clone._fill_from(
            _copy.deepcopy(self.nodes(), memo), _copy.deepcopy(self._edges.keys(), memo)
        )
        return clone

    def assign(self, other: "Graph[N, E]") -> "Graph[N, E]":
        """
        Replace this graph's contents with a copy of another's.

        Cursors into this graph's previous edges become dangling.

        Returns:
            Graph[N, E]: self
        """
        if self is other or self == other:
            return self
        nodes, edges = other.nodes(), other._edges.keys()
        self.clear()
        self._fill_from(nodes, edges)
        return self

    def move(self) -> "Graph[N, E]":
        """
        Transfer this graph's contents to a new graph.

        This graph becomes empty. Cursors obtained from it keep designating the
        same edges, which now belong to the returned graph.

        Returns:
            Graph[N, E]: Graph owning the nodes and edges
        """
        moved = type(self)()
        moved._nodes, self._nodes = self._nodes, moved._nodes
        moved._edges, self._edges = self._edges, moved._edges
        logger.debug("Moved graph with %d nodes and %d edges", moved.node_count(), moved.edge_count())
        return moved

    def move_assign(self, other: "Graph[N, E]") -> "Graph[N, E]":
        """
        Take over another graph's contents, leaving it empty.

        Cursors into this graph's previous edges become dangling; cursors into
        ``other`` now walk this graph. ``other`` is left with fresh storage, so
        no earlier cursor of either graph refers to it.

        Returns:
            Graph[N, E]: self
        """
        if self is other:
            return self
        self.clear()
        self._nodes, other._nodes = other._nodes, NodeSet()
        self._edges, other._edges = other._edges, EdgeSet()
        return self

    # ------------------------------------------------------------------
    # Comparison and rendering
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Graph):
            return NotImplemented
        if len(self._nodes) != len(other._nodes) or len(self._edges) != len(other._edges):
            return False
        return self._nodes.values() == other._nodes.values() and (
            self._edges.keys() == other._edges.keys()
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return GraphSerializer(self).to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={self.node_count()}, edges={self.edge_count()})"


__all__ = ["Graph", "EdgeCursor"]
