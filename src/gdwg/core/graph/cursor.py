"""
Bidirectional cursors over a graph's edges.

A cursor designates one edge record of a specific edge set, or that set's end
position. It tracks the record itself rather than an index: inserting or
removing other edges does not disturb it, merging nodes carries it along with
its relocated edge, and moving a graph leaves it usable on the destination.
"""

from typing import Optional

from ..exceptions import InvalidCursorError
from ..models.edge import Edge, EdgeRecord
from .edges import EdgeSet


class EdgeCursor:
    """
    Position over the ordered edges of a graph.

    A default-constructed cursor belongs to no graph; it cannot be dereferenced
    or moved, and compares equal only to other default-constructed cursors.

    Attributes:
        _edges (Optional[EdgeSet]): Edge set the cursor walks
        _record (Optional[EdgeRecord]): Designated record, None for the end
    """

    __slots__ = ("_edges", "_record")

    def __init__(self, edges: Optional[EdgeSet] = None, record: Optional[EdgeRecord] = None):
        self._edges = edges
        self._record = record

    def _require_edges(self) -> EdgeSet:
        if self._edges is None:
            raise InvalidCursorError("cursor does not belong to a graph")
        return self._edges

    def _record_in(self, edges: EdgeSet) -> Optional[EdgeRecord]:
        """Designated record, after checking the cursor walks ``edges``."""
        if self._edges is not edges:
            raise InvalidCursorError("cursor does not belong to this graph")
        return self._record

    @property
    def is_end(self) -> bool:
        """Whether the cursor is at the end position."""
        return self._record is None

    def get(self) -> Edge:
        """
        Dereference the cursor.

        Returns:
            Edge: The designated (src, dst, weight) triple

        Raises:
            InvalidCursorError: If the cursor is at the end, default-constructed,
                or its edge has been removed
        """
        self._require_edges()
        if self._record is None:
            raise InvalidCursorError("cannot dereference the end cursor")
        if not self._record.alive:
            raise InvalidCursorError("cursor designates an edge that has been removed")
        return self._record.to_edge()

    @property
    def value(self) -> Edge:
        """The designated triple; see ``get``."""
        return self.get()

    def advance(self) -> "EdgeCursor":
        """Move to the next edge in place and return self."""
        self._record = self._require_edges().successor(self._record)
        return self

    def retreat(self) -> "EdgeCursor":
        """Move to the previous edge in place and return self."""
        self._record = self._require_edges().predecessor(self._record)
        return self

    def next(self) -> "EdgeCursor":
        """Cursor at the next edge; self is unchanged."""
        return self.copy().advance()

    def prev(self) -> "EdgeCursor":
        """Cursor at the previous edge; self is unchanged."""
        return self.copy().retreat()

    def copy(self) -> "EdgeCursor":
        return EdgeCursor(self._edges, self._record)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdgeCursor):
            return NotImplemented
        return self._edges is other._edges and self._record is other._record

    def __hash__(self) -> int:
        return hash((id(self._edges), id(self._record)))

    def __repr__(self) -> str:
        if self._edges is None:
            return "EdgeCursor()"
        if self._record is None:
            return "EdgeCursor(end)"
        return f"EdgeCursor({self._record!r})"
