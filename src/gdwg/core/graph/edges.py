"""
Ordered edge storage.

This module provides the EdgeSet, which owns the edge records of a graph and
keeps them sorted by the lexicographic (src, dst, weight) key. One ordering gives
uniqueness, full enumeration, and the prefix queries used by the accessors:
edges sharing a src form a contiguous run, and edges sharing (src, dst) form a
contiguous run inside it.

Prefix runs are located by bisecting against synthetic bounding keys built from
the smallest and largest weight ever inserted, so weights never need a default
or sentinel value.
"""

import logging
from operator import attrgetter
from typing import Any, Iterator, List, Optional, Tuple

from sortedcontainers import SortedKeyList

from ..exceptions import InvalidCursorError
from ..models.edge import EdgeRecord
from ..models.node import NodeSlot
from ..types import EdgeKey

logger = logging.getLogger(__name__)


class EdgeSet:
    """
    Ordered set of edge records keyed by (src, dst, weight).

    Records are never mutated while stored. Removing a record marks it dead so
    cursors still designating it can be detected.

    Attributes:
        _records (SortedKeyList): Edge records in ascending key order
        _min_weight: Smallest weight inserted since the set was last empty
        _max_weight: Largest weight inserted since the set was last empty
    """

    def __init__(self) -> None:
        self._records: SortedKeyList = SortedKeyList(key=attrgetter("key"))
        self._min_weight: Any = None
        self._max_weight: Any = None

    def _index(self, key: EdgeKey) -> Optional[int]:
        """Position of the record with ``key``, or None if absent."""
        index = self._records.bisect_key_left(key)
        if index < len(self._records) and self._records[index].key == key:
            return index
        return None

    def _update_weight_bounds(self, weight: Any) -> None:
        # Bounds only widen; removals cannot invalidate them.
        if not self._records:
            self._min_weight = weight
            self._max_weight = weight
            return
        if weight < self._min_weight:
            self._min_weight = weight
        if self._max_weight < weight:
            self._max_weight = weight

    def position(self, record: EdgeRecord) -> int:
        """
        Get the index of a stored record.

        Args:
            record (EdgeRecord): Record to locate

        Returns:
            int: Index of the record in edge order

        Raises:
            InvalidCursorError: If the record was removed or belongs to another set
        """
        if not record.alive:
            raise InvalidCursorError("cursor designates an edge that has been removed")
        index = self._records.bisect_key_left(record.key)
        if index >= len(self._records) or self._records[index] is not record:
            raise InvalidCursorError("cursor designates an edge of another graph")
        return index

    def add(self, src: NodeSlot, dst: NodeSlot, weight: Any) -> bool:
        """
        Add an edge between two stored node slots.

        Args:
            src (NodeSlot): Slot of the source node
            dst (NodeSlot): Slot of the destination node
            weight: Edge weight

        Returns:
            bool: True if added, False if an equal edge was already stored
        """
        record = EdgeRecord(src, dst, weight)
        if self._index(record.key) is not None:
            return False
        self._update_weight_bounds(weight)
        self._records.add(record)
        return True

    def find(self, src: Any, dst: Any, weight: Any) -> Optional[EdgeRecord]:
        """
        Get the record matching an edge triple.

        Args:
            src: Source node value
            dst: Destination node value
            weight: Edge weight

        Returns:
            Optional[EdgeRecord]: The record if stored, None otherwise
        """
        index = self._index((src, dst, weight))
        return None if index is None else self._records[index]

    def discard(self, src: Any, dst: Any, weight: Any) -> bool:
        """
        Remove the edge matching a triple if present.

        Returns:
            bool: True if an edge was removed
        """
        index = self._index((src, dst, weight))
        if index is None:
            return False
        self._records.pop(index).alive = False
        return True

    def erase(self, record: EdgeRecord) -> Optional[EdgeRecord]:
        """
        Remove a stored record.

        Args:
            record (EdgeRecord): Record to remove

        Returns:
            Optional[EdgeRecord]: The record that followed it, None if it was last

        Raises:
            InvalidCursorError: If the record is not stored in this set
        """
        index = self.position(record)
        del self._records[index]
        record.alive = False
        return self._records[index] if index < len(self._records) else None

    def erase_range(self, first: Optional[EdgeRecord], last: Optional[EdgeRecord]) -> int:
        """
        Remove the records in the half-open interval [first, last).

        Args:
            first (Optional[EdgeRecord]): First record to remove, None for the end
            last (Optional[EdgeRecord]): Record to stop at, None for the end

        Returns:
            int: Number of records removed

        Raises:
            InvalidCursorError: If either bound is not stored here or last precedes first
        """
        start = len(self._records) if first is None else self.position(first)
        stop = len(self._records) if last is None else self.position(last)
        if stop < start:
            raise InvalidCursorError("erase range ends before it starts")
        for record in self._records.islice(start, stop):
            record.alive = False
        del self._records[start:stop]
        if stop > start:
            logger.debug("Erased %d edges in range [%d, %d)", stop - start, start, stop)
        return stop - start

    def successor(self, record: Optional[EdgeRecord]) -> Optional[EdgeRecord]:
        """
        Get the record following ``record`` in edge order.

        Returns:
            Optional[EdgeRecord]: The next record, None if ``record`` is the last

        Raises:
            InvalidCursorError: If ``record`` is None (the end) or not stored here
        """
        if record is None:
            raise InvalidCursorError("cannot advance a cursor past the end")
        index = self.position(record) + 1
        return self._records[index] if index < len(self._records) else None

    def predecessor(self, record: Optional[EdgeRecord]) -> EdgeRecord:
        """
        Get the record preceding ``record`` (None meaning the end) in edge order.

        Raises:
            InvalidCursorError: If there is no preceding record
        """
        index = len(self._records) if record is None else self.position(record)
        if index == 0:
            raise InvalidCursorError("cannot retreat a cursor before the first edge")
        return self._records[index - 1]

    def first(self) -> Optional[EdgeRecord]:
        """First record in edge order, None if the set is empty."""
        return self._records[0] if self._records else None

    def between(self, src: Any, dst: Any) -> Iterator[EdgeRecord]:
        """
        Iterate over the edges from ``src`` to ``dst`` in ascending weight order.

        Args:
            src: Source node value
            dst: Destination node value
        """
        if not self._records:
            return iter(())
        return self._records.irange_key(
            (src, dst, self._min_weight), (src, dst, self._max_weight)
        )

    def from_source(self, src: Any, lowest: Any, highest: Any) -> Iterator[EdgeRecord]:
        """
        Iterate over the edges leaving ``src`` in ascending (dst, weight) order.

        Args:
            src: Source node value
            lowest: Smallest node value in the graph
            highest: Largest node value in the graph
        """
        if not self._records:
            return iter(())
        return self._records.irange_key(
            (src, lowest, self._min_weight), (src, highest, self._max_weight)
        )

    def remove_incident(self, slot: NodeSlot) -> int:
        """
        Remove every edge that starts or ends at a node.

        Args:
            slot (NodeSlot): Slot of the node

        Returns:
            int: Number of edges removed
        """
        doomed = [record for record in self._records if record.touches(slot)]
        for record in doomed:
            self._records.remove(record)
            record.alive = False
        return len(doomed)

    def rehome(self, old: NodeSlot, new: NodeSlot) -> Tuple[int, int]:
        """
        Redirect every edge incident on ``old`` to ``new``.

        Rewriting changes the sort key, so affected records are taken out,
        rewritten, then put back. A rewritten record whose key is already
        stored is dropped, leaving exactly one edge with that key.

        Args:
            old (NodeSlot): Slot being replaced
            new (NodeSlot): Slot taking over its edges

        Returns:
            Tuple[int, int]: (edges rewritten, edges coalesced away)
        """
        moved = [record for record in self._records if record.touches(old)]
        for record in moved:
            self._records.remove(record)

        coalesced = 0
        for record in moved:
            if record.src is old:
                record.src = new
            if record.dst is old:
                record.dst = new
            if self._index(record.key) is None:
                self._records.add(record)
            else:
                record.alive = False
                coalesced += 1
        return len(moved), coalesced

    def keys(self) -> List[EdgeKey]:
        """All edge keys in ascending order."""
        return [record.key for record in self._records]

    def clear(self) -> None:
        for record in self._records:
            record.alive = False
        self._records.clear()

    def __iter__(self) -> Iterator[EdgeRecord]:
        return iter(self._records)

    def __reversed__(self) -> Iterator[EdgeRecord]:
        return reversed(self._records)

    def __len__(self) -> int:
        return len(self._records)
