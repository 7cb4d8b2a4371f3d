"""
Ordered node storage.

This module provides the NodeSet, which owns the node slots of a graph and keeps
them sorted by value. Membership and lookup are logarithmic and only rely on the
values' ``<`` and ``==``, so node values need not be hashable.
"""

from operator import attrgetter
from typing import Any, Iterator, List, Optional

from sortedcontainers import SortedKeyList

from ..models.node import NodeSlot


class NodeSet:
    """
    Ordered set of node slots keyed by node value.

    Attributes:
        _slots (SortedKeyList): Node slots in ascending value order
    """

    def __init__(self) -> None:
        self._slots: SortedKeyList = SortedKeyList(key=attrgetter("value"))

    def _index(self, value: Any) -> Optional[int]:
        """Position of the slot holding ``value``, or None if absent."""
        index = self._slots.bisect_key_left(value)
        if index < len(self._slots) and self._slots[index].value == value:
            return index
        return None

    def find(self, value: Any) -> Optional[NodeSlot]:
        """
        Get the slot holding a value.

        Args:
            value: Node value to look up

        Returns:
            Optional[NodeSlot]: The slot if the value is stored, None otherwise
        """
        index = self._index(value)
        return None if index is None else self._slots[index]

    def add(self, value: Any) -> bool:
        """
        Add a node value.

        Args:
            value: Node value to add

        Returns:
            bool: True if added, False if an equal value was already stored
        """
        if self._index(value) is not None:
            return False
        self._slots.add(NodeSlot(value))
        return True

    def discard(self, value: Any) -> Optional[NodeSlot]:
        """
        Remove a node value if present.

        Args:
            value: Node value to remove

        Returns:
            Optional[NodeSlot]: The removed slot, None if the value was absent
        """
        index = self._index(value)
        if index is None:
            return None
        return self._slots.pop(index)

    def first(self) -> NodeSlot:
        """Slot holding the smallest value. The set must not be empty."""
        return self._slots[0]

    def last(self) -> NodeSlot:
        """Slot holding the largest value. The set must not be empty."""
        return self._slots[-1]

    def values(self) -> List[Any]:
        """All node values in ascending order."""
        return [slot.value for slot in self._slots]

    def clear(self) -> None:
        self._slots.clear()

    def __contains__(self, value: Any) -> bool:
        return self._index(value) is not None

    def __iter__(self) -> Iterator[NodeSlot]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)
