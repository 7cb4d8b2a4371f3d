"""
Edge models for the graph container.

This module defines the public edge triple handed out to callers and the record
the edge set stores internally.
"""

from dataclasses import dataclass
from typing import Any, NamedTuple

from ..types import EdgeKey
from .node import NodeSlot


class Edge(NamedTuple):
    """
    A directed weighted edge as seen by callers.

    Compares equal to the plain tuple ``(src, dst, weight)``.

    Attributes:
        src: Source node value
        dst: Destination node value
        weight: Edge weight
    """

    src: Any
    dst: Any
    weight: Any


@dataclass(eq=False, repr=False)
class EdgeRecord:
    """
    Stored edge referencing the slots of its endpoints.

    Records compare by identity; ordering is done on ``key``. A record is
    ``alive`` while it belongs to an edge set. Cursors designate records, so
    a removed record is marked dead rather than reused.

    Attributes:
        src (NodeSlot): Slot of the source node
        dst (NodeSlot): Slot of the destination node
        weight: Edge weight
        alive (bool): Whether the record is still stored
    """

    src: NodeSlot
    dst: NodeSlot
    weight: Any
    alive: bool = True

    @property
    def key(self) -> EdgeKey:
        """Sort key: (src value, dst value, weight)."""
        return (self.src.value, self.dst.value, self.weight)

    def touches(self, slot: NodeSlot) -> bool:
        """Check if either endpoint is the given slot."""
        return self.src is slot or self.dst is slot

    def to_edge(self) -> Edge:
        """Project the record to the public triple."""
        return Edge(self.src.value, self.dst.value, self.weight)

    def __repr__(self) -> str:
        state = "" if self.alive else ", dead"
        return f"EdgeRecord({self.src.value!r}, {self.dst.value!r}, {self.weight!r}{state})"
