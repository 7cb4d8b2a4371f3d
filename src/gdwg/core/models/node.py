"""
Node models for the graph container.

A stored node lives in a ``NodeSlot``. The slot is the node's identity inside the
graph: edges reference slots rather than copies of the value, so inserting or
removing unrelated nodes never requires edges to be rewritten.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class NodeSlot:
    """
    Storage cell owning one node value.

    Slots compare by identity. The held value must not change while the slot is
    in a node set, since the set is ordered by it.

    Attributes:
        value: The node value
    """

    value: Any
