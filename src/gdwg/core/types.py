"""
Core type definitions and protocols.

This module provides the type variables and protocols shared across the graph
container so that node and weight types are described in one place.
"""

from typing import Any, Iterator, List, Protocol, Tuple, TypeVar


class SupportsTotalOrder(Protocol):
    """Values with a strict total order compatible with equality."""

    def __lt__(self, other: Any) -> bool: ...

    def __eq__(self, other: Any) -> bool: ...


N = TypeVar("N", bound=SupportsTotalOrder)  # Node value type
E = TypeVar("E", bound=SupportsTotalOrder)  # Edge weight type

# Sort key of a stored edge: (src, dst, weight)
EdgeKey = Tuple[Any, Any, Any]


class GraphProtocol(Protocol):
    """Protocol defining the read-only graph operations."""

    def nodes(self) -> List[Any]:
        """Get all nodes in ascending order."""
        ...

    def is_node(self, value: Any) -> bool:
        """Check if a node exists."""
        ...

    def __iter__(self) -> Iterator[Tuple[Any, Any, Any]]:
        """Iterate over edges in ascending (src, dst, weight) order."""
        ...
