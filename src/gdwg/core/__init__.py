"""Core graph functionality."""

from .exceptions import (
    PRECONDITION_MESSAGES,
    GraphOperationError,
    InvalidCursorError,
    PreconditionViolationError,
)
from .models import Edge, EdgeRecord, NodeSlot
from .types import GraphProtocol, SupportsTotalOrder
from .graph import EdgeCursor, Graph
from .graph_operations.serialization import GraphSerializer

__all__ = [
    "Edge",
    "EdgeCursor",
    "EdgeRecord",
    "Graph",
    "GraphOperationError",
    "GraphProtocol",
    "GraphSerializer",
    "InvalidCursorError",
    "NodeSlot",
    "PRECONDITION_MESSAGES",
    "PreconditionViolationError",
    "SupportsTotalOrder",
]
