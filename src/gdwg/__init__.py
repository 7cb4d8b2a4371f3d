"""
gdwg - Generic Directed Weighted Graph

This package provides an ordered, generic container for directed weighted graphs.
It includes:

- A graph over any totally ordered node and weight types
- Parallel edges distinguished by weight, and self-loops
- Node replacement and merging with automatic edge rewriting
- Bidirectional edge cursors stable across unrelated mutations
- A deterministic textual rendering

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "gdwg Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("gdwg requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.exceptions import GraphOperationError, InvalidCursorError, PreconditionViolationError
from .core.graph import EdgeCursor, Graph
from .core.models import Edge

__all__ = [
    "Graph",
    "Edge",
    "EdgeCursor",
    "GraphOperationError",
    "InvalidCursorError",
    "PreconditionViolationError",
]
