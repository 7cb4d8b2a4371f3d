"""
Core domain models package for the graph container.

This package provides the node slot and edge record structures the container
stores, and the edge triple it exposes.
"""

from .edge import Edge, EdgeRecord
from .node import NodeSlot

__all__ = [
    # Node models
    "NodeSlot",
    # Edge models
    "Edge",
    "EdgeRecord",
]
