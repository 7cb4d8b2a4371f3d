"""Graph textual rendering.

This module renders a graph in its fixed human-readable text format. For each
node in ascending order it writes a block::

    <node> (
      <dst> | <weight>
    )

with one indented line per outgoing edge in ascending (dst, weight) order.
An empty graph renders as the empty string.
"""

from typing import Iterator, List, TextIO

from ..types import GraphProtocol


class GraphSerializer:
    """Handles graph rendering operations."""

    def __init__(self, graph: GraphProtocol):
        """Initialize serializer.

        Args:
            graph: Graph to render
        """
        self.graph = graph

    def iter_lines(self) -> Iterator[str]:
        """Yield the rendered lines, each terminated by a newline.

        Edges are consumed in a single merged pass alongside the nodes. Every
        edge's src is a node and both sequences are ascending, so the edges of
        each node are exactly the run at the head of the remaining edges.
        """
        edges = iter(self.graph)
        pending = next(edges, None)
        for node in self.graph.nodes():
            yield f"{node} (\n"
            while pending is not None and pending[0] == node:
                yield f"  {pending[1]} | {pending[2]}\n"
                pending = next(edges, None)
            yield ")\n"

    def to_lines(self) -> List[str]:
        return list(self.iter_lines())

    def to_text(self) -> str:
        """Render the graph to a string.

        Returns:
            Text representation of the graph
        """
        return "".join(self.iter_lines())

    def write(self, stream: TextIO) -> None:
        """Write the rendered graph to a text stream.

        Args:
            stream: Writable text stream
        """
        stream.writelines(self.iter_lines())
