"""
Custom exceptions for the graph container.

This module defines the hierarchy of exceptions raised by the graph container.
Each exception type corresponds to a category of misuse: calling an operation
whose preconditions do not hold, or handing the graph a cursor that does not
designate one of its edges.
"""

from typing import Dict

# Explanations appended to "Cannot call gdwg::graph<N, E>::<operation> "
PRECONDITION_MESSAGES: Dict[str, str] = {
    "insert_edge": "when either src or dst node does not exist",
    "replace_node": "on a node that doesn't exist",
    "merge_replace_node": "on old or new data if they don't exist in the graph",
    "erase_edge": "on src or dst if they don't exist in the graph",
    "is_connected": "if src or dst node don't exist in the graph",
    "weights": "if src or dst node don't exist in the graph",
    "connections": "if src doesn't exist in the graph",
}


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This is the base class of every error the container raises. Catching it
    catches all graph misuse without masking unrelated failures, such as a
    ``TypeError`` raised by comparing values that are not mutually ordered.

    Examples:
        * Precondition violations on node arguments
        * Dereferencing an end or dangling cursor
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class PreconditionViolationError(GraphOperationError):
    """
    Raised when an operation is called with arguments it does not accept.

    The message is fixed per operation (see ``PRECONDITION_MESSAGES``) and is
    reported verbatim by ``str()``. The graph is left unchanged.

    Attributes:
        operation (str): Name of the operation that was called
        explanation (str): Human-readable reason the call was rejected

    Examples:
        * ``insert_edge`` with a src or dst that is not a node
        * ``connections`` on a node that does not exist
    """

    def __init__(self, operation: str, explanation: str):
        self.operation = operation
        self.explanation = explanation
        super().__init__(f"Cannot call gdwg::graph<N, E>::{operation} {explanation}")

    def __str__(self) -> str:
        return Exception.__str__(self)

    @classmethod
    def for_operation(cls, operation: str) -> "PreconditionViolationError":
        """
        Build the error for one of the checked operations.

        Args:
            operation (str): Operation name, a key of ``PRECONDITION_MESSAGES``

        Returns:
            PreconditionViolationError: Error carrying the operation's message
        """
        return cls(operation, PRECONDITION_MESSAGES[operation])


class InvalidCursorError(GraphOperationError):
    """
    Raised when a cursor cannot be used for the requested operation.

    Examples:
        * Dereferencing the end cursor or a default-constructed cursor
        * Dereferencing or moving a cursor whose edge was removed
        * Erasing through a cursor obtained from another graph
        * Erasing a range whose end precedes its start
    """
