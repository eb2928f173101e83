"""
    Errors raised by the graph model and the edit history.

    Every error is recoverable: an operation that raises leaves the graph,
    the identifier allocators and the history exactly as they were.
    The single exception is ``IdentifierExhausted``, which callers are
    expected to let propagate.
"""
from typing import Any


class GraphError(Exception):
    """Base class for all graph model errors."""
    pass


class NotFound(GraphError, LookupError):
    """Raised when a node or edge identifier does not exist."""

    def __init__(self, kind: str, identifier: Any, message: str = ""):
        self.kind = kind
        self.identifier = identifier
        super().__init__(message or f"{kind.capitalize()} {identifier} not found.")


class InvalidEdgeEndpoint(NotFound):
    """Raised when an edge references a node that does not exist."""

    def __init__(self, role: str, identifier: Any):
        self.role = role
        super().__init__(
            "node",
            identifier,
            f"{role.capitalize()} node {identifier} not found.",
        )


class DuplicateIdentifier(GraphError, ValueError):
    """Raised when restoring an entity onto an identifier that is still live."""

    def __init__(self, kind: str, identifier: Any):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind.capitalize()} {identifier} already exists.")


class IdentifierExhausted(GraphError, OverflowError):
    """Raised when an identifier namespace has no ids left to issue."""
    pass


class HistoryError(GraphError):
    """Base class for undo / redo boundary errors."""
    pass


class NothingToUndo(HistoryError):
    """Raised when undo is requested with an empty history."""

    def __init__(self):
        super().__init__("Nothing to undo.")


class NothingToRedo(HistoryError):
    """Raised when redo is requested with nothing undone."""

    def __init__(self):
        super().__init__("Nothing to redo.")
