"""Error taxonomy for graph, disjoint-set and algorithm operations.

Every error raised by the library derives from :class:`GraphError` and
carries an :class:`ErrorKind`, so callers can either catch a concrete class
or branch on ``error.kind``.
"""

from enum import StrEnum
from typing import Any

__all__ = [
    "ErrorKind",
    "GraphError",
    "DuplicateVertexError",
    "DuplicateItemError",
    "DuplicateEdgeError",
    "VertexNotFoundError",
    "ItemNotFoundError",
    "EdgeNotFoundError",
    "MissingEdgeCostError",
    "GraphModifiedError",
]


class ErrorKind(StrEnum):
    """Kinds of failure reported by the library.

    Attributes
    ----------
    DUPLICATE_VERTEX : str
        A vertex (or disjoint-set item) is already present.
    DUPLICATE_EDGE : str
        An edge is already present.
    VERTEX_NOT_FOUND : str
        A referenced vertex (or disjoint-set item) is absent.
    EDGE_NOT_FOUND : str
        A referenced edge is absent at an existing vertex.
    MISSING_EDGE_COST : str
        An algorithm met an edge with no cost entry.
    GRAPH_MODIFIED : str
        A graph was mutated while one of its iterators was in progress.
    """

    DUPLICATE_VERTEX = "duplicate_vertex"
    DUPLICATE_EDGE = "duplicate_edge"
    VERTEX_NOT_FOUND = "vertex_not_found"
    EDGE_NOT_FOUND = "edge_not_found"
    MISSING_EDGE_COST = "missing_edge_cost"
    GRAPH_MODIFIED = "graph_modified"


class GraphError(Exception):
    """Base class for all library errors."""

    kind: ErrorKind

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize error.

        Parameters
        ----------
        message : str
            Human readable message.
        **context : Any
            Offending values (``vertex``, ``edge``, ``item``), stored as
            attributes for programmatic access.
        """
        super().__init__(message)
        self.context = context
        for name, value in context.items():
            setattr(self, name, value)


class DuplicateVertexError(GraphError):
    """Raised when adding a vertex that already exists."""

    kind = ErrorKind.DUPLICATE_VERTEX


class DuplicateItemError(DuplicateVertexError):
    """Raised when adding an item a disjoint set already holds."""


class DuplicateEdgeError(GraphError):
    """Raised when adding an edge that already exists."""

    kind = ErrorKind.DUPLICATE_EDGE


class VertexNotFoundError(GraphError):
    """Raised when referencing a vertex absent from the graph."""

    kind = ErrorKind.VERTEX_NOT_FOUND


class ItemNotFoundError(VertexNotFoundError):
    """Raised when looking up an item never added to a disjoint set."""


class EdgeNotFoundError(GraphError):
    """Raised when removing an edge that does not exist."""

    kind = ErrorKind.EDGE_NOT_FOUND


class MissingEdgeCostError(GraphError):
    """Raised when an algorithm needs the cost of an edge with no entry."""

    kind = ErrorKind.MISSING_EDGE_COST


class GraphModifiedError(GraphError, RuntimeError):
    """Raised when a graph changes while it is being iterated."""

    kind = ErrorKind.GRAPH_MODIFIED
