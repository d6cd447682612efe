"""Edge value types.

Two flavors share one structural contract (:class:`EdgeLike`):

- :class:`Edge` is directed: ``Edge(a, b) != Edge(b, a)``.
- :class:`UndirectedEdge` treats both orientations as the same edge, for
  equality, ordering and hashing alike.

Edges carry no cost; costs live in a separate mapping keyed by edge.
"""

from collections.abc import Hashable
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, NamedTuple, Protocol, runtime_checkable

__all__ = ["Vertex", "EdgeLike", "Edge", "UndirectedEdge", "Neighbor"]

# Vertices are caller-supplied identifiers: hashable and totally ordered.
Vertex = Hashable


@runtime_checkable
class EdgeLike(Protocol):
    """Structural protocol every edge flavor satisfies.

    Attributes
    ----------
    start : Vertex
        First endpoint.
    end : Vertex
        Second endpoint.
    """

    @property
    def start(self) -> Any: ...

    @property
    def end(self) -> Any: ...

    def reversed(self) -> "EdgeLike":
        """Return the edge with its endpoints swapped."""
        ...


@dataclass(frozen=True, order=True)
class Edge:
    """Directed edge from ``start`` to ``end``.

    Equality and ordering are exact on ``(start, end)``: edges sort by
    ``start`` first, then ``end``.

    Attributes
    ----------
    start : Vertex
        Source vertex.
    end : Vertex
        Target vertex.
    """

    start: Any
    end: Any

    def reversed(self) -> "Edge":
        """Return the edge pointing the other way."""
        return Edge(self.end, self.start)

    def __str__(self) -> str:
        return f"{self.start}->{self.end}"


@total_ordering
@dataclass(frozen=True, eq=False)
class UndirectedEdge:
    """Undirected edge between ``start`` and ``end``.

    ``UndirectedEdge(a, b) == UndirectedEdge(b, a)`` and both hash the same.
    Ordering compares the canonical orientation ``(min, max)`` so that it
    stays consistent with equality.

    Attributes
    ----------
    start : Vertex
        Endpoint the edge was constructed from.
    end : Vertex
        Other endpoint.
    """

    start: Any
    end: Any

    @staticmethod
    def from_edge(edge: EdgeLike) -> "UndirectedEdge":
        """Convert any edge-like value to an undirected edge.

        Parameters
        ----------
        edge : EdgeLike
            Edge to convert.

        Returns
        -------
        UndirectedEdge
            ``edge`` itself if already undirected, otherwise a new edge with
            the same endpoints.
        """
        if isinstance(edge, UndirectedEdge):
            return edge
        return UndirectedEdge(edge.start, edge.end)

    def reversed(self) -> "UndirectedEdge":
        """Return the edge with endpoints swapped (equal to ``self``)."""
        return UndirectedEdge(self.end, self.start)

    def canonical(self) -> tuple[Any, Any]:
        """Return the endpoints as ``(smaller, larger)``."""
        if self.end < self.start:
            return (self.end, self.start)
        return (self.start, self.end)

    def other(self, vertex: Any) -> Any:
        """Return the endpoint opposite ``vertex``.

        Parameters
        ----------
        vertex : Vertex
            One of the two endpoints.

        Returns
        -------
        Vertex
            The other endpoint (``vertex`` itself for a self-loop).

        Raises
        ------
        ValueError
            If ``vertex`` is not an endpoint of this edge.
        """
        if vertex == self.start:
            return self.end
        if vertex == self.end:
            return self.start
        raise ValueError(f"{vertex!r} is not an endpoint of {self}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UndirectedEdge):
            return NotImplemented
        return (self.start == other.start and self.end == other.end) or (
            self.start == other.end and self.end == other.start
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UndirectedEdge):
            return NotImplemented
        return self.canonical() < other.canonical()

    def __hash__(self) -> int:
        return hash(frozenset((self.start, self.end)))

    def __str__(self) -> str:
        return f"{self.start}<->{self.end}"


class Neighbor(NamedTuple):
    """Adjacency entry: a neighboring vertex and the edge that reaches it.

    Attributes
    ----------
    destination : Vertex
        Neighboring vertex.
    edge : EdgeLike
        Edge connecting the owning vertex to ``destination``.
    """

    destination: Any
    edge: Any
