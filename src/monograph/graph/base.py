"""Shared vertex storage and iteration guard for adjacency-list graphs."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any

from monograph.errors import DuplicateVertexError, GraphModifiedError, VertexNotFoundError
from monograph.graph.edges import EdgeLike, Neighbor

__all__ = ["AdjacencyGraph"]


class AdjacencyGraph(ABC):
    """Base class holding the vertex → adjacency-list map.

    Subclasses decide what an adjacency entry is (outgoing edges for a
    directed graph, :class:`Neighbor` pairs for an undirected one).

    Iterators returned by this class and its subclasses are lazy views over
    the live structure. Mutating the graph at any point after one is created
    makes its next step raise :class:`GraphModifiedError`.
    """

    is_directed: bool = True

    def __init__(self) -> None:
        self._adjacency: dict[Any, list[Any]] = {}
        self._version = 0

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return self.contains_vertex(vertex)

    def __iter__(self) -> Iterator[Any]:
        return self.vertices()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self)}, edges={self.edge_count})"

    @property
    @abstractmethod
    def edge_count(self) -> int:
        """Number of distinct edges stored in the graph."""

    def add_vertex(self, vertex: Any) -> None:
        """Add a vertex with no edges.

        Parameters
        ----------
        vertex : Vertex
            Vertex identifier.

        Raises
        ------
        DuplicateVertexError
            If the vertex is already in the graph.
        """
        if vertex in self._adjacency:
            raise DuplicateVertexError(
                f"Tried to add vertex {vertex!r} to the graph twice", vertex=vertex
            )

        self._adjacency[vertex] = []
        self._touch()

    def contains_vertex(self, vertex: Any) -> bool:
        """Return True if ``vertex`` is in the graph."""
        return vertex in self._adjacency

    def vertices(self) -> Iterator[Any]:
        """Iterate over all vertices in insertion order."""
        return self._guarded(self._adjacency)

    @abstractmethod
    def edges(self, vertex: Any) -> Iterator[Any]:
        """Iterate over the edges incident to (or leaving) ``vertex``."""

    @abstractmethod
    def neighbors(self, vertex: Any) -> Iterator[Neighbor]:
        """Iterate over ``(destination, edge)`` pairs reachable from ``vertex``."""

    @abstractmethod
    def all_edges(self) -> Iterator[Any]:
        """Iterate over every edge in the graph."""

    @abstractmethod
    def add_edge(self, edge: EdgeLike) -> None:
        """Add ``edge`` to the graph."""

    @abstractmethod
    def contains_edge(self, edge: EdgeLike) -> bool:
        """Return True if ``edge`` is in the graph."""

    def _require_vertex(self, vertex: Any, action: str) -> list[Any]:
        """Return the adjacency list of ``vertex`` or raise VertexNotFoundError."""
        try:
            return self._adjacency[vertex]
        except KeyError:
            raise VertexNotFoundError(
                f"Tried to {action} non-existent vertex {vertex!r}", vertex=vertex
            ) from None

    def _require_endpoints(self, edge: EdgeLike, action: str) -> None:
        self._require_vertex(edge.start, action)
        self._require_vertex(edge.end, action)

    def _touch(self) -> None:
        self._version += 1

    def _guarded(self, iterable: Iterable[Any]) -> Iterator[Any]:
        """Wrap ``iterable`` so it fails once the graph changes after this call.

        The version is captured here rather than on the first ``next()``.
        """
        return self._checked_iter(iter(iterable), self._version)

    def _checked_iter(self, iterator: Iterator[Any], version: int) -> Iterator[Any]:
        while True:
            if self._version != version:
                raise GraphModifiedError(f"{type(self).__name__} changed during iteration")
            try:
                item = next(iterator)
            except StopIteration:
                return
            yield item
