"""Undirected adjacency-list graph."""

from collections.abc import Iterator
from typing import Any

from monograph.errors import DuplicateEdgeError
from monograph.graph.base import AdjacencyGraph
from monograph.graph.edges import EdgeLike, Neighbor, UndirectedEdge

__all__ = ["UndirectedGraph"]


class UndirectedGraph(AdjacencyGraph):
    """Graph mapping each vertex to its ``Neighbor(vertex, edge)`` entries.

    Every edge is stored once, as an :class:`UndirectedEdge`, in a canonical
    edge set; both endpoints list each other as neighbors, referencing that
    same stored edge. Plain directed edges passed in are converted.

    Re-adding an existing edge (in either orientation) through
    :meth:`add_edge` is silently ignored, while
    :meth:`add_bidirectional_edge` rejects it.

    Examples
    --------
        >>> from monograph import UndirectedEdge, UndirectedGraph
        >>> graph = UndirectedGraph()
        >>> for v in (1, 2):
        ...     graph.add_vertex(v)
        >>> graph.add_edge(UndirectedEdge(1, 2))
        >>> graph.contains_edge(UndirectedEdge(2, 1))
        True
    """

    is_directed = False

    def __init__(self) -> None:
        super().__init__()
        # Insertion-ordered set of stored edges
        self._edge_set: dict[UndirectedEdge, None] = {}

    @property
    def edge_count(self) -> int:
        """Number of undirected edges in the graph."""
        return len(self._edge_set)

    def add_edge(self, edge: EdgeLike) -> None:
        """Add an undirected edge, ignoring it if already present.

        Parameters
        ----------
        edge : EdgeLike
            Edge between ``edge.start`` and ``edge.end``.

        Raises
        ------
        VertexNotFoundError
            If either endpoint is not in the graph.
        """
        self._require_endpoints(edge, "add edge to")

        stored = UndirectedEdge.from_edge(edge)
        if stored in self._edge_set:
            return

        self._insert(stored)

    def add_bidirectional_edge(self, edge: EdgeLike) -> None:
        """Add ``edge`` as a single undirected edge, rejecting duplicates.

        Raises
        ------
        VertexNotFoundError
            If either endpoint is not in the graph.
        DuplicateEdgeError
            If the edge (in either orientation) already exists.
        """
        self._require_endpoints(edge, "add edge to")

        stored = UndirectedEdge.from_edge(edge)
        if stored in self._edge_set:
            raise DuplicateEdgeError(f"Tried to add edge {stored} to the graph twice", edge=stored)

        self._insert(stored)

    def _insert(self, edge: UndirectedEdge) -> None:
        self._edge_set[edge] = None
        self._adjacency[edge.start].append(Neighbor(edge.end, edge))
        if edge.end != edge.start:
            self._adjacency[edge.end].append(Neighbor(edge.start, edge))
        self._touch()

    def contains_edge(self, edge: EdgeLike) -> bool:
        """Return True if the edge is stored, in either orientation."""
        return UndirectedEdge.from_edge(edge) in self._edge_set

    def vertex_has_edge(self, vertex: Any, edge: EdgeLike) -> bool:
        """Return True if ``edge`` is in the adjacency list of ``vertex``.

        Raises
        ------
        VertexNotFoundError
            If ``vertex`` is not in the graph.
        """
        wanted = UndirectedEdge.from_edge(edge)
        return any(
            neighbor.edge == wanted
            for neighbor in self._require_vertex(vertex, "look up edges of")
        )

    def vertex_has_neighbor(self, vertex: Any, neighbor_vertex: Any) -> bool:
        """Return True if ``vertex`` and ``neighbor_vertex`` share an edge.

        Raises
        ------
        VertexNotFoundError
            If ``vertex`` is not in the graph.
        """
        return any(
            neighbor.destination == neighbor_vertex
            for neighbor in self._require_vertex(vertex, "look up neighbors of")
        )

    def neighbors(self, vertex: Any) -> Iterator[Neighbor]:
        """Iterate over the neighbors of ``vertex`` in edge insertion order.

        Raises
        ------
        VertexNotFoundError
            If ``vertex`` is not in the graph.
        """
        return self._guarded(self._require_vertex(vertex, "iterate neighbors of"))

    def edges(self, vertex: Any) -> Iterator[Any]:
        """Iterate over the edges incident to ``vertex``."""
        return (neighbor.edge for neighbor in self.neighbors(vertex))

    def all_edges(self) -> Iterator[Any]:
        """Iterate over every edge exactly once, in insertion order."""
        return self._guarded(self._edge_set)
