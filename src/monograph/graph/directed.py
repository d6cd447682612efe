"""Directed adjacency-list graph."""

from collections.abc import Iterator
from typing import Any

from monograph.errors import DuplicateEdgeError, EdgeNotFoundError
from monograph.graph.base import AdjacencyGraph
from monograph.graph.edges import EdgeLike, Neighbor

__all__ = ["DirectedGraph"]


class DirectedGraph(AdjacencyGraph):
    """Graph mapping each vertex to an ordered list of outgoing edges.

    Edges are stored exactly as given, so ``(a, b)`` and ``(b, a)`` are two
    different edges. Both endpoints must be added as vertices first.

    Examples
    --------
        >>> from monograph import DirectedGraph, Edge
        >>> graph = DirectedGraph()
        >>> graph.add_vertex("a")
        >>> graph.add_vertex("b")
        >>> graph.add_edge(Edge("a", "b"))
        >>> graph.contains_edge(Edge("b", "a"))
        False
    """

    is_directed = True

    @property
    def edge_count(self) -> int:
        """Number of directed edges in the graph."""
        return sum(len(edges) for edges in self._adjacency.values())

    def _check_new_edge(self, edge: EdgeLike) -> None:
        """Raise unless ``edge`` can be added."""
        self._require_endpoints(edge, "add edge to")

        if edge in self._adjacency[edge.start]:
            raise DuplicateEdgeError(f"Tried to add edge {edge} to the graph twice", edge=edge)

    def add_edge(self, edge: EdgeLike) -> None:
        """Add a directed edge.

        Parameters
        ----------
        edge : EdgeLike
            Edge from ``edge.start`` to ``edge.end``.

        Raises
        ------
        VertexNotFoundError
            If either endpoint is not in the graph.
        DuplicateEdgeError
            If the edge already exists.
        """
        self._check_new_edge(edge)

        self._adjacency[edge.start].append(edge)
        self._touch()

    add_directed_edge = add_edge

    def add_bidirectional_edge(self, edge: EdgeLike) -> None:
        """Add ``edge`` and its reverse as two directed edges.

        Both directions are validated before either is stored.

        Raises
        ------
        VertexNotFoundError
            If either endpoint is not in the graph.
        DuplicateEdgeError
            If either direction already exists.
        """
        reverse = edge.reversed()

        self._check_new_edge(edge)
        self._check_new_edge(reverse)

        self._adjacency[edge.start].append(edge)
        if reverse != edge:
            self._adjacency[reverse.start].append(reverse)
        self._touch()

    def contains_edge(self, edge: EdgeLike) -> bool:
        """Return True if exactly ``(edge.start, edge.end)`` is stored."""
        outgoing = self._adjacency.get(edge.start)
        return outgoing is not None and edge in outgoing

    def edges(self, vertex: Any) -> Iterator[Any]:
        """Iterate over the edges leaving ``vertex``.

        Raises
        ------
        VertexNotFoundError
            If ``vertex`` is not in the graph.
        """
        return self._guarded(self._require_vertex(vertex, "iterate edges of"))

    def neighbors(self, vertex: Any) -> Iterator[Neighbor]:
        """Iterate over ``Neighbor(edge.end, edge)`` for each outgoing edge."""
        return (Neighbor(edge.end, edge) for edge in self.edges(vertex))

    def all_edges(self) -> Iterator[Any]:
        """Iterate over every edge, grouped by start vertex."""
        return self._guarded(
            edge for outgoing in self._adjacency.values() for edge in outgoing
        )

    def remove_vertex(self, vertex: Any) -> None:
        """Remove ``vertex`` and every edge that starts or ends at it.

        Scans every adjacency list, so the cost grows with the total number
        of edges.

        Raises
        ------
        VertexNotFoundError
            If ``vertex`` is not in the graph.
        """
        self._require_vertex(vertex, "remove")

        del self._adjacency[vertex]
        for start, outgoing in self._adjacency.items():
            self._adjacency[start] = [edge for edge in outgoing if edge.end != vertex]
        self._touch()

    def remove_edge(self, edge: EdgeLike) -> None:
        """Remove the directed edge ``(edge.start, edge.end)``.

        Raises
        ------
        VertexNotFoundError
            If ``edge.start`` is not in the graph.
        EdgeNotFoundError
            If the vertex exists but the edge does not.
        """
        outgoing = self._require_vertex(edge.start, "remove edge from")

        try:
            outgoing.remove(edge)
        except ValueError:
            raise EdgeNotFoundError(f"Edge {edge} is not in the graph", edge=edge) from None
        self._touch()

    def remove_bidirectional_edge(self, edge: EdgeLike) -> None:
        """Remove ``edge`` and its reverse.

        Nothing is removed unless both directions exist.

        Raises
        ------
        VertexNotFoundError
            If either endpoint is not in the graph.
        EdgeNotFoundError
            If either direction is missing.
        """
        self._require_endpoints(edge, "remove edge from")

        reverse = edge.reversed()
        for candidate in (edge, reverse):
            if not self.contains_edge(candidate):
                raise EdgeNotFoundError(
                    f"Edge {candidate} is not in the graph", edge=candidate
                )

        self.remove_edge(edge)
        if reverse != edge:
            self.remove_edge(reverse)
