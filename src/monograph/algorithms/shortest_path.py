"""Dijkstra single-source shortest paths."""

import heapq
import itertools
import math
import time
from collections.abc import Mapping
from typing import Any

from monograph.algorithms.models import ShortestPaths
from monograph.audit.logger import AuditLogger
from monograph.errors import MissingEdgeCostError, VertexNotFoundError
from monograph.graph.base import AdjacencyGraph

__all__ = ["dijkstra", "edge_cost"]


def edge_cost(edge_costs: Mapping[Any, float], edge: Any) -> float:
    """Look up the cost of ``edge``.

    Parameters
    ----------
    edge_costs : Mapping[EdgeLike, float]
        Edge → cost mapping.
    edge : EdgeLike
        Edge to price.

    Returns
    -------
    float
        Cost of the edge.

    Raises
    ------
    MissingEdgeCostError
        If the mapping has no entry for ``edge``.
    """
    try:
        return edge_costs[edge]
    except KeyError:
        raise MissingEdgeCostError(f"No cost given for edge {edge}", edge=edge) from None


def _checked_cost(edge_costs: Mapping[Any, float], edge: Any) -> float:
    cost = edge_cost(edge_costs, edge)
    if not math.isfinite(cost) or cost < 0:
        raise ValueError(f"Edge cost must be finite and non-negative, got {cost} for edge {edge}")
    return cost


def dijkstra(
    graph: AdjacencyGraph,
    edge_costs: Mapping[Any, float],
    source: Any,
    *,
    logger: AuditLogger | None = None,
) -> ShortestPaths:
    """Compute the cheapest path cost from ``source`` to every vertex.

    Vertices are settled in increasing cost order; each settled vertex
    relaxes its outgoing edges, replacing a neighbor's cost and predecessor
    only on a strictly cheaper path. Ties between equally cheap vertices
    are settled in the order they were reached. The input graph is not
    modified.

    Parameters
    ----------
    graph : AdjacencyGraph
        Directed or undirected graph. Undirected edges are traversed in
        both directions.
    edge_costs : Mapping[EdgeLike, float]
        Non-negative, finite cost of every edge reachable from ``source``.
    source : Vertex
        Start vertex.
    logger : AuditLogger | None, optional
        Audit logger. If None, no logging.

    Returns
    -------
    ShortestPaths
        Costs for every vertex (``math.inf`` when unreachable) and
        predecessors for every reached vertex.

    Raises
    ------
    VertexNotFoundError
        If ``source`` is not in the graph.
    MissingEdgeCostError
        If a reachable edge has no cost entry.
    ValueError
        If a reachable edge has a negative or non-finite cost.

    Examples
    --------
        >>> from monograph import DirectedGraph, Edge, dijkstra
        >>> graph = DirectedGraph()
        >>> for v in "ab":
        ...     graph.add_vertex(v)
        >>> graph.add_edge(Edge("a", "b"))
        >>> dijkstra(graph, {Edge("a", "b"): 2.0}, "a").costs["b"]
        2.0
    """
    if not graph.contains_vertex(source):
        raise VertexNotFoundError(
            f"Shortest-path source {source!r} is not in the graph", vertex=source
        )

    start_time = time.perf_counter()
    if logger:
        logger.algorithm_started(
            "dijkstra",
            source=source,
            vertices=len(graph),
            edges=graph.edge_count,
        )

    costs: dict[Any, float] = {vertex: math.inf for vertex in graph.vertices()}
    predecessors: dict[Any, Any] = {source: source}
    costs[source] = 0.0

    # Heap entries carry an insertion counter so vertices are never compared
    counter = itertools.count()
    heap: list[tuple[float, int, Any]] = [(0.0, next(counter), source)]
    settled: set[Any] = set()
    relaxations = 0

    while heap:
        current_cost, _, current = heapq.heappop(heap)
        if current in settled:
            continue
        settled.add(current)

        for neighbor, edge in graph.neighbors(current):
            candidate = current_cost + _checked_cost(edge_costs, edge)
            if candidate < costs[neighbor]:
                costs[neighbor] = candidate
                predecessors[neighbor] = current
                relaxations += 1
                heapq.heappush(heap, (candidate, next(counter), neighbor))

    if logger:
        logger.algorithm_finished(
            "dijkstra",
            duration_seconds=time.perf_counter() - start_time,
            counters={"reached": len(settled), "relaxations": relaxations},
        )

    return ShortestPaths(source=source, costs=costs, predecessors=predecessors)
