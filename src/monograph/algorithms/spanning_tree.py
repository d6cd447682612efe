"""Kruskal minimum spanning tree (forest)."""

import time
from collections.abc import Mapping
from typing import Any

from monograph.algorithms.shortest_path import edge_cost
from monograph.audit.logger import AuditLogger
from monograph.graph.undirected import UndirectedGraph
from monograph.sets.disjoint_set import DisjointSet

__all__ = ["kruskal", "spanning_tree_cost"]


def kruskal(
    graph: UndirectedGraph,
    edge_costs: Mapping[Any, float],
    *,
    logger: AuditLogger | None = None,
) -> UndirectedGraph:
    """Build a minimum spanning forest of ``graph``.

    Edges are taken cheapest first (ties keep insertion order) and kept
    whenever they join two different components. The result is a spanning
    tree iff ``graph`` is connected.

    Parameters
    ----------
    graph : UndirectedGraph
        Input graph; left unchanged.
    edge_costs : Mapping[UndirectedEdge, float]
        Cost of every edge in ``graph``.
    logger : AuditLogger | None, optional
        Audit logger. If None, no logging.

    Returns
    -------
    UndirectedGraph
        New graph with every vertex of ``graph`` and the chosen edges.

    Raises
    ------
    TypeError
        If ``graph`` is not an UndirectedGraph.
    MissingEdgeCostError
        If any edge of ``graph`` has no cost entry.
    """
    if not isinstance(graph, UndirectedGraph):
        raise TypeError(f"kruskal requires an UndirectedGraph, got {type(graph).__name__}")

    # Price every edge up front so a missing cost fails before any work
    priced = [(edge_cost(edge_costs, edge), edge) for edge in graph.all_edges()]

    start_time = time.perf_counter()
    if logger:
        logger.algorithm_started("kruskal", vertices=len(graph), edges=len(priced))

    priced.sort(key=lambda entry: entry[0])

    tree = UndirectedGraph()
    components = DisjointSet()
    for vertex in graph.vertices():
        tree.add_vertex(vertex)
        components.add(vertex)

    target_edges = max(len(graph) - 1, 0)
    for _, edge in priced:
        if tree.edge_count == target_edges:
            break
        if components.same_set(edge.start, edge.end):
            continue
        tree.add_edge(edge)
        components.union(edge.start, edge.end)

    if logger:
        logger.algorithm_finished(
            "kruskal",
            duration_seconds=time.perf_counter() - start_time,
            counters={"tree_edges": tree.edge_count, "components": components.count},
        )

    return tree


def spanning_tree_cost(tree: UndirectedGraph, edge_costs: Mapping[Any, float]) -> float:
    """Return the total cost of all edges in ``tree``.

    Raises
    ------
    MissingEdgeCostError
        If an edge of ``tree`` has no cost entry.
    """
    return sum(edge_cost(edge_costs, edge) for edge in tree.all_edges())
