"""Graph algorithms built on the adjacency-list containers."""

from monograph.algorithms.models import ShortestPaths
from monograph.algorithms.shortest_path import dijkstra, edge_cost
from monograph.algorithms.spanning_tree import kruskal, spanning_tree_cost

__all__ = [
    "ShortestPaths",
    "dijkstra",
    "edge_cost",
    "kruskal",
    "spanning_tree_cost",
]
