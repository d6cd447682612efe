"""Set structures used by the graph algorithms."""

from monograph.sets.disjoint_set import DisjointSet

__all__ = ["DisjointSet"]
