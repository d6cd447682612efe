"""Result types for graph algorithms."""

import math
from dataclasses import dataclass, field
from typing import Any

from monograph.errors import VertexNotFoundError

__all__ = ["ShortestPaths"]


@dataclass(frozen=True)
class ShortestPaths:
    """Single-source shortest-path result.

    Attributes
    ----------
    source : Vertex
        Vertex the distances are measured from.
    costs : dict[Vertex, float]
        Minimum cumulative cost for every vertex of the graph;
        ``math.inf`` for vertices the source cannot reach.
    predecessors : dict[Vertex, Vertex]
        Previous vertex on one cheapest path, for reached vertices only.
        The source maps to itself.
    """

    source: Any
    costs: dict[Any, float] = field(default_factory=dict)
    predecessors: dict[Any, Any] = field(default_factory=dict)

    def is_reachable(self, vertex: Any) -> bool:
        """Return True if ``vertex`` has a finite cost from the source."""
        return vertex in self.predecessors

    def path_to(self, target: Any) -> list[Any]:
        """Reconstruct the cheapest path from the source to ``target``.

        Parameters
        ----------
        target : Vertex
            Destination vertex.

        Returns
        -------
        list[Vertex]
            Vertices from source to ``target`` inclusive, or an empty list
            when ``target`` is unreachable.

        Raises
        ------
        VertexNotFoundError
            If ``target`` was not part of the graph.
        """
        if target not in self.costs:
            raise VertexNotFoundError(f"Vertex {target!r} is not in the graph", vertex=target)

        if not self.is_reachable(target):
            return []

        path = [target]
        while path[-1] != self.source:
            path.append(self.predecessors[path[-1]])
        path.reverse()
        return path

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary.

        Unreachable costs become ``None``; vertices are kept as given.

        Returns
        -------
        dict[str, Any]
            Dictionary representation.
        """
        return {
            "source": self.source,
            "costs": [
                {"vertex": vertex, "cost": None if math.isinf(cost) else cost}
                for vertex, cost in self.costs.items()
            ],
            "predecessors": [
                {"vertex": vertex, "predecessor": predecessor}
                for vertex, predecessor in self.predecessors.items()
            ],
        }
