"""Typed view of a graph document."""

from dataclasses import dataclass
from typing import Any

__all__ = ["DEFAULT_EDGE_COST", "EdgeSpec", "GraphDocument"]

DEFAULT_EDGE_COST = 1.0


@dataclass(frozen=True)
class EdgeSpec:
    """One edge entry of a graph document.

    Attributes
    ----------
    start : Vertex
        First endpoint.
    end : Vertex
        Second endpoint.
    cost : float
        Non-negative edge cost.
    """

    start: Any
    end: Any
    cost: float = DEFAULT_EDGE_COST

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "EdgeSpec":
        """Create EdgeSpec from a validated document entry."""
        return EdgeSpec(
            start=data["start"],
            end=data["end"],
            cost=float(data.get("cost", DEFAULT_EDGE_COST)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"start": self.start, "end": self.end, "cost": self.cost}


@dataclass(frozen=True)
class GraphDocument:
    """A graph as read from (or written to) JSON.

    Attributes
    ----------
    directed : bool
        Whether edges are directed.
    vertices : tuple[Vertex, ...]
        Vertices in declaration order.
    edges : tuple[EdgeSpec, ...]
        Edges in declaration order.
    """

    directed: bool
    vertices: tuple[Any, ...]
    edges: tuple[EdgeSpec, ...]

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "GraphDocument":
        """Create GraphDocument from a validated dictionary."""
        return GraphDocument(
            directed=data["directed"],
            vertices=tuple(data["vertices"]),
            edges=tuple(EdgeSpec.from_dict(edge) for edge in data["edges"]),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "directed": self.directed,
            "vertices": list(self.vertices),
            "edges": [edge.to_dict() for edge in self.edges],
        }
