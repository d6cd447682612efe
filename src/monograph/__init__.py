"""In-memory graph library: adjacency-list graphs and classic algorithms.

This package provides:
- Edges (monograph.graph.edges): directed and undirected edge values
- Graphs (monograph.graph): directed and undirected adjacency lists
- Sets (monograph.sets): disjoint-set / union-find
- Algorithms (monograph.algorithms): Dijkstra and Kruskal
- Documents (monograph.document): JSON graph documents
- Engine (monograph.engine): run orchestration
- Audit (monograph.audit): JSONL event logging
- CLI (monograph.cli): command-line interface

Graphs and their iterators are not thread-safe, and a graph must not be
mutated while one of its iterators is in progress.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from monograph.algorithms import (
    ShortestPaths,
    dijkstra,
    kruskal,
    spanning_tree_cost,
)
from monograph.errors import (
    DuplicateEdgeError,
    DuplicateItemError,
    DuplicateVertexError,
    EdgeNotFoundError,
    ErrorKind,
    GraphError,
    GraphModifiedError,
    ItemNotFoundError,
    MissingEdgeCostError,
    VertexNotFoundError,
)
from monograph.graph import (
    DirectedGraph,
    Edge,
    EdgeLike,
    Neighbor,
    UndirectedEdge,
    UndirectedGraph,
)
from monograph.sets import DisjointSet

__all__ = [
    "__version__",
    "__license__",
    "Edge",
    "UndirectedEdge",
    "EdgeLike",
    "Neighbor",
    "DirectedGraph",
    "UndirectedGraph",
    "DisjointSet",
    "ShortestPaths",
    "dijkstra",
    "kruskal",
    "spanning_tree_cost",
    "ErrorKind",
    "GraphError",
    "DuplicateVertexError",
    "DuplicateItemError",
    "DuplicateEdgeError",
    "VertexNotFoundError",
    "ItemNotFoundError",
    "EdgeNotFoundError",
    "MissingEdgeCostError",
    "GraphModifiedError",
]
