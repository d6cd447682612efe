"""Graph containers and edge value types.

Main Components
---------------
- Edge / UndirectedEdge: edge value types
- DirectedGraph: vertex → outgoing edges
- UndirectedGraph: vertex → neighbors, with a canonical edge set
"""

from monograph.graph.base import AdjacencyGraph
from monograph.graph.directed import DirectedGraph
from monograph.graph.edges import Edge, EdgeLike, Neighbor, UndirectedEdge, Vertex
from monograph.graph.undirected import UndirectedGraph

__all__ = [
    "AdjacencyGraph",
    "DirectedGraph",
    "UndirectedGraph",
    "Edge",
    "EdgeLike",
    "Neighbor",
    "UndirectedEdge",
    "Vertex",
]
