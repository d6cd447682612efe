"""Read, validate and convert graph documents.

A graph document is a JSON object describing one graph:

    {"directed": true,
     "vertices": ["a", "b"],
     "edges": [{"start": "a", "end": "b", "cost": 3.0}]}

Documents are validated against the bundled JSON schema before use.
"""

import json
from collections.abc import Mapping
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

from monograph.algorithms.shortest_path import edge_cost
from monograph.document.models import EdgeSpec, GraphDocument
from monograph.graph import DirectedGraph, Edge, UndirectedEdge, UndirectedGraph
from monograph.graph.base import AdjacencyGraph

__all__ = [
    "DocumentError",
    "load_schema",
    "parse_document",
    "load_document",
    "build_graph",
    "graph_to_document",
]

_SCHEMA_NAME = "graph_document.schema.json"


class DocumentError(ValueError):
    """Raised when a graph document is malformed."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
        errors: list[str] | None = None,
    ) -> None:
        """Initialize document error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File the document was read from.
        errors : list[str] | None, optional
            Individual schema violations.
        """
        super().__init__(message)
        self.file = file
        self.errors = errors or []


@cache
def load_schema() -> dict[str, Any]:
    """Load the bundled graph document JSON schema."""
    schema_file = resources.files("monograph.document") / "schemas" / _SCHEMA_NAME
    return json.loads(schema_file.read_text(encoding="utf-8"))


def _format_error(error: jsonschema.ValidationError) -> str:
    location = "/".join(str(part) for part in error.absolute_path) or "<root>"
    return f"{location}: {error.message}"


def parse_document(data: Any, file: str | None = None) -> GraphDocument:
    """Validate a decoded JSON value and convert it to a GraphDocument.

    Parameters
    ----------
    data : Any
        Decoded JSON value.
    file : str | None, optional
        Source file, used in error messages.

    Returns
    -------
    GraphDocument
        Typed document.

    Raises
    ------
    DocumentError
        If ``data`` does not match the schema.
    """
    validator = jsonschema.Draft202012Validator(load_schema())
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))

    if errors:
        messages = [_format_error(error) for error in errors]
        prefix = f"Invalid graph document {file}" if file else "Invalid graph document"
        raise DocumentError(f"{prefix}: {'; '.join(messages)}", file=file, errors=messages)

    return GraphDocument.from_dict(data)


def load_document(path: str | Path) -> GraphDocument:
    """Read and validate a graph document file.

    Parameters
    ----------
    path : str | Path
        Path to a JSON file.

    Returns
    -------
    GraphDocument
        Typed document.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    DocumentError
        If the file is not valid JSON or does not match the schema.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DocumentError(f"Malformed JSON in {file_path}: {e}", file=str(file_path)) from e

    return parse_document(data, file=str(file_path))


def build_graph(document: GraphDocument) -> tuple[AdjacencyGraph, dict[Any, float]]:
    """Build a graph and its edge cost mapping from a document.

    Directed documents produce a DirectedGraph keyed by Edge. Undirected
    documents produce an UndirectedGraph keyed by UndirectedEdge; a
    repeated undirected edge is ignored and keeps its first cost.

    Parameters
    ----------
    document : GraphDocument
        Validated document.

    Returns
    -------
    tuple[AdjacencyGraph, dict[EdgeLike, float]]
        Graph and edge → cost mapping.

    Raises
    ------
    DuplicateVertexError, DuplicateEdgeError, VertexNotFoundError
        Propagated from the graph when the document is inconsistent.
    """
    graph: AdjacencyGraph = DirectedGraph() if document.directed else UndirectedGraph()
    edge_costs: dict[Any, float] = {}

    for vertex in document.vertices:
        graph.add_vertex(vertex)

    for entry in document.edges:
        if document.directed:
            edge: Any = Edge(entry.start, entry.end)
        else:
            edge = UndirectedEdge(entry.start, entry.end)
        graph.add_edge(edge)
        edge_costs.setdefault(edge, entry.cost)

    return graph, edge_costs


def graph_to_document(graph: AdjacencyGraph, edge_costs: Mapping[Any, float]) -> GraphDocument:
    """Describe ``graph`` as a document, pricing edges from ``edge_costs``.

    Raises
    ------
    MissingEdgeCostError
        If an edge of ``graph`` has no cost entry.
    """
    return GraphDocument(
        directed=graph.is_directed,
        vertices=tuple(graph.vertices()),
        edges=tuple(
            EdgeSpec(edge.start, edge.end, edge_cost(edge_costs, edge))
            for edge in graph.all_edges()
        ),
    )
