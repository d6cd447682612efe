"""JSON graph documents: schema validation and graph construction."""

from monograph.document.loader import (
    DocumentError,
    build_graph,
    graph_to_document,
    load_document,
    load_schema,
    parse_document,
)
from monograph.document.models import DEFAULT_EDGE_COST, EdgeSpec, GraphDocument

__all__ = [
    "DEFAULT_EDGE_COST",
    "DocumentError",
    "EdgeSpec",
    "GraphDocument",
    "build_graph",
    "graph_to_document",
    "load_document",
    "load_schema",
    "parse_document",
]
