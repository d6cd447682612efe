"""Pytest configuration and fixtures for test suite."""

import json
import sys
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from monograph import (  # noqa: E402
    DirectedGraph,
    Edge,
    UndirectedEdge,
    UndirectedGraph,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"

DIJKSTRA_COSTS: dict[Edge, float] = {
    Edge("a", "d"): 3.0,
    Edge("a", "b"): 20.0,
    Edge("a", "e"): 2.0,
    Edge("d", "c"): 2.0,
    Edge("c", "b"): 2.0,
    Edge("e", "d"): 2.0,
}

KRUSKAL_COSTS: dict[UndirectedEdge, float] = {
    UndirectedEdge(1, 2): 5.0,
    UndirectedEdge(2, 3): 5.0,
    UndirectedEdge(3, 4): 5.0,
    UndirectedEdge(5, 1): 10.0,
    UndirectedEdge(5, 2): 1.0,
    UndirectedEdge(5, 3): 10.0,
    UndirectedEdge(5, 4): 5.0,
}


@pytest.fixture
def make_directed() -> Callable[..., DirectedGraph]:
    """Factory for directed graphs from vertices and ``(start, end)`` pairs."""

    def _factory(
        vertices: Iterable[Any],
        edges: Iterable[tuple[Any, Any]] = (),
        *,
        bidirectional: bool = False,
    ) -> DirectedGraph:
        graph = DirectedGraph()
        for vertex in vertices:
            graph.add_vertex(vertex)
        for start, end in edges:
            if bidirectional:
                graph.add_bidirectional_edge(Edge(start, end))
            else:
                graph.add_edge(Edge(start, end))
        return graph

    return _factory


@pytest.fixture
def make_undirected() -> Callable[..., UndirectedGraph]:
    """Factory for undirected graphs from vertices and ``(start, end)`` pairs."""

    def _factory(
        vertices: Iterable[Any],
        edges: Iterable[tuple[Any, Any]] = (),
    ) -> UndirectedGraph:
        graph = UndirectedGraph()
        for vertex in vertices:
            graph.add_vertex(vertex)
        for start, end in edges:
            graph.add_edge(UndirectedEdge(start, end))
        return graph

    return _factory


@pytest.fixture
def dijkstra_graph(make_directed: Callable[..., DirectedGraph]) -> DirectedGraph:
    """Five-vertex directed graph with a known shortest-path tree from 'a'."""
    return make_directed("abcde", [(e.start, e.end) for e in DIJKSTRA_COSTS])


@pytest.fixture
def kruskal_graph(make_undirected: Callable[..., UndirectedGraph]) -> UndirectedGraph:
    """Five-vertex undirected graph whose minimum spanning tree weighs 16."""
    return make_undirected(range(1, 6), [(e.start, e.end) for e in KRUSKAL_COSTS])


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[..., Path]:
    """Write a graph document dict to a JSON file and return its path."""

    def _write(data: dict[str, Any], name: str = "graph.json") -> Path:
        path = tmp_path / name
        with path.open("w") as f:
            json.dump(data, f)
        return path

    return _write


@pytest.fixture
def dijkstra_costs() -> dict[Edge, float]:
    """Edge costs for ``dijkstra_graph``."""
    return dict(DIJKSTRA_COSTS)


@pytest.fixture
def kruskal_costs() -> dict[UndirectedEdge, float]:
    """Edge costs for ``kruskal_graph``."""
    return dict(KRUSKAL_COSTS)
