"""Tests for run configuration and the algorithm runner."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from monograph.engine import RunConfig, RunResult, run_algorithm
from monograph.engine.runner import resolve_vertex

GRAPHS_DIR = Path(__file__).parent.parent / "fixtures" / "graphs"
DIJKSTRA_DOC = GRAPHS_DIR / "dijkstra_reference.json"
KRUSKAL_DOC = GRAPHS_DIR / "kruskal_reference.json"


def _read_events(path: Path) -> list[dict]:
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


# ---------------------------------------------------------------------------
# RunConfig
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_config_rejects_unknown_algorithm() -> None:
    """Test only known algorithms are accepted."""
    with pytest.raises(ValueError, match="algorithm must be one of"):
        RunConfig(algorithm="prim")


@pytest.mark.unit
def test_config_requires_source_for_shortest_path() -> None:
    """Test shortest_path needs a source vertex."""
    with pytest.raises(ValueError, match="source is required"):
        RunConfig(algorithm="shortest_path")


@pytest.mark.unit
def test_config_normalizes_paths() -> None:
    """Test path fields are converted to Path and serialized as strings."""
    config = RunConfig(algorithm="spanning_tree", output_path="out.json", log_path="run.jsonl")

    assert config.output_path == Path("out.json")
    assert config.log_path == Path("run.jsonl")
    assert config.to_dict() == {
        "algorithm": "spanning_tree",
        "source": None,
        "output_path": "out.json",
        "log_path": "run.jsonl",
    }


@pytest.mark.unit
def test_result_to_dict() -> None:
    """Test RunResult defaults serialize cleanly."""
    result = RunResult(success=False, algorithm="spanning_tree", error_message="boom")

    assert result.to_dict() == {
        "success": False,
        "algorithm": "spanning_tree",
        "result": {},
        "output_files": {},
        "error_message": "boom",
    }


# ---------------------------------------------------------------------------
# resolve_vertex
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "vertices", "expected"),
    [
        ("a", ("a", "b"), "a"),
        ("3", (1, 2, 3), 3),
        ("-1", (-1, 0), -1),
        ("3", ("3", 3), "3"),
        ("x", (1, 2), "x"),
        ("7", (1, 2), "7"),
        ("--5", (5,), "--5"),
    ],
)
def test_resolve_vertex(value: str, vertices: tuple, expected: object) -> None:
    """Test command-line strings are matched to document vertices."""
    assert resolve_vertex(value, vertices) == expected
    assert type(resolve_vertex(value, vertices)) is type(expected)


# ---------------------------------------------------------------------------
# run_algorithm
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_run_shortest_path() -> None:
    """Test a shortest-path run returns costs, predecessors and paths."""
    result = run_algorithm(DIJKSTRA_DOC, RunConfig(algorithm="shortest_path", source="a"))

    assert result.success
    assert result.error_message is None
    costs = {entry["vertex"]: entry["cost"] for entry in result.result["costs"]}
    assert costs == {"a": 0.0, "b": 7.0, "c": 5.0, "d": 3.0, "e": 2.0}
    predecessors = {e["vertex"]: e["predecessor"] for e in result.result["predecessors"]}
    assert predecessors == {"a": "a", "b": "c", "c": "d", "d": "a", "e": "a"}
    paths = {entry["vertex"]: entry["path"] for entry in result.result["paths"]}
    assert paths["b"] == ["a", "d", "c", "b"]
    assert result.output_files == {}


@pytest.mark.unit
def test_run_shortest_path_reports_unreachable(write_document: Callable[..., Path]) -> None:
    """Test unreachable vertices get a null cost and no path."""
    path = write_document(
        {"directed": True, "vertices": ["a", "b"], "edges": [{"start": "b", "end": "a"}]}
    )

    result = run_algorithm(path, RunConfig(algorithm="shortest_path", source="a"))

    assert result.success
    assert {"vertex": "b", "cost": None} in result.result["costs"]
    assert [entry["vertex"] for entry in result.result["paths"]] == ["a"]


@pytest.mark.unit
def test_run_shortest_path_with_integer_vertices() -> None:
    """Test a string source resolves against integer vertices."""
    result = run_algorithm(KRUSKAL_DOC, RunConfig(algorithm="shortest_path", source="1"))

    assert result.success
    assert result.result["source"] == 1
    costs = {entry["vertex"]: entry["cost"] for entry in result.result["costs"]}
    assert costs == {1: 0.0, 2: 5.0, 3: 10.0, 4: 11.0, 5: 6.0}


@pytest.mark.unit
def test_run_spanning_tree() -> None:
    """Test a spanning-tree run returns the tree as a document."""
    result = run_algorithm(KRUSKAL_DOC, RunConfig(algorithm="spanning_tree"))

    assert result.success
    assert result.result["total_cost"] == 16.0
    assert result.result["connected"] is True
    tree = result.result["tree"]
    assert tree["directed"] is False
    assert tree["vertices"] == [1, 2, 3, 4, 5]
    assert len(tree["edges"]) == 4


@pytest.mark.unit
def test_run_spanning_tree_disconnected(write_document: Callable[..., Path]) -> None:
    """Test a disconnected graph is reported as not connected."""
    path = write_document(
        {"directed": False, "vertices": [1, 2, 3], "edges": [{"start": 1, "end": 2}]}
    )

    result = run_algorithm(path, RunConfig(algorithm="spanning_tree"))

    assert result.success
    assert result.result["connected"] is False
    assert result.result["total_cost"] == 1.0


@pytest.mark.unit
@pytest.mark.parametrize(
    ("document", "config", "error_type"),
    [
        (DIJKSTRA_DOC, RunConfig(algorithm="spanning_tree"), "TypeError"),
        (DIJKSTRA_DOC, RunConfig(algorithm="shortest_path", source="z"), "VertexNotFoundError"),
        (GRAPHS_DIR / "missing.json", RunConfig(algorithm="spanning_tree"), "FileNotFoundError"),
    ],
)
def test_run_failures_are_reported(document: Path, config: RunConfig, error_type: str) -> None:
    """Test errors become a failed RunResult instead of raising."""
    result = run_algorithm(document, config)

    assert not result.success
    assert result.result == {}
    assert result.error_message.startswith(f"{error_type}: ")


@pytest.mark.unit
def test_run_invalid_document_reported(write_document: Callable[..., Path]) -> None:
    """Test schema errors surface as DocumentError."""
    path = write_document({"directed": True, "vertices": []})

    result = run_algorithm(path, RunConfig(algorithm="spanning_tree"))

    assert not result.success
    assert result.error_message.startswith("DocumentError: ")


@pytest.mark.unit
def test_run_writes_output_file(tmp_path: Path) -> None:
    """Test output_path receives the JSON result."""
    output_path = tmp_path / "out" / "tree.json"
    config = RunConfig(algorithm="spanning_tree", output_path=output_path)

    result = run_algorithm(KRUSKAL_DOC, config)

    assert result.success
    assert result.output_files == {"result": str(output_path)}
    assert json.loads(output_path.read_text()) == result.result


@pytest.mark.unit
def test_run_writes_audit_log(tmp_path: Path) -> None:
    """Test log_path receives the run and algorithm events in order."""
    log_path = tmp_path / "events.jsonl"
    config = RunConfig(algorithm="shortest_path", source="a", log_path=log_path)

    run_algorithm(DIJKSTRA_DOC, config)

    events = _read_events(log_path)
    assert [e["event"] for e in events] == [
        "run_started",
        "algorithm_started",
        "algorithm_finished",
        "run_finished",
    ]
    assert len({e["run_id"] for e in events}) == 1
    assert events[0]["data"]["command"] == "shortest_path"
    assert events[-1]["data"]["status"] == "success"


@pytest.mark.unit
def test_run_failure_logged(tmp_path: Path) -> None:
    """Test failures log a run_error event before run_finished."""
    log_path = tmp_path / "events.jsonl"
    config = RunConfig(algorithm="spanning_tree", log_path=log_path)

    run_algorithm(DIJKSTRA_DOC, config)

    events = _read_events(log_path)
    assert [e["event"] for e in events] == ["run_started", "run_error", "run_finished"]
    assert events[1]["level"] == "ERROR"
    assert events[1]["stage"] == "run"
    assert events[1]["data"]["error"].startswith("TypeError: ")
    assert events[2]["data"]["status"] == "failed"
