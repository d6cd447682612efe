"""Integration tests running the CLI over graph documents end to end."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from monograph.cli.main import cli

ROAD_NETWORK = {
    "directed": False,
    "vertices": ["depot", "north", "south", "east", "west", "island"],
    "edges": [
        {"start": "depot", "end": "north", "cost": 4},
        {"start": "depot", "end": "south", "cost": 2},
        {"start": "south", "end": "north", "cost": 1},
        {"start": "north", "end": "east", "cost": 5},
        {"start": "south", "end": "east", "cost": 8},
        {"start": "east", "end": "west", "cost": 3},
        {"start": "west", "end": "depot", "cost": 10},
    ],
}


def _read_events(path: Path) -> list[dict]:
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.mark.integration
def test_shortest_path_with_output_and_log(
    write_document: Callable[..., Path], tmp_path: Path
) -> None:
    """Test a full shortest-path run writes both the result and the audit log."""
    document = write_document(ROAD_NETWORK)
    output_file = tmp_path / "out" / "paths.json"
    log_file = tmp_path / "logs" / "events.jsonl"

    result = CliRunner().invoke(
        cli,
        [
            "shortest-path",
            str(document),
            "--source",
            "depot",
            "-o",
            str(output_file),
            "--log",
            str(log_file),
        ],
    )

    assert result.exit_code == 0, result.output

    data = json.loads(output_file.read_text())
    costs = {entry["vertex"]: entry["cost"] for entry in data["costs"]}
    assert costs == {
        "depot": 0.0,
        "north": 3.0,
        "south": 2.0,
        "east": 8.0,
        "west": 10.0,
        "island": None,
    }
    paths = {entry["vertex"]: entry["path"] for entry in data["paths"]}
    assert paths["east"] == ["depot", "south", "north", "east"]
    assert "island" not in paths

    events = _read_events(log_file)
    assert [e["event"] for e in events] == [
        "run_started",
        "algorithm_started",
        "algorithm_finished",
        "run_finished",
    ]
    assert events[2]["data"]["counters"]["reached"] == 5


@pytest.mark.integration
def test_spanning_tree_output_is_a_valid_document(
    write_document: Callable[..., Path], tmp_path: Path
) -> None:
    """Test the tree written by spanning-tree can be fed back into the CLI."""
    document = write_document(ROAD_NETWORK)
    output_file = tmp_path / "tree.json"
    runner = CliRunner()

    result = runner.invoke(cli, ["spanning-tree", str(document), "-o", str(output_file)])

    assert result.exit_code == 0, result.output
    data = json.loads(output_file.read_text())
    assert data["total_cost"] == 11.0
    assert data["connected"] is False

    tree_file = write_document(data["tree"], name="tree_document.json")
    info = runner.invoke(cli, ["info", str(tree_file)])

    assert info.exit_code == 0
    assert info.output.strip() == "undirected graph: 6 vertices, 4 edges"

    paths = runner.invoke(cli, ["shortest-path", str(tree_file), "-s", "west"])

    assert paths.exit_code == 0
    costs = {entry["vertex"]: entry["cost"] for entry in json.loads(paths.output)["costs"]}
    assert costs["depot"] == 11.0
