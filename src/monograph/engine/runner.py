"""Run a graph algorithm over a graph document.

Flow:
    1. Load and validate the document
    2. Build the graph and its edge costs
    3. Run the configured algorithm
    4. Serialize the result (and optionally write it to disk)

Every failure is reported through ``RunResult.error_message`` rather than
raised, so callers such as the CLI can turn it into an exit status.
"""

import json
import time
import traceback
from pathlib import Path
from typing import Any

from monograph.algorithms import dijkstra, kruskal, spanning_tree_cost
from monograph.audit.helpers import generate_run_id
from monograph.audit.logger import AuditLogger
from monograph.document import build_graph, graph_to_document, load_document
from monograph.engine.config import RunConfig, RunResult
from monograph.graph.base import AdjacencyGraph

__all__ = ["run_algorithm", "resolve_vertex"]


def resolve_vertex(value: Any, vertices: tuple[Any, ...]) -> Any:
    """Match a user-supplied vertex against a document's vertex type.

    Command-line values arrive as strings; an all-digit string names an
    integer vertex when the document has no string vertex spelled the same.

    Parameters
    ----------
    value : Any
        Vertex as given by the user.
    vertices : tuple[Vertex, ...]
        Vertices of the document.

    Returns
    -------
    Any
        The matching vertex, or ``value`` unchanged if nothing matches.
    """
    if value in vertices:
        return value

    if isinstance(value, str) and value.removeprefix("-").isdigit():
        as_int = int(value)
        if as_int in vertices:
            return as_int

    return value


def _shortest_path(
    graph: AdjacencyGraph,
    edge_costs: dict[Any, float],
    source: Any,
    logger: AuditLogger | None,
) -> dict[str, Any]:
    paths = dijkstra(graph, edge_costs, source, logger=logger)
    result = paths.to_dict()
    result["paths"] = [
        {"vertex": vertex, "path": paths.path_to(vertex)}
        for vertex in paths.costs
        if paths.is_reachable(vertex)
    ]
    return result


def _spanning_tree(
    graph: AdjacencyGraph,
    edge_costs: dict[Any, float],
    logger: AuditLogger | None,
) -> dict[str, Any]:
    tree = kruskal(graph, edge_costs, logger=logger)
    return {
        "tree": graph_to_document(tree, edge_costs).to_dict(),
        "total_cost": spanning_tree_cost(tree, edge_costs),
        "connected": len(tree) == 0 or tree.edge_count == len(tree) - 1,
    }


def _write_result(result: dict[str, Any], output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(result, f, indent=2, ensure_ascii=False)
        f.write("\n")


def _run(
    document_path: Path,
    config: RunConfig,
    logger: AuditLogger | None,
) -> RunResult:
    start_time = time.perf_counter()
    if logger:
        logger.run_started(config.algorithm, config.to_dict())

    try:
        document = load_document(document_path)
        graph, edge_costs = build_graph(document)

        if config.algorithm == "shortest_path":
            source = resolve_vertex(config.source, document.vertices)
            result = _shortest_path(graph, edge_costs, source, logger)
        else:
            result = _spanning_tree(graph, edge_costs, logger)

        output_files: dict[str, str] = {}
        if config.output_path is not None:
            _write_result(result, config.output_path)
            output_files["result"] = str(config.output_path)

        if logger:
            logger.run_finished("success", time.perf_counter() - start_time)

        return RunResult(
            success=True,
            algorithm=config.algorithm,
            result=result,
            output_files=output_files,
        )

    except Exception as e:
        error_msg = f"{type(e).__name__}: {e}"
        if logger:
            logger.run_error(error_msg, traceback.format_exc())
            logger.run_finished("failed", time.perf_counter() - start_time)
        return RunResult(
            success=False,
            algorithm=config.algorithm,
            error_message=error_msg,
        )


def run_algorithm(
    document_path: Path | str,
    config: RunConfig,
    logger: AuditLogger | None = None,
) -> RunResult:
    """Run the configured algorithm over a graph document file.

    Parameters
    ----------
    document_path : Path | str
        Path to a graph document (JSON).
    config : RunConfig
        Run configuration.
    logger : AuditLogger | None, optional
        Audit logger. If None and ``config.log_path`` is set, a logger
        writing to that path is created for the run.

    Returns
    -------
    RunResult
        Run outcome with a JSON-ready result.

    Examples
    --------
        >>> from monograph.engine import RunConfig, run_algorithm
        >>> config = RunConfig(algorithm="shortest_path", source="a")
        >>> result = run_algorithm("graph.json", config)
        >>> if result.success:
        ...     print(result.result["costs"])
    """
    document_path = Path(document_path)

    if logger is None and config.log_path is not None:
        with AuditLogger(run_id=generate_run_id(), log_path=config.log_path) as run_logger:
            return _run(document_path, config, run_logger)

    return _run(document_path, config, logger)
