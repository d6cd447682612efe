"""Command-line interface for monograph.

Provides CLI commands to run graph algorithms over graph documents.
"""

import importlib.metadata
import json
import sys
from pathlib import Path
from typing import Any

import click

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("monograph")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


def _report(result: Any, verbose: bool) -> None:
    """Print a RunResult, exiting with status 1 on failure."""
    if not result.success:
        click.secho(f"✗ Error: {result.error_message}", fg="red", err=True)
        sys.exit(1)

    if result.output_files:
        for name, path in result.output_files.items():
            click.secho(f"✓ Wrote {name} to {path}", fg="green")
        if verbose:
            click.echo(json.dumps(result.result, indent=2, ensure_ascii=False), err=True)
    else:
        click.echo(json.dumps(result.result, indent=2, ensure_ascii=False))


_output_option = click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the JSON result to this file instead of stdout",
)
_log_option = click.option(
    "--log",
    "log_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append JSONL audit events to this file",
)
_verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)


@click.group()
@click.version_option(version=__version__, prog_name="monograph")
def cli() -> None:
    """In-memory graph algorithms over JSON graph documents.

    Use 'monograph COMMAND --help' for command-specific help.
    """


@cli.command("shortest-path")
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@click.option("--source", "-s", required=True, help="Vertex to measure distances from")
@_output_option
@_log_option
@_verbose_option
def shortest_path(
    document: str,
    source: str,
    output: str | None,
    log_path: str | None,
    verbose: bool,
) -> None:
    """Compute Dijkstra shortest paths from SOURCE in DOCUMENT.

    Unreachable vertices are reported with a null cost and no path.

    Examples
    --------
        monograph shortest-path roads.json --source a
        monograph shortest-path roads.json -s 1 -o paths.json --log events.jsonl
    """
    from monograph.engine import RunConfig, run_algorithm

    if verbose:
        click.echo(f"Processing: {document} (source={source})", err=True)

    config = RunConfig(
        algorithm="shortest_path",
        source=source,
        output_path=Path(output) if output else None,
        log_path=Path(log_path) if log_path else None,
    )
    _report(run_algorithm(document, config), verbose)


@cli.command("spanning-tree")
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@_output_option
@_log_option
@_verbose_option
def spanning_tree(
    document: str,
    output: str | None,
    log_path: str | None,
    verbose: bool,
) -> None:
    """Compute a Kruskal minimum spanning forest of DOCUMENT.

    DOCUMENT must describe an undirected graph. The result holds the tree
    as a graph document, its total cost and whether it spans every vertex.

    Examples
    --------
        monograph spanning-tree network.json
        monograph spanning-tree network.json -o tree.json
    """
    from monograph.engine import RunConfig, run_algorithm

    if verbose:
        click.echo(f"Processing: {document}", err=True)

    config = RunConfig(
        algorithm="spanning_tree",
        output_path=Path(output) if output else None,
        log_path=Path(log_path) if log_path else None,
    )
    _report(run_algorithm(document, config), verbose)


@cli.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
def info(document: str) -> None:
    """Summarize DOCUMENT: directedness, vertex and edge counts."""
    from monograph.document import build_graph, load_document

    try:
        graph, _ = build_graph(load_document(document))
    except Exception as e:
        click.secho(f"✗ Error: {type(e).__name__}: {e}", fg="red", err=True)
        sys.exit(1)

    kind = "directed" if graph.is_directed else "undirected"
    click.echo(f"{kind} graph: {len(graph)} vertices, {graph.edge_count} edges")


if __name__ == "__main__":
    cli()
