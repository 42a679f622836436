from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from egograph.core.config import Config
from egograph.core.exceptions import EgoGraphError
from egograph.core.graph import DirectedGraph
from egograph.loader import load_graph


app = typer.Typer(help="Ego networks and strongly connected components of edge-list graphs.",
                  add_completion=False, no_args_is_help=True)
console = Console()


def setup_logging(config: Config, debug: bool = False, verbose: bool = False) -> None:
    """Setup logging from config, with --debug/--verbose taking precedence"""

    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = getattr(logging, str(config.get('logging.level', 'WARNING')).upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format=config.get('logging.format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
        datefmt='%H:%M:%S'
    )
    logging.getLogger('egograph').setLevel(log_level)


def format_adjacency(graph: DirectedGraph) -> str:
    """One ``"<vertex>-> [neighbors]"`` line per vertex, sorted."""

    adjacency = graph.export_adjacency()
    return "\n".join(f"{vertex}-> {sorted(adjacency[vertex])}" for vertex in sorted(adjacency))


def _print_graph(graph: DirectedGraph) -> None:
    text = format_adjacency(graph)
    if text:
        typer.echo(text)
    typer.echo(f"Vertices: {graph.vertex_count()}")
    typer.echo(f"Edges: {graph.edge_count()}")


def _load(ctx: typer.Context, path: Path) -> DirectedGraph:
    config: Config = ctx.obj
    loader = config.loader_config
    try:
        return load_graph(
            path,
            comment_prefix=loader.get('comment_prefix', '#'),
            strict=bool(loader.get('strict', True)),
        )
    except EgoGraphError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to a YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress at INFO level"),
    debug: bool = typer.Option(False, "--debug", help="Log traversal details at DEBUG level"),
) -> None:
    """Load a "from to" edge list and query its structure."""

    try:
        config = Config(str(config_path) if config_path else None)
    except EgoGraphError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    setup_logging(config, debug=debug, verbose=verbose)
    ctx.obj = config


@app.command()
def summary(ctx: typer.Context, path: Path = typer.Argument(..., help="Edge-list file")) -> None:
    """Print vertex and edge counts."""

    graph = _load(ctx, path)
    typer.echo(f"Vertices: {graph.vertex_count()}")
    typer.echo(f"Edges: {graph.edge_count()}")


@app.command()
def show(ctx: typer.Context, path: Path = typer.Argument(..., help="Edge-list file")) -> None:
    """Print the adjacency of the whole graph."""

    _print_graph(_load(ctx, path))


@app.command()
def egonet(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Edge-list file"),
    centers: List[int] = typer.Argument(..., help="Center vertex ids"),
) -> None:
    """Print the ego network of each center vertex."""

    graph = _load(ctx, path)
    for i, center in enumerate(centers):
        if i:
            typer.echo("******")
        typer.echo(f"Ego network of {center}:")
        _print_graph(graph.egonet(center))


@app.command()
def transpose(ctx: typer.Context, path: Path = typer.Argument(..., help="Edge-list file")) -> None:
    """Print the graph with every edge reversed."""

    graph = _load(ctx, path)
    typer.echo("Transpose:")
    _print_graph(graph.transpose())


@app.command()
def sccs(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Edge-list file"),
    min_size: Optional[int] = typer.Option(None, "--min-size", help="Hide components with fewer vertices"),
) -> None:
    """Print the strongly connected components."""

    config: Config = ctx.obj
    if min_size is None:
        min_size = int(config.get('scc.min_size', 1))

    graph = _load(ctx, path)
    components = [scc for scc in graph.get_sccs() if scc.vertex_count() >= min_size]

    table = Table(title="Strongly Connected Components")
    table.add_column("#", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Edges", justify="right")
    table.add_column("Members")
    for i, scc in enumerate(components):
        members = ", ".join(str(v) for v in sorted(scc.vertices()))
        table.add_row(str(i), str(scc.vertex_count()), str(scc.edge_count()), members)
    console.print(table)

    for i, scc in enumerate(components):
        typer.echo(f"Component {i}:")
        typer.echo(format_adjacency(scc))
        typer.echo("****")
    typer.echo(f"Components: {len(components)}")


if __name__ == "__main__":
    app()
