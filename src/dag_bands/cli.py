"""CLI for dag-bands."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from dag_bands import __version__
from dag_bands.parser import parse_dag_mermaid
from dag_bands.parser.model import DagGraph
from dag_bands.render import render_svg
from dag_bands.render.constants import CANVAS_PADDING
from dag_bands.themes import THEMES


def _load(input_file: Path) -> DagGraph:
    """Parse ``input_file``, turning parse errors into a clean exit."""
    try:
        return parse_dag_mermaid(input_file.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


def _validation_errors(graph: DagGraph) -> list[str]:
    errors = []

    for node_id in graph.unplaced_nodes():
        errors.append(f"Node '{node_id}' has no position")

    for edge in graph.edges:
        if edge.source == edge.target:
            errors.append(f"Edge {edge.source} -> {edge.target} is a self-loop")
        src = graph.nodes.get(edge.source)
        tgt = graph.nodes.get(edge.target)
        if src and tgt and src.has_position and tgt.has_position:
            if (src.x, src.y) == (tgt.x, tgt.y) and edge.source != edge.target:
                errors.append(f"Edge {edge.source} -> {edge.target} joins "
                              f"two nodes at the same position")

    for node in graph.nodes.values():
        for name, stack in (("primary", node.bands.primary),
                            ("secondary", node.bands.secondary)):
            total = sum(b.proportion for b in stack)
            if total > 1.0 + 1e-9:
                errors.append(f"Node '{node.id}' {name} bands sum to "
                              f"{total:g} (> 1)")
    return errors


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """dag-bands: Render DAG diagrams with area-proportional node bands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="default",
              help="Visual theme (default: default)")
@click.option("--width", type=int, default=None, help="SVG width in pixels")
@click.option("--height", type=int, default=None, help="SVG height in pixels")
@click.option("--padding", type=float, default=CANVAS_PADDING,
              help=f"Padding around the nodes (default: {CANVAS_PADDING:g})")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    width: int | None,
    height: int | None,
    padding: float,
) -> None:
    """Render a %%dag diagram definition to SVG."""
    graph = _load(input_file)

    try:
        svg = render_svg(graph, THEMES[theme], width=width, height=height,
                         padding=padding)
    except ValueError as e:
        click.echo(f"Render error: {e}", err=True)
        raise SystemExit(1)

    if output is None:
        output = input_file.with_suffix(".svg")

    if not svg.endswith("\n"):
        svg += "\n"
    output.write_text(svg)
    click.echo(f"Rendered {len(graph.nodes)} nodes, "
               f"{len(graph.edges)} edges -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a %%dag diagram definition."""
    graph = _load(input_file)
    errors = _validation_errors(graph)

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(graph.nodes)} nodes, "
               f"{len(graph.edges)} edges "
               f"({len(graph.blocked_edges())} blocked)")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a %%dag diagram definition."""
    graph = _load(input_file)

    click.echo(f"Title: {graph.title or '(none)'}")
    click.echo(f"Radius: {graph.node_radius:g}")
    click.echo(f"Orientation: {graph.orientation.value}")
    click.echo(f"Nodes: {len(graph.nodes)}")
    for node in graph.nodes.values():
        if node.solid:
            kind = "solid"
        elif node.bands.is_empty():
            kind = "no bands"
        else:
            kind = (f"{len(node.bands.primary)}+"
                    f"{len(node.bands.secondary)} bands")
        click.echo(f"  {node.label} ({node.id}): {kind}")
    click.echo(f"Edges: {len(graph.edges)}")
    for edge in graph.edges:
        state = "blocked" if edge.blocked else "active"
        click.echo(f"  {edge.source} -> {edge.target}: "
                   f"strength {edge.strength:g}, {state}")
