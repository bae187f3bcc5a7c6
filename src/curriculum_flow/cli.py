"""CLI for curriculum-flow."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

import click

from curriculum_flow import __version__
from curriculum_flow.layout import compute_layout
from curriculum_flow.layout.constants import JUMP_RADIUS, LANE_SPACING
from curriculum_flow.layout.graph import SCOPES
from curriculum_flow.parser import dump_catalog, parse_catalog
from curriculum_flow.parser.model import Catalog
from curriculum_flow.render import render_svg
from curriculum_flow.session import FlowchartSession
from curriculum_flow.themes import THEMES


def _load(input_file: Path) -> Catalog:
    try:
        return parse_catalog(input_file.read_text(encoding="utf-8"))
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log layout decisions to stderr.")
def cli(verbose: bool) -> None:
    """curriculum-flow: Lay out and route curriculum prerequisite flowcharts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Visual theme (default: light)")
@click.option("--scope", type=click.Choice(SCOPES), default="all",
              help="Courses to include (default: all)")
@click.option("--hover", "hovered", default=None,
              help="Course ID to render as focused")
@click.option("--lane-spacing", type=float, default=LANE_SPACING,
              help=f"Distance between parallel lanes (default: {LANE_SPACING:g})")
@click.option("--jump-radius", type=float, default=JUMP_RADIUS,
              help=f"Radius of crossing jumps (default: {JUMP_RADIUS:g})")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    scope: str,
    hovered: str | None,
    lane_spacing: float,
    jump_radius: float,
) -> None:
    """Render a course catalog to an SVG flowchart."""
    catalog = _load(input_file)

    geometry = compute_layout(
        catalog,
        hovered=hovered,
        scope=scope,
        lane_spacing=lane_spacing,
        jump_radius=jump_radius,
    )
    svg = render_svg(catalog, geometry, THEMES[theme])

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg, encoding="utf-8")
    click.echo(f"Rendered {len(geometry.nodes)} courses, "
               f"{len(geometry.paths)} edges, "
               f"{len(geometry.blocks)} blocks -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a course catalog and report what the layout will omit."""
    catalog = _load(input_file)
    geometry = compute_layout(catalog)
    graph = geometry.graph

    warnings = []
    for course_id, ref in graph.dropped_refs:
        warnings.append(f"Course '{course_id}' references unknown course '{ref}'")
    for course_id in geometry.unplaced:
        course = catalog.courses[course_id]
        warnings.append(f"Course '{course_id}' is not placed "
                        f"(semester={course.semester}, column={course.col_index})")
    for block in catalog.blocks.values():
        if block.id not in geometry.blocks:
            warnings.append(f"Block '{block.name}' has no known member courses")

    if warnings:
        click.echo("Warnings:", err=True)
        for warning in warnings:
            click.echo(f"  - {warning}", err=True)

    click.echo(f"Valid: {len(catalog.courses)} courses, "
               f"{len(graph.edges)} prerequisite edges, "
               f"{len(graph.coreq_edges)} co-requisite links, "
               f"{len(catalog.blocks)} blocks")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--scope", type=click.Choice(SCOPES), default="all",
              help="Courses to include (default: all)")
def info(input_file: Path, scope: str) -> None:
    """Show routing statistics for a course catalog."""
    catalog = _load(input_file)
    geometry = compute_layout(catalog, scope=scope)

    click.echo(f"Title: {catalog.title or '(none)'}")
    click.echo(f"Courses: {len(geometry.graph.courses)} "
               f"({len(geometry.nodes)} placed)")
    click.echo(f"Semesters: {geometry.max_semester}")

    kinds = Counter(p.kind.value for p in geometry.paths)
    click.echo(f"Edges: {len(geometry.paths)}")
    for kind in ("direct", "jog", "channel"):
        click.echo(f"  {kind}: {kinds.get(kind, 0)}")

    click.echo("Row gap lanes:")
    for gap, count in sorted(geometry.lanes.row_gap_counts.items()):
        click.echo(f"  below S{gap}: {count}" if gap else f"  above S1: {count}")
    click.echo("Column gap lanes:")
    for gap, count in sorted(geometry.lanes.col_gap_counts.items()):
        click.echo(f"  right of column {gap}: {count}")

    click.echo(f"Blocks: {len(geometry.blocks)}")
    for block_id, rect in geometry.blocks.items():
        block = catalog.blocks[block_id]
        source = type(rect.placement).__name__.lower()
        click.echo(f"  {block.name}: {len(rect.course_ids)} courses, "
                   f"min {block.min_credits:g} cr, {source} at "
                   f"({rect.x:g}, {rect.y:g})")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output catalog path. Defaults to overwriting the input")
def autolayout(input_file: Path, output: Path | None) -> None:
    """Renumber grid columns and clear manual block positions."""
    catalog = _load(input_file)
    session = FlowchartSession(catalog)
    session.auto_layout()

    if output is None:
        output = input_file

    output.write_text(dump_catalog(catalog), encoding="utf-8")
    click.echo(f"Auto-laid out {len(catalog.courses)} courses, "
               f"reset {len(catalog.blocks)} blocks -> {output}")
