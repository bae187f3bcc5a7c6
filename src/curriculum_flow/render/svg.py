"""SVG generation for curriculum flowcharts using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from curriculum_flow.layout.blocks import BlockGeometry
from curriculum_flow.layout.constants import SEM_LABEL_WIDTH, SIDE_GAP
from curriculum_flow.layout.engine import LayoutGeometry
from curriculum_flow.parser.model import Catalog, Course, NodeStatus
from curriculum_flow.render.constants import (
    ARROW_SIZE,
    BLOCK_CORNER_RADIUS,
    BLOCK_DASH,
    BLOCK_LABEL_BASELINE,
    BLOCK_LABEL_INSET,
    CARD_CODE_BASELINE,
    CARD_CREDIT_INSET,
    CARD_NAME_BASELINE,
    CARD_NAME_MAX_CHARS,
    CARD_TEXT_INSET,
    CONNECTOR_DASH,
    RING_WIDTH,
)
from curriculum_flow.render.style import Theme


def render_svg(
    catalog: Catalog,
    geometry: LayoutGeometry,
    theme: Theme,
    width: int | None = None,
    height: int | None = None,
) -> str:
    """Render a computed layout to an SVG string."""
    svg_width = width or int(geometry.width)
    svg_height = height or int(geometry.height)

    d = draw.Drawing(svg_width, svg_height)
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    _render_semester_labels(d, geometry, theme)

    # Edges behind cards
    _render_edges(d, geometry, theme)
    _render_connectors(d, geometry, theme)

    for node in geometry.nodes.values():
        course = catalog.courses.get(node.course_id)
        if course is not None:
            _render_card(d, course, node.x, node.y, node.width, node.height,
                         node.status, theme)

    _render_blocks(d, catalog, geometry, theme)

    return d.as_svg()


def _render_semester_labels(
    d: draw.Drawing,
    geometry: LayoutGeometry,
    theme: Theme,
) -> None:
    cx = SIDE_GAP + SEM_LABEL_WIDTH / 2
    for semester, y in sorted(geometry.grid.row_y.items()):
        d.append(draw.Text(
            f"S{semester}",
            theme.semester_label_font_size,
            cx, y + geometry.grid.card_height / 2,
            fill=theme.semester_label_color,
            font_family=theme.label_font_family,
            font_weight="bold",
            text_anchor="middle",
            dominant_baseline="central",
        ))


def _arrow(color: str) -> draw.Marker:
    marker = draw.Marker(-0.1, -0.5, 0.9, 0.5, scale=ARROW_SIZE, orient="auto")
    marker.append(draw.Lines(-0.1, -0.5, -0.1, 0.5, 0.9, 0, fill=color, close=True))
    return marker


def _render_edges(
    d: draw.Drawing,
    geometry: LayoutGeometry,
    theme: Theme,
) -> None:
    """Render routed prerequisite paths, emphasising the focused chain."""
    highlight = geometry.highlight
    markers: dict[str, draw.Marker] = {}

    def marker_for(color: str) -> draw.Marker:
        if color not in markers:
            markers[color] = _arrow(color)
        return markers[color]

    for path in geometry.paths:
        stroke = theme.edge_color
        stroke_width = theme.edge_width
        opacity = 1.0

        if highlight.focused is not None:
            src, tgt = path.edge.source, path.edge.target
            if highlight.is_related_edge(src, tgt):
                stroke = (
                    theme.edge_downstream_color
                    if highlight.is_downstream_edge(src, tgt)
                    else theme.edge_upstream_color
                )
                stroke_width = theme.edge_highlight_width
            else:
                opacity = theme.edge_dim_opacity

        d.append(draw.Path(
            d=path.d,
            fill="none",
            stroke=stroke,
            stroke_width=stroke_width,
            opacity=opacity,
            marker_end=marker_for(stroke),
        ))


def _render_connectors(
    d: draw.Drawing,
    geometry: LayoutGeometry,
    theme: Theme,
) -> None:
    for conn in geometry.connectors:
        d.append(draw.Path(
            d=conn.d,
            fill="none",
            stroke=theme.connector_color,
            stroke_width=2,
            stroke_dasharray=CONNECTOR_DASH,
            opacity=0.8,
        ))


def _render_card(
    d: draw.Drawing,
    course: Course,
    x: float,
    y: float,
    w: float,
    h: float,
    status: NodeStatus,
    theme: Theme,
) -> None:
    """Render one course card with code, name and credits."""
    fill, stroke, text = theme.card_colors[course.course_type]
    group = draw.Group(opacity=theme.faded_opacity if status == NodeStatus.FADED else 1)

    ring = theme.status_rings.get(status)
    group.append(draw.Rectangle(
        x, y, w, h,
        rx=theme.card_corner_radius, ry=theme.card_corner_radius,
        fill=fill,
        stroke=ring or stroke,
        stroke_width=RING_WIDTH if ring else 1.0,
    ))
    group.append(draw.Text(
        course.code or course.id,
        theme.card_font_size,
        x + CARD_TEXT_INSET, y + CARD_CODE_BASELINE,
        fill=text,
        font_family=theme.label_font_family,
        font_weight="bold",
    ))
    if course.name:
        name = course.name
        if len(name) > CARD_NAME_MAX_CHARS:
            name = name[: CARD_NAME_MAX_CHARS - 1] + "…"
        group.append(draw.Text(
            name,
            theme.card_name_font_size,
            x + CARD_TEXT_INSET, y + CARD_NAME_BASELINE,
            fill=text,
            font_family=theme.label_font_family,
        ))
    if course.credits:
        group.append(draw.Text(
            f"{course.credits:g} cr",
            theme.card_name_font_size,
            x + w - CARD_TEXT_INSET, y + h - CARD_CREDIT_INSET,
            fill=text,
            font_family=theme.label_font_family,
            text_anchor="end",
        ))
    d.append(group)


def _render_blocks(
    d: draw.Drawing,
    catalog: Catalog,
    geometry: LayoutGeometry,
    theme: Theme,
) -> None:
    """Render elective block containers with their member slots."""
    active = set(geometry.highlight.active_blocks)
    for block_geom in geometry.blocks.values():
        block = catalog.blocks.get(block_geom.block_id)
        if block is None:
            continue
        is_active = block_geom.block_id in active
        _render_block_frame(d, block_geom, block.name, block.min_credits,
                            is_active, theme)

        for i, cid in enumerate(block_geom.course_ids):
            course = catalog.courses.get(cid)
            if course is None:
                continue
            sx, sy = block_geom.slot_origin(i)
            status = geometry.statuses.get(cid, NodeStatus.NORMAL)
            # Members of the highlighted block are never faded
            if is_active and status == NodeStatus.FADED:
                status = NodeStatus.NORMAL
            _render_card(d, course, sx, sy, geometry.grid.card_width,
                         geometry.grid.card_height, status, theme)


def _render_block_frame(
    d: draw.Drawing,
    geom: BlockGeometry,
    name: str,
    min_credits: float,
    is_active: bool,
    theme: Theme,
) -> None:
    d.append(draw.Rectangle(
        geom.x, geom.y, geom.width, geom.height,
        rx=BLOCK_CORNER_RADIUS, ry=BLOCK_CORNER_RADIUS,
        fill=theme.block_active_fill if is_active else theme.block_fill,
        stroke=theme.block_active_stroke if is_active else theme.block_stroke,
        stroke_width=2,
        stroke_dasharray=BLOCK_DASH,
    ))
    d.append(draw.Text(
        name,
        theme.block_font_size,
        geom.x + BLOCK_LABEL_INSET, geom.y + BLOCK_LABEL_BASELINE,
        fill=theme.block_label_color,
        font_family=theme.label_font_family,
        font_weight="bold",
    ))
    d.append(draw.Text(
        f"Min: {min_credits:g} cr",
        theme.block_font_size * 0.8,
        geom.x + geom.width - BLOCK_LABEL_INSET, geom.y + BLOCK_LABEL_BASELINE,
        fill=theme.block_label_color,
        font_family=theme.label_font_family,
        text_anchor="end",
    ))
