"""Layout coordinator: one recomputation pass from catalog to geometry.

Pipeline: graph building -> grid placement -> lane allocation -> grid
measurement -> waypoint routing -> crossing jumps, with block placement and
hover highlighting alongside. Every stage returns fresh values; nothing in
the catalog is modified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from curriculum_flow.layout.blocks import (
    BlockConnector,
    BlockDrag,
    BlockGeometry,
    block_connectors,
    layout_blocks,
)
from curriculum_flow.layout.constants import (
    BASE_COL_GAP,
    BASE_ROW_GAP,
    BLOCK_WIDTH,
    CANVAS_MARGIN,
    CARD_HEIGHT,
    CARD_WIDTH,
    JUMP_RADIUS,
    LANE_SPACING,
    MAX_COLUMNS,
    MAX_SEMESTER,
    MIN_CANVAS_WIDTH,
    SIDE_GAP,
)
from curriculum_flow.layout.graph import DependencyGraph, build_dependency_graph, scope_courses
from curriculum_flow.layout.highlight import HighlightState, classify_node, compute_highlight
from curriculum_flow.layout.lanes import LanePlan, allocate_lanes
from curriculum_flow.layout.routing import (
    GridMetrics,
    RoutedPath,
    measure_grid,
    resolve_crossings,
    route_edges,
)
from curriculum_flow.layout.routing.common import Point
from curriculum_flow.parser.model import Catalog, Course, NodeStatus

logger = logging.getLogger(__name__)


@dataclass
class NodeGeometry:
    """Pixel placement and display status of one course card."""

    course_id: str
    semester: int
    col_index: int
    x: float
    y: float
    width: float
    height: float
    top: Point
    bottom: Point
    status: NodeStatus = NodeStatus.NORMAL


@dataclass
class LayoutGeometry:
    """Complete output of one layout pass."""

    nodes: dict[str, NodeGeometry] = field(default_factory=dict)
    paths: list[RoutedPath] = field(default_factory=list)
    blocks: dict[str, BlockGeometry] = field(default_factory=dict)
    connectors: list[BlockConnector] = field(default_factory=list)
    statuses: dict[str, NodeStatus] = field(default_factory=dict)
    highlight: HighlightState = field(default_factory=HighlightState)
    graph: DependencyGraph | None = None
    lanes: LanePlan = field(default_factory=LanePlan)
    grid: GridMetrics = field(default_factory=GridMetrics)
    unplaced: list[str] = field(default_factory=list)
    max_semester: int = 1
    width: float = 0.0
    height: float = 0.0

    def path_commands(self) -> list[tuple[str, str]]:
        """(edge ID, path command) pairs in routing order."""
        return [(p.id, p.d) for p in self.paths]


def compute_layout(
    catalog: Catalog,
    hovered: str | None = None,
    drag: BlockDrag | None = None,
    scope: str = "all",
    card_width: float = CARD_WIDTH,
    card_height: float = CARD_HEIGHT,
    base_row_gap: float = BASE_ROW_GAP,
    base_col_gap: float = BASE_COL_GAP,
    lane_spacing: float = LANE_SPACING,
    jump_radius: float = JUMP_RADIUS,
    min_canvas_width: float = MIN_CANVAS_WIDTH,
) -> LayoutGeometry:
    """Compute node positions, routed paths and block rectangles."""
    courses = scope_courses(catalog, scope)
    graph = build_dependency_graph(courses)

    cells, unplaced = place_courses(courses)
    max_semester = max((sem for sem, _ in cells.values()), default=1)
    n_columns = max((col for _, col in cells.values()), default=-1) + 1

    lanes = allocate_lanes(graph.edges, cells)
    grid = measure_grid(
        lanes,
        max_semester,
        n_columns,
        card_width=card_width,
        card_height=card_height,
        base_row_gap=base_row_gap,
        base_col_gap=base_col_gap,
        lane_spacing=lane_spacing,
    )
    paths = resolve_crossings(
        route_edges(graph.edges, cells, lanes, grid),
        jump_radius=jump_radius,
    )

    highlight = compute_highlight(graph, hovered, list(catalog.blocks.values()))
    statuses = {cid: classify_node(cid, highlight) for cid in graph.courses}

    nodes: dict[str, NodeGeometry] = {}
    for cid, cell in cells.items():
        x, y = grid.card_origin(cell)
        nodes[cid] = NodeGeometry(
            course_id=cid,
            semester=cell[0],
            col_index=cell[1],
            x=x,
            y=y,
            width=card_width,
            height=card_height,
            top=grid.top_point(cell),
            bottom=grid.bottom_point(cell),
            status=statuses[cid],
        )

    blocks, packed_bottom = layout_blocks(
        list(catalog.blocks.values()),
        set(graph.courses),
        grid.bottom,
        grid.right,
        drag=drag,
        block_width=card_width + BLOCK_WIDTH - CARD_WIDTH,
    )

    connectors: list[BlockConnector] = []
    member_bottoms = {cid: node.bottom for cid, node in nodes.items()}
    for block_id in highlight.active_blocks:
        block = blocks.get(block_id)
        if block is not None:
            connectors.extend(block_connectors(block, member_bottoms))

    blocks_right = max((b.x + b.width for b in blocks.values()), default=0.0)
    blocks_bottom = max((b.bottom for b in blocks.values()), default=0.0)
    width = max(grid.right + SIDE_GAP, blocks_right + SIDE_GAP, min_canvas_width)
    height = max(packed_bottom, blocks_bottom) + CANVAS_MARGIN

    return LayoutGeometry(
        nodes=nodes,
        paths=paths,
        blocks=blocks,
        connectors=connectors,
        statuses=statuses,
        highlight=highlight,
        graph=graph,
        lanes=lanes,
        grid=grid,
        unplaced=unplaced,
        max_semester=max_semester,
        width=width,
        height=height,
    )


def place_courses(courses: list[Course]) -> tuple[dict[str, tuple[int, int]], list[str]]:
    """Map each drawable course to its (semester, column) cell.

    Courses without a valid cell, or with one outside the
    MAX_SEMESTER x MAX_COLUMNS grid, are unplaced. When two courses claim
    one cell, the first in input order keeps it.
    """
    cells: dict[str, tuple[int, int]] = {}
    occupied: dict[tuple[int, int], str] = {}
    unplaced: list[str] = []

    for course in courses:
        if not course.is_placeable:
            logger.debug("Course %s has no grid cell; not placed", course.id)
            unplaced.append(course.id)
            continue
        if course.semester > MAX_SEMESTER or course.col_index >= MAX_COLUMNS:
            logger.debug(
                "Course %s at semester %d column %d is outside the grid; not placed",
                course.id, course.semester, course.col_index,
            )
            unplaced.append(course.id)
            continue
        cell = (course.semester, course.col_index)
        if cell in occupied:
            logger.warning(
                "Course %s collides with %s at semester %d column %d; not placed",
                course.id, occupied[cell], cell[0], cell[1],
            )
            unplaced.append(course.id)
            continue
        occupied[cell] = course.id
        cells[course.id] = cell

    return cells, unplaced
