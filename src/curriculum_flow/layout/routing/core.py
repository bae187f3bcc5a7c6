"""Grid coordinates and orthogonal waypoint generation.

Rows stack top-to-bottom by semester and columns left-to-right by column
index. Every gap widens with the number of lanes routed through it, so the
grid has to be measured after lane allocation. Paths are built from card
attachment points: the bottom centre of the source and the top centre of
the target.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from curriculum_flow.layout.constants import (
    BASE_COL_GAP,
    BASE_ROW_GAP,
    CARD_HEIGHT,
    CARD_WIDTH,
    CORRIDOR_INSET,
    GRID_LEFT,
    LANE_INSET,
    LANE_SPACING,
    ROW_GAP_LANE_PADDING,
)
from curriculum_flow.layout.graph import CourseEdge
from curriculum_flow.layout.lanes import LaneAssignment, LanePlan, RouteKind
from curriculum_flow.layout.routing.common import Point, RoutedPath, straight_path_command


@dataclass
class GridMetrics:
    """Pixel geometry of the semester/column grid for one lane plan."""

    row_y: dict[int, float] = field(default_factory=dict)
    col_x: list[float] = field(default_factory=list)
    row_gap_top: dict[int, float] = field(default_factory=dict)
    bottom: float = 0.0
    right: float = GRID_LEFT
    card_width: float = CARD_WIDTH
    card_height: float = CARD_HEIGHT
    lane_spacing: float = LANE_SPACING

    def card_origin(self, cell: tuple[int, int]) -> Point:
        semester, col = cell
        return (self.col_x[col], self.row_y[semester])

    def top_point(self, cell: tuple[int, int]) -> Point:
        x, y = self.card_origin(cell)
        return (x + self.card_width / 2, y)

    def bottom_point(self, cell: tuple[int, int]) -> Point:
        x, y = self.card_origin(cell)
        return (x + self.card_width / 2, y + self.card_height)

    def row_lane_y(self, gap: int, lane: int) -> float:
        return self.row_gap_top[gap] + LANE_INSET + lane * self.lane_spacing

    def col_lane_x(self, col: int, lane: int) -> float:
        return self.col_x[col] + self.card_width + CORRIDOR_INSET + lane * self.lane_spacing


def measure_grid(
    plan: LanePlan,
    max_semester: int,
    n_columns: int,
    card_width: float = CARD_WIDTH,
    card_height: float = CARD_HEIGHT,
    base_row_gap: float = BASE_ROW_GAP,
    base_col_gap: float = BASE_COL_GAP,
    lane_spacing: float = LANE_SPACING,
) -> GridMetrics:
    """Convert lane counts into row and column pixel positions."""

    def row_gap_height(gap: int) -> float:
        lanes = plan.row_lanes(gap)
        return max(base_row_gap, lanes * lane_spacing + ROW_GAP_LANE_PADDING)

    metrics = GridMetrics(
        card_width=card_width,
        card_height=card_height,
        lane_spacing=lane_spacing,
    )

    # Gap 0 sits above the first semester and only exists when used
    y = 0.0
    metrics.row_gap_top[0] = y
    if plan.row_lanes(0):
        y += row_gap_height(0)

    for semester in range(1, max_semester + 1):
        metrics.row_y[semester] = y
        y += card_height
        metrics.row_gap_top[semester] = y
        y += row_gap_height(semester)
    metrics.bottom = y

    x = GRID_LEFT
    for col in range(n_columns):
        metrics.col_x.append(x)
        x += card_width + base_col_gap + plan.col_lanes(col) * lane_spacing
    metrics.right = x

    return metrics


def route_edges(
    edges: list[CourseEdge],
    cells: dict[str, tuple[int, int]],
    plan: LanePlan,
    metrics: GridMetrics,
) -> list[RoutedPath]:
    """Generate straight-segment waypoints for every edge with lanes.

    Edges keep the order of ``edges``; those without a lane assignment
    (an endpoint is off the grid) are skipped.
    """
    routes: list[RoutedPath] = []
    for edge in edges:
        lanes = plan.assignments.get(edge.key)
        if lanes is None:
            continue
        start = metrics.bottom_point(cells[edge.source])
        end = metrics.top_point(cells[edge.target])
        points = _waypoints(start, end, lanes, metrics)
        routes.append(RoutedPath(
            edge=edge,
            kind=lanes.kind,
            points=points,
            d=straight_path_command(points),
        ))
    return routes


def _waypoints(
    start: Point,
    end: Point,
    lanes: LaneAssignment,
    metrics: GridMetrics,
) -> list[Point]:
    if lanes.kind == RouteKind.DIRECT:
        return [start, end]

    if lanes.kind == RouteKind.JOG:
        h_y = metrics.row_lane_y(lanes.out_gap, lanes.out_lane)
        return [start, (start[0], h_y), (end[0], h_y), end]

    # Channel: out through the source row gap, along the corridor right of
    # the column gap, back in through the gap above the target row
    h_out = metrics.row_lane_y(lanes.out_gap, lanes.out_lane)
    h_in = metrics.row_lane_y(lanes.in_gap, lanes.in_lane)
    v_x = metrics.col_lane_x(lanes.col_gap, lanes.v_lane)
    return [
        start,
        (start[0], h_out),
        (v_x, h_out),
        (v_x, h_in),
        (end[0], h_in),
        end,
    ]
