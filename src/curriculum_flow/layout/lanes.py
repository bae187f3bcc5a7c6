"""Lane allocation for edges sharing routing gaps.

Row gap ``k`` is the space directly below semester ``k`` (gap 0 is above
semester 1). Column gap ``c`` is the space directly right of column ``c``.
Each gap keeps a running counter; an edge claiming a lane takes the
counter's current value and bumps it, in the edge order fixed by the graph
builder, so identical input always yields identical lanes.
"""

from __future__ import annotations

__all__ = ["LaneAssignment", "LanePlan", "RouteKind", "allocate_lanes", "classify_route"]

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum

from curriculum_flow.layout.graph import CourseEdge


class RouteKind(Enum):
    """Routing shape of an edge on the grid."""

    DIRECT = "direct"
    JOG = "jog"
    CHANNEL = "channel"


@dataclass(frozen=True)
class LaneAssignment:
    """Lanes claimed by one edge. Unused fields stay None."""

    kind: RouteKind
    out_gap: int | None = None
    out_lane: int | None = None
    in_gap: int | None = None
    in_lane: int | None = None
    col_gap: int | None = None
    v_lane: int | None = None

    @property
    def lane_count(self) -> int:
        return sum(
            1 for lane in (self.out_lane, self.in_lane, self.v_lane) if lane is not None
        )


@dataclass
class LanePlan:
    """Lane assignments for all routed edges plus per-gap lane counts."""

    assignments: dict[tuple[str, str], LaneAssignment] = field(default_factory=dict)
    row_gap_counts: dict[int, int] = field(default_factory=dict)
    col_gap_counts: dict[int, int] = field(default_factory=dict)

    def row_lanes(self, gap: int) -> int:
        return self.row_gap_counts.get(gap, 0)

    def col_lanes(self, gap: int) -> int:
        return self.col_gap_counts.get(gap, 0)


def classify_route(src_cell: tuple[int, int], tgt_cell: tuple[int, int]) -> RouteKind:
    """Classify an edge from its (semester, column) cells."""
    src_sem, src_col = src_cell
    tgt_sem, tgt_col = tgt_cell
    if tgt_sem == src_sem + 1:
        return RouteKind.DIRECT if src_col == tgt_col else RouteKind.JOG
    return RouteKind.CHANNEL


def allocate_lanes(
    edges: list[CourseEdge],
    cells: dict[str, tuple[int, int]],
) -> LanePlan:
    """Assign lanes to every edge whose endpoints are both on the grid.

    ``cells`` maps course ID -> (semester, column) for placed courses only;
    edges touching an unplaced course get no assignment.
    """
    row_counts: dict[int, int] = defaultdict(int)
    col_counts: dict[int, int] = defaultdict(int)
    assignments: dict[tuple[str, str], LaneAssignment] = {}

    def claim(counts: dict[int, int], gap: int) -> int:
        lane = counts[gap]
        counts[gap] += 1
        return lane

    for edge in edges:
        src_cell = cells.get(edge.source)
        tgt_cell = cells.get(edge.target)
        if src_cell is None or tgt_cell is None:
            continue

        src_sem, src_col = src_cell
        tgt_sem, tgt_col = tgt_cell
        kind = classify_route(src_cell, tgt_cell)

        if kind == RouteKind.DIRECT:
            assignments[edge.key] = LaneAssignment(kind)
        elif kind == RouteKind.JOG:
            assignments[edge.key] = LaneAssignment(
                kind, out_gap=src_sem, out_lane=claim(row_counts, src_sem)
            )
        else:
            col_gap = max(src_col, tgt_col)
            v_lane = claim(col_counts, col_gap)
            out_lane = claim(row_counts, src_sem)
            in_gap = tgt_sem - 1
            in_lane = claim(row_counts, in_gap)
            assignments[edge.key] = LaneAssignment(
                kind,
                out_gap=src_sem,
                out_lane=out_lane,
                in_gap=in_gap,
                in_lane=in_lane,
                col_gap=col_gap,
                v_lane=v_lane,
            )

    return LanePlan(
        assignments=assignments,
        row_gap_counts=dict(row_counts),
        col_gap_counts=dict(col_counts),
    )
