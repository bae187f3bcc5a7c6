"""Shared types and helper functions for edge routing."""

from __future__ import annotations

from dataclasses import dataclass

from curriculum_flow.layout.constants import COORD_TOLERANCE
from curriculum_flow.layout.graph import CourseEdge
from curriculum_flow.layout.lanes import RouteKind

Point = tuple[float, float]


@dataclass
class RoutedPath:
    """A routed edge: orthogonal waypoints plus the final path command."""

    edge: CourseEdge
    kind: RouteKind
    points: list[Point]
    d: str = ""

    @property
    def id(self) -> str:
        return self.edge.id

    @property
    def key(self) -> tuple[str, str]:
        return self.edge.key


@dataclass(frozen=True)
class VerticalSegment:
    """A vertical run of one path, used as a crossing obstacle."""

    x: float
    y_min: float
    y_max: float
    path_key: tuple[str, str]


def fmt(value: float) -> str:
    """Format a coordinate for a path command (at most two decimals)."""
    text = f"{round(value, 2):.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def is_horizontal(p1: Point, p2: Point) -> bool:
    return abs(p1[1] - p2[1]) < COORD_TOLERANCE and abs(p1[0] - p2[0]) >= COORD_TOLERANCE


def is_vertical(p1: Point, p2: Point) -> bool:
    return abs(p1[0] - p2[0]) < COORD_TOLERANCE


def straight_path_command(points: list[Point]) -> str:
    """Build an ``M ... L ...`` command through every waypoint."""
    if not points:
        return ""
    parts = [f"M {fmt(points[0][0])} {fmt(points[0][1])}"]
    parts.extend(f"L {fmt(x)} {fmt(y)}" for x, y in points[1:])
    return " ".join(parts)


def vertical_segments(paths: list[RoutedPath]) -> list[VerticalSegment]:
    """Extract every non-degenerate vertical segment from ``paths``."""
    segments: list[VerticalSegment] = []
    for path in paths:
        for p1, p2 in zip(path.points, path.points[1:]):
            if is_vertical(p1, p2) and abs(p1[1] - p2[1]) >= COORD_TOLERANCE:
                segments.append(VerticalSegment(
                    x=p1[0],
                    y_min=min(p1[1], p2[1]),
                    y_max=max(p1[1], p2[1]),
                    path_key=path.key,
                ))
    return segments
