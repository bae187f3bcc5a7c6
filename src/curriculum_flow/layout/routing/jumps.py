"""Crossing resolution: arc "jumps" where paths cross.

Only horizontal segments acquire jumps and only over vertical segments of
other paths, so each crossing is drawn once. The arc sweep follows travel
direction (1 for left-to-right, 0 for right-to-left), which makes every
jump bulge upward on screen.
"""

from __future__ import annotations

from curriculum_flow.layout.constants import COORD_TOLERANCE, JUMP_RADIUS
from curriculum_flow.layout.routing.common import (
    Point,
    RoutedPath,
    VerticalSegment,
    fmt,
    is_horizontal,
    vertical_segments,
)


def resolve_crossings(
    paths: list[RoutedPath],
    jump_radius: float = JUMP_RADIUS,
) -> list[RoutedPath]:
    """Rewrite each path's command with jumps at its crossings.

    Paths are updated in place and returned for chaining.
    """
    obstacles = vertical_segments(paths)
    for path in paths:
        others = [v for v in obstacles if v.path_key != path.key]
        path.d = _path_with_jumps(path.points, others, jump_radius)
    return paths


def crossing_xs(
    p1: Point,
    p2: Point,
    obstacles: list[VerticalSegment],
    jump_radius: float = JUMP_RADIUS,
) -> list[float]:
    """Return crossing x positions along a horizontal segment, in travel order.

    A crossing counts when the vertical segment's x lies more than one
    radius inside the segment's ends and its y range strictly contains the
    segment's y. Coincident x values collapse to one crossing.
    """
    y = p1[1]
    left = min(p1[0], p2[0])
    right = max(p1[0], p2[0])
    direction = 1 if p2[0] > p1[0] else -1

    return sorted(
        {
            v.x
            for v in obstacles
            if left + jump_radius < v.x < right - jump_radius
            and v.y_min < y < v.y_max
        },
        reverse=direction < 0,
    )


def group_crossings(
    xs: list[float],
    jump_radius: float = JUMP_RADIUS,
) -> list[tuple[float, float]]:
    """Group crossings whose arcs would overlap into (first, last) spans.

    ``xs`` is in travel order. Each span becomes one arc reaching one
    radius before its first crossing and one radius past its last.
    """
    spans: list[tuple[float, float]] = []
    for x in xs:
        if spans and abs(x - spans[-1][1]) < 2 * jump_radius - COORD_TOLERANCE:
            spans[-1] = (spans[-1][0], x)
        else:
            spans.append((x, x))
    return spans


def _path_with_jumps(
    points: list[Point],
    obstacles: list[VerticalSegment],
    jump_radius: float,
) -> str:
    if not points:
        return ""

    parts = [f"M {fmt(points[0][0])} {fmt(points[0][1])}"]

    for p1, p2 in zip(points, points[1:]):
        if is_horizontal(p1, p2):
            y = fmt(p1[1])
            direction = 1 if p2[0] > p1[0] else -1
            sweep = 1 if direction == 1 else 0
            xs = crossing_xs(p1, p2, obstacles, jump_radius)
            for first, last in group_crossings(xs, jump_radius):
                jump_start = first - jump_radius * direction
                jump_end = last + jump_radius * direction
                r = fmt(abs(jump_end - jump_start) / 2)
                parts.append(f"L {fmt(jump_start)} {y}")
                parts.append(f"A {r} {r} 0 0 {sweep} {fmt(jump_end)} {y}")
        parts.append(f"L {fmt(p2[0])} {fmt(p2[1])}")

    return " ".join(parts)
