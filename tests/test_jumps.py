"""Tests for crossing detection and arc jumps."""

from curriculum_flow.layout.graph import CourseEdge
from curriculum_flow.layout.lanes import RouteKind
from curriculum_flow.layout.routing import resolve_crossings
from curriculum_flow.layout.routing.common import RoutedPath, VerticalSegment
from curriculum_flow.layout.routing.jumps import crossing_xs, group_crossings


def _path(src, tgt, points, kind=RouteKind.JOG):
    return RoutedPath(edge=CourseEdge(src, tgt), kind=kind, points=points)


def _wall(x, y_min=0.0, y_max=100.0, owner=("w", "w")):
    return VerticalSegment(x, y_min, y_max, owner)


def test_jog_jumps_over_direct_edge():
    jog = _path("a1", "a2", [(170, 80), (170, 90), (570, 90), (570, 140)])
    direct = _path("b1", "b2", [(370, 80), (370, 140)], RouteKind.DIRECT)
    resolve_crossings([jog, direct])
    assert jog.d == "M 170 80 L 170 90 L 364 90 A 6 6 0 0 1 376 90 L 570 90 L 570 140"
    assert direct.d == "M 370 80 L 370 140"


def test_right_to_left_uses_opposite_sweep():
    path = _path("a", "b", [(500, 0), (500, 50), (100, 50), (100, 120)])
    other = _path("c", "d", [(300, 0), (300, 120)], RouteKind.DIRECT)
    resolve_crossings([path, other])
    assert "L 306 50 A 6 6 0 0 0 294 50" in path.d


def test_endpoint_touch_is_not_a_crossing():
    """A vertical whose end lies on the horizontal does not count."""
    assert crossing_xs((0, 50), (200, 50), [_wall(100, 50, 120)]) == []
    assert crossing_xs((0, 50), (200, 50), [_wall(100, 0, 50)]) == []


def test_crossing_near_segment_end_is_ignored():
    assert crossing_xs((0, 50), (200, 50), [_wall(5), _wall(196)]) == []
    assert crossing_xs((0, 50), (200, 50), [_wall(7)]) == [7]


def test_coincident_crossings_collapse():
    walls = [_wall(100, owner=("p", "p")), _wall(100, owner=("q", "q"))]
    assert crossing_xs((0, 50), (200, 50), walls) == [100]


def test_close_crossings_are_all_kept():
    walls = [_wall(100), _wall(108), _wall(130)]
    assert crossing_xs((0, 50), (200, 50), walls) == [100, 108, 130]
    assert crossing_xs((200, 50), (0, 50), walls) == [130, 108, 100]


def test_group_crossings_joins_overlapping_arcs():
    assert group_crossings([100, 108, 130]) == [(100, 108), (130, 130)]
    assert group_crossings([130, 108, 100]) == [(130, 130), (108, 100)]
    assert group_crossings([100, 112]) == [(100, 100), (112, 112)]


def test_close_crossings_share_one_wider_arc():
    jog = _path("a", "b", [(0, 0), (0, 50), (100, 50), (100, 100)])
    w1 = _path("c", "d", [(40, 0), (40, 100)], RouteKind.DIRECT)
    w2 = _path("e", "f", [(48, 0), (48, 100)], RouteKind.DIRECT)
    resolve_crossings([jog, w1, w2])
    assert jog.d == "M 0 0 L 0 50 L 34 50 A 10 10 0 0 1 54 50 L 100 50 L 100 100"


def test_close_crossings_right_to_left():
    path = _path("a", "b", [(200, 0), (200, 50), (0, 50), (0, 100)])
    walls = [
        _path("c", "d", [(x, 0), (x, 100)], RouteKind.DIRECT) for x in (100, 108, 130)
    ]
    resolve_crossings([path, *walls])
    assert "L 136 50 A 6 6 0 0 0 124 50" in path.d
    assert "L 114 50 A 10 10 0 0 0 94 50" in path.d


def test_path_does_not_jump_itself():
    path = _path("a", "b", [(0, 0), (0, 50), (200, 50), (200, 0), (100, 0), (100, 100)])
    resolve_crossings([path])
    assert "A" not in path.d


def test_custom_radius():
    jog = _path("a", "b", [(0, 0), (0, 50), (200, 50), (200, 100)])
    wall = _path("c", "d", [(100, 0), (100, 100)], RouteKind.DIRECT)
    resolve_crossings([jog, wall], jump_radius=10)
    assert "L 90 50 A 10 10 0 0 1 110 50" in jog.d


def test_paths_with_same_display_id_still_cross():
    jog = _path("a->b", "c", [(0, 0), (0, 50), (200, 50), (200, 100)])
    wall = _path("a", "b->c", [(100, 0), (100, 100)], RouteKind.DIRECT)
    assert jog.id == wall.id
    resolve_crossings([jog, wall])
    assert "L 94 50 A 6 6 0 0 1 106 50" in jog.d
