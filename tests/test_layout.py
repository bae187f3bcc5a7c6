"""Tests for the layout engine."""

import logging

from catalogs import (
    SAMPLE_JSON,
    course,
    crossing_catalog,
    elective_catalog,
    make_catalog,
    xyz_catalog,
)
from layout_validator import Severity, validate_layout

from curriculum_flow.layout import compute_layout
from curriculum_flow.layout.blocks import BlockDrag
from curriculum_flow.layout.engine import place_courses
from curriculum_flow.parser import parse_catalog
from curriculum_flow.parser.model import Dragging, Manual, NodeStatus


def _sample():
    return parse_catalog(SAMPLE_JSON.read_text())


def test_xyz_end_to_end():
    geometry = compute_layout(xyz_catalog())
    assert geometry.path_commands() == [
        ("x->y", "M 170 80 L 170 140"),
        ("x->z", "M 170 80 L 170 90 L 370 90 L 370 140"),
    ]
    assert geometry.lanes.row_gap_counts == {1: 1}
    assert geometry.lanes.col_gap_counts == {}
    node = geometry.nodes["z"]
    assert (node.x, node.y) == (300.0, 140.0)
    assert node.top == (370.0, 140.0)
    assert node.bottom == (370.0, 220.0)
    assert geometry.width == 2000.0
    assert geometry.height == 460.0


def test_crossing_end_to_end():
    geometry = compute_layout(crossing_catalog())
    commands = dict(geometry.path_commands())
    assert commands["a1->a2"] == (
        "M 170 80 L 170 90 L 364 90 A 6 6 0 0 1 376 90 L 570 90 L 570 140"
    )
    assert commands["b1->b2"] == "M 370 80 L 370 140"


def test_layout_options_flow_through():
    geometry = compute_layout(crossing_catalog(), lane_spacing=20, jump_radius=4,
                              card_width=100, card_height=50)
    commands = dict(geometry.path_commands())
    assert commands["a1->a2"] == (
        "M 150 50 L 150 60 L 306 60 A 4 4 0 0 1 314 60 L 470 60 L 470 110"
    )


def test_layout_is_deterministic():
    first = compute_layout(_sample(), hovered="c-ds")
    second = compute_layout(_sample(), hovered="c-ds")
    assert first.path_commands() == second.path_commands()
    assert first.lanes == second.lanes
    assert {k: (b.x, b.y) for k, b in first.blocks.items()} == {
        k: (b.x, b.y) for k, b in second.blocks.items()
    }


def test_sample_has_no_violations():
    geometry = compute_layout(_sample())
    errors = [v for v in validate_layout(geometry) if v.severity == Severity.ERROR]
    assert errors == [], [v.message for v in errors]


def test_unplaced_and_dangling_references():
    geometry = compute_layout(_sample())
    assert geometry.unplaced == ["c-sec"]
    assert "c-sec" not in geometry.nodes
    assert ("c-os", "STAT999") in geometry.graph.dropped_refs
    # Edges to an unplaced course are not routed
    assert all("c-sec" not in p.id for p in geometry.paths)
    assert geometry.max_semester == 4


def test_cell_collision_keeps_first_course(caplog):
    with caplog.at_level(logging.WARNING, logger="curriculum_flow.layout.engine"):
        cells, unplaced = place_courses([course("a", 1, 0), course("b", 1, 0)])
    assert cells == {"a": (1, 0)}
    assert unplaced == ["b"]
    assert "collides" in caplog.text


def test_cells_outside_grid_are_not_placed(caplog):
    courses = [
        course("a", 1, 0), course("far", 10**9, 0), course("wide", 2, 10**9),
        course("last", 12, 11), course("over", 13, 0), course("edge", 1, 12),
    ]
    with caplog.at_level(logging.DEBUG, logger="curriculum_flow.layout.engine"):
        cells, unplaced = place_courses(courses)
    assert cells == {"a": (1, 0), "last": (12, 11)}
    assert unplaced == ["far", "wide", "over", "edge"]
    assert "outside the grid" in caplog.text


def test_huge_semester_does_not_stretch_layout():
    geometry = compute_layout(make_catalog(
        course("a", 1, 0), course("b", 10**9, 0, prereqs=["a"]),
    ))
    assert geometry.unplaced == ["b"]
    assert geometry.max_semester == 1
    assert geometry.paths == []


def test_empty_catalog():
    geometry = compute_layout(make_catalog())
    assert geometry.nodes == {}
    assert geometry.paths == []
    assert geometry.width == 2000.0


def test_hover_statuses():
    geometry = compute_layout(_sample(), hovered="c-os")
    statuses = geometry.statuses
    assert statuses["c-os"] == NodeStatus.FOCUSED
    assert statuses["c-net"] == NodeStatus.BLOCK_SIBLING
    assert statuses["c-ds"] == NodeStatus.ANCESTOR
    assert statuses["c-math1"] == NodeStatus.ANCESTOR
    assert statuses["c-math2"] == NodeStatus.FADED
    assert geometry.nodes["c-ds"].status == NodeStatus.ANCESTOR


def test_connectors_only_for_active_block():
    assert compute_layout(_sample()).connectors == []
    geometry = compute_layout(_sample(), hovered="c-os")
    assert {c.course_id for c in geometry.connectors} == {"c-net", "c-os"}
    assert {c.block_id for c in geometry.connectors} == {"b-sys"}


def test_blocks_placed_below_grid():
    geometry = compute_layout(elective_catalog())
    grid_bottom = geometry.grid.bottom
    assert (geometry.blocks["blk-a"].x, geometry.blocks["blk-a"].y) == (
        100.0, grid_bottom + 80.0,
    )
    assert geometry.blocks["blk-b"].x == 100.0 + 180.0 + 40.0


def test_sample_block_sources():
    geometry = compute_layout(_sample())
    assert set(geometry.blocks) == {"b-sys", "b-ai"}
    assert geometry.blocks["b-sys"].course_ids == ["c-net", "c-os", "c-sec"]
    assert geometry.blocks["b-ai"].placement == Manual(900.0, 820.0)


def test_drag_preview_does_not_touch_catalog():
    catalog = elective_catalog()
    drag = BlockDrag("blk-b", 10.0, 20.0, dx=5.0, dy=5.0)
    geometry = compute_layout(catalog, drag=drag)
    assert geometry.blocks["blk-b"].placement == Dragging(15.0, 25.0)
    assert (geometry.blocks["blk-b"].x, geometry.blocks["blk-b"].y) == (15.0, 25.0)
    assert catalog.blocks["blk-b"].is_manual is False


def test_canvas_grows_for_far_block():
    catalog = elective_catalog()
    catalog.blocks["blk-a"].placement = Manual(3000.0, 2000.0)
    geometry = compute_layout(catalog)
    assert geometry.width == 3000.0 + 180.0 + 60.0
    assert geometry.height == 2000.0 + geometry.blocks["blk-a"].height + 100.0


def test_abet_scope():
    geometry = compute_layout(_sample(), scope="abet")
    assert "c-phys1" not in geometry.nodes
    assert "c-ds" in geometry.nodes
    # b-sys keeps only c-os; b-ai has no ABET members
    assert set(geometry.blocks) == {"b-sys"}
    assert geometry.blocks["b-sys"].course_ids == ["c-os"]
