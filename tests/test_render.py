"""Tests for SVG rendering."""

import xml.etree.ElementTree as ET

import pytest
from catalogs import SAMPLE_JSON, xyz_catalog

from curriculum_flow.layout import compute_layout
from curriculum_flow.parser import parse_catalog
from curriculum_flow.parser.model import CourseType, NodeStatus
from curriculum_flow.render import render_svg
from curriculum_flow.themes import DARK_THEME, LIGHT_THEME, THEMES

SVG_NS = "{http://www.w3.org/2000/svg}"


def _render(catalog, theme=LIGHT_THEME, **layout_kwargs):
    geometry = compute_layout(catalog, **layout_kwargs)
    svg = render_svg(catalog, geometry, theme)
    return geometry, svg, ET.fromstring(svg)


def _texts(root):
    return ["".join(t.itertext()) for t in root.iter(f"{SVG_NS}text")]


def _edge_paths(root):
    return [p for p in root.iter(f"{SVG_NS}path") if p.get("fill") == "none"]


def test_render_is_valid_svg():
    geometry, _, root = _render(xyz_catalog())
    assert root.tag == f"{SVG_NS}svg"
    assert float(root.get("width")) == geometry.width
    assert float(root.get("height")) == geometry.height


def test_edges_use_routed_commands():
    geometry, _, root = _render(xyz_catalog())
    drawn = {p.get("d") for p in _edge_paths(root)}
    for _, d in geometry.path_commands():
        assert d in drawn


def test_cards_and_semester_labels():
    _, _, root = _render(parse_catalog(SAMPLE_JSON.read_text()))
    texts = _texts(root)
    for label in ("S1", "S2", "S3", "S4"):
        assert label in texts
    assert "CS101" in texts
    assert "Calculus I" in texts
    assert "4 cr" in texts
    # Unplaced course only appears inside its block
    assert texts.count("CS470") == 1


def test_blocks_rendered_with_credit_rule():
    _, _, root = _render(parse_catalog(SAMPLE_JSON.read_text()))
    texts = _texts(root)
    assert "Systems Electives" in texts
    assert "Min: 6 cr" in texts
    assert "AI Electives" in texts
    assert "Retired Track" not in texts


def test_long_names_are_truncated():
    catalog = xyz_catalog()
    catalog.courses["x"].name = "Introduction to Very Long Course Names"
    _, _, root = _render(catalog)
    names = [t for t in _texts(root) if t.startswith("Introduction")]
    assert names == ["Introduction to Very …"]


def test_hover_emphasis():
    catalog = parse_catalog(SAMPLE_JSON.read_text())
    _, svg, root = _render(catalog, hovered="c-ds")
    strokes = {p.get("stroke") for p in _edge_paths(root)}
    assert LIGHT_THEME.edge_upstream_color in strokes
    assert LIGHT_THEME.edge_downstream_color in strokes
    assert LIGHT_THEME.status_rings[NodeStatus.FOCUSED] in svg
    dimmed = [p for p in _edge_paths(root) if p.get("opacity") == "0.1"]
    assert dimmed


def test_connectors_drawn_for_active_block():
    catalog = parse_catalog(SAMPLE_JSON.read_text())
    _, _, root = _render(catalog, hovered="c-net")
    dashed = [p for p in _edge_paths(root)
              if p.get("stroke") == LIGHT_THEME.connector_color
              and p.get("stroke-dasharray")]
    assert len(dashed) == 2


@pytest.mark.parametrize("name", sorted(THEMES))
def test_every_theme_renders(name):
    _, svg, _ = _render(parse_catalog(SAMPLE_JSON.read_text()), theme=THEMES[name])
    assert THEMES[name].background_color in svg


def test_dark_theme_card_colors():
    _, svg, _ = _render(xyz_catalog(), theme=DARK_THEME)
    fill = DARK_THEME.card_colors[CourseType.REQUIRED][0]
    assert DARK_THEME.background_color in svg
    assert fill in svg
