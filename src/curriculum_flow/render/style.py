"""Theme and style constants for flowchart rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from curriculum_flow.parser.model import CourseType, NodeStatus


@dataclass
class Theme:
    """Visual theme for a curriculum flowchart."""

    name: str
    background_color: str
    label_font_family: str
    semester_label_color: str
    semester_label_font_size: float
    # Course cards: (fill, stroke, text) per course type
    card_colors: dict[CourseType, tuple[str, str, str]]
    card_font_size: float
    card_name_font_size: float
    # Edges
    edge_color: str
    edge_width: float
    edge_upstream_color: str
    edge_downstream_color: str
    edge_highlight_width: float
    edge_dim_opacity: float
    # Elective blocks
    block_fill: str
    block_stroke: str
    block_active_fill: str
    block_active_stroke: str
    block_label_color: str
    block_font_size: float
    connector_color: str
    # Status emphasis: ring stroke per highlighted status
    status_rings: dict[NodeStatus, str] = field(default_factory=dict)
    card_corner_radius: float = 12.0
    faded_opacity: float = 0.2
