"""Dark grey theme."""

from curriculum_flow.parser.model import CourseType, NodeStatus
from curriculum_flow.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    semester_label_color="#aaaaaa",
    semester_label_font_size=13.0,
    card_colors={
        CourseType.REQUIRED: ("#3a3a3a", "#5a5a5a", "#f0f0f0"),
        CourseType.SELECTED_ELECTIVE: ("#2f3b52", "#4b6286", "#dbe7ff"),
        CourseType.ELECTIVE: ("#2f4536", "#4f7a5c", "#dcfce7"),
    },
    card_font_size=13.0,
    card_name_font_size=10.0,
    edge_color="#6b6b6b",
    edge_width=1.5,
    edge_upstream_color="#fbbf24",
    edge_downstream_color="#34d399",
    edge_highlight_width=2.5,
    edge_dim_opacity=0.15,
    block_fill="rgba(255, 255, 255, 0.06)",
    block_stroke="rgba(255, 255, 255, 0.25)",
    block_active_fill="rgba(251, 191, 36, 0.12)",
    block_active_stroke="#fbbf24",
    block_label_color="#c7d2fe",
    block_font_size=12.0,
    connector_color="#fbbf24",
    status_rings={
        NodeStatus.FOCUSED: "#a5b4fc",
        NodeStatus.BLOCK_SIBLING: "#fbbf24",
        NodeStatus.COREQ: "#818cf8",
        NodeStatus.ANCESTOR: "#fbbf24",
        NodeStatus.DESCENDANT: "#34d399",
    },
)
