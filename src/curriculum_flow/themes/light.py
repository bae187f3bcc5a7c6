"""Light slate theme (matching the program editor's flowchart view)."""

from curriculum_flow.parser.model import CourseType, NodeStatus
from curriculum_flow.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#f8fafc",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    semester_label_color="#94a3b8",
    semester_label_font_size=13.0,
    card_colors={
        CourseType.REQUIRED: ("#ffffff", "#cbd5e1", "#0f172a"),
        CourseType.SELECTED_ELECTIVE: ("#eff6ff", "#bfdbfe", "#1e3a8a"),
        CourseType.ELECTIVE: ("#f0fdf4", "#bbf7d0", "#14532d"),
    },
    card_font_size=13.0,
    card_name_font_size=10.0,
    edge_color="#cbd5e1",
    edge_width=1.5,
    edge_upstream_color="#f59e0b",
    edge_downstream_color="#10b981",
    edge_highlight_width=2.5,
    edge_dim_opacity=0.1,
    block_fill="rgba(238, 242, 255, 0.2)",
    block_stroke="#c7d2fe",
    block_active_fill="#fffbeb",
    block_active_stroke="#fbbf24",
    block_label_color="#4338ca",
    block_font_size=12.0,
    connector_color="#f59e0b",
    status_rings={
        NodeStatus.FOCUSED: "#6366f1",
        NodeStatus.BLOCK_SIBLING: "#fbbf24",
        NodeStatus.COREQ: "#818cf8",
        NodeStatus.ANCESTOR: "#f59e0b",
        NodeStatus.DESCENDANT: "#10b981",
    },
)
