"""Layout constants used across layout modules.

Centralizes the grid, lane, jump and block dimensions used by engine.py,
routing/, blocks.py and session.py.
"""

# ---------------------------------------------------------------------------
# Course cards and grid
# ---------------------------------------------------------------------------
CARD_WIDTH: float = 140.0
"""Width of a course card."""

CARD_HEIGHT: float = 80.0
"""Height of a course card."""

BASE_COL_GAP: float = 60.0
"""Horizontal gap between columns before any lanes are added."""

BASE_ROW_GAP: float = 60.0
"""Minimum vertical gap between semester rows."""

SEM_LABEL_WIDTH: float = 40.0
"""Width reserved for the semester label column."""

SIDE_GAP: float = 60.0
"""Left padding from canvas edge to the semester label column."""

GRID_LEFT: float = SIDE_GAP + SEM_LABEL_WIDTH
"""X of the first grid column."""

MAX_SEMESTER: int = 12
"""Highest semester row a course may occupy."""

MAX_COLUMNS: int = 12
"""Number of grid columns; valid column indices are 0 to MAX_COLUMNS - 1."""

# ---------------------------------------------------------------------------
# Lanes
# ---------------------------------------------------------------------------
LANE_SPACING: float = 12.0
"""Distance between adjacent lanes in a gap."""

LANE_INSET: float = 10.0
"""Offset of lane 0 from the top edge of a row gap."""

ROW_GAP_LANE_PADDING: float = 40.0
"""Extra row-gap height on top of the space taken by its lanes."""

CORRIDOR_INSET: float = 20.0
"""Offset of vertical lane 0 from the right edge of its column."""

# ---------------------------------------------------------------------------
# Crossings
# ---------------------------------------------------------------------------
JUMP_RADIUS: float = 6.0
"""Radius of the arc drawn where a horizontal segment crosses a vertical one."""

COORD_TOLERANCE: float = 0.1
"""Tolerance for deciding a segment is horizontal or vertical."""

# ---------------------------------------------------------------------------
# Elective blocks
# ---------------------------------------------------------------------------
BLOCK_WIDTH: float = CARD_WIDTH + 40.0
"""Width of an elective block container."""

BLOCK_HEADER: float = 40.0
"""Space above the first member slot (block name and credit rule)."""

BLOCK_SLOT: float = 90.0
"""Height of one member course slot inside a block."""

BLOCK_FOOTER: float = 20.0
"""Padding below the last member slot."""

BLOCK_INSET: float = 20.0
"""Horizontal inset of member slots inside a block."""

BLOCK_H_GAP: float = 40.0
"""Horizontal gap between packed blocks."""

BLOCK_V_GAP: float = 40.0
"""Vertical gap between rows of packed blocks."""

BLOCK_ZONE_MARGIN: float = 80.0
"""Gap between the bottom of the grid and the first row of blocks."""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_MARGIN: float = 100.0
"""Padding below the lowest block."""

MIN_CANVAS_WIDTH: float = 2000.0
"""Minimum total canvas width."""

# ---------------------------------------------------------------------------
# Viewport
# ---------------------------------------------------------------------------
MIN_ZOOM: float = 0.2
MAX_ZOOM: float = 2.0
ZOOM_STEP: float = 0.1
WHEEL_ZOOM_SENSITIVITY: float = 0.001
