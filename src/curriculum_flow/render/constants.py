"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Cards
# ---------------------------------------------------------------------------
CARD_TEXT_INSET: float = 12.0
"""Left inset of card text."""

CARD_CODE_BASELINE: float = 22.0
"""Distance from card top to the course code baseline."""

CARD_NAME_BASELINE: float = 42.0
"""Distance from card top to the course name baseline."""

CARD_CREDIT_INSET: float = 10.0
"""Distance from card bottom to the credit line baseline."""

CARD_NAME_MAX_CHARS: int = 22
"""Course names longer than this are truncated with an ellipsis."""

RING_WIDTH: float = 3.0
"""Stroke width of the status ring around a highlighted card."""

# ---------------------------------------------------------------------------
# Edges
# ---------------------------------------------------------------------------
ARROW_SIZE: float = 6.0
"""Arrowhead marker size."""

CONNECTOR_DASH: str = "5,5"
"""Dash pattern of block connector lines."""

# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------
BLOCK_CORNER_RADIUS: float = 16.0
BLOCK_DASH: str = "6,4"
BLOCK_LABEL_INSET: float = 16.0
BLOCK_LABEL_BASELINE: float = 22.0
