"""Interactive flowchart session: hover, drag and auto-layout commands.

A session owns the catalog for one editor view and recomputes the layout
lazily: commands that change layout inputs mark it dirty, and the next
read of ``geometry`` runs a full pass. Viewport pan and zoom never touch
layout state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from curriculum_flow.layout.blocks import BlockDrag
from curriculum_flow.layout.constants import (
    MAX_ZOOM,
    MIN_ZOOM,
    WHEEL_ZOOM_SENSITIVITY,
    ZOOM_STEP,
)
from curriculum_flow.layout.engine import LayoutGeometry, compute_layout
from curriculum_flow.layout.ordering import normalize_columns, swap_into_cell
from curriculum_flow.parser.model import Catalog, Manual, NodeStatus, Packed

logger = logging.getLogger(__name__)


@dataclass
class Viewport:
    """Pan/zoom transform applied on top of the layout."""

    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0

    def pan(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def zoom_by(self, delta: float) -> None:
        self.scale = min(max(MIN_ZOOM, self.scale + delta), MAX_ZOOM)

    def zoom_in(self) -> None:
        self.zoom_by(ZOOM_STEP)

    def zoom_out(self) -> None:
        self.zoom_by(-ZOOM_STEP)

    def wheel(self, delta_x: float, delta_y: float, zoom: bool = False) -> None:
        """Apply a wheel event: pan by default, zoom while ctrl/cmd is held."""
        if zoom:
            self.zoom_by(-delta_y * WHEEL_ZOOM_SENSITIVITY)
        else:
            self.pan(-delta_x, -delta_y)

    def reset(self) -> None:
        self.x, self.y, self.scale = 0.0, 0.0, 1.0

    def to_canvas(self, screen_x: float, screen_y: float) -> tuple[float, float]:
        """Map a screen point to canvas coordinates."""
        return ((screen_x - self.x) / self.scale, (screen_y - self.y) / self.scale)


class FlowchartSession:
    """Command surface over one catalog."""

    def __init__(self, catalog: Catalog, scope: str = "all", **layout_options):
        self.catalog = catalog
        self.scope = scope
        self.layout_options = layout_options
        self.viewport = Viewport()
        self.hovered: str | None = None
        self.drag: BlockDrag | None = None
        self._pointer_start = (0.0, 0.0)
        self._geometry: LayoutGeometry | None = None

    # ------------------------------------------------------------------
    # Layout access
    # ------------------------------------------------------------------

    @property
    def geometry(self) -> LayoutGeometry:
        if self._geometry is None:
            self._geometry = compute_layout(
                self.catalog,
                hovered=self.hovered,
                drag=self.drag,
                scope=self.scope,
                **self.layout_options,
            )
        return self._geometry

    def invalidate(self) -> None:
        """Force a recompute on next access (e.g. after an external edit)."""
        self._geometry = None

    def status(self, course_id: str) -> NodeStatus:
        return self.geometry.statuses.get(course_id, NodeStatus.NORMAL)

    # ------------------------------------------------------------------
    # Hover
    # ------------------------------------------------------------------

    def set_hovered(self, course_id: str | None) -> None:
        if course_id == self.hovered:
            return
        self.hovered = course_id
        self.invalidate()

    def set_scope(self, scope: str) -> None:
        if scope == self.scope:
            return
        self.scope = scope
        self.invalidate()

    # ------------------------------------------------------------------
    # Block drag
    # ------------------------------------------------------------------

    def begin_block_drag(
        self,
        block_id: str,
        pointer_x: float = 0.0,
        pointer_y: float = 0.0,
    ) -> bool:
        """Start dragging a block from where it is currently drawn.

        ``pointer_x``/``pointer_y`` are the screen coordinates of the press.

        Starting a drag while another is active cancels the earlier one.
        Returns False if the block is not on the canvas.
        """
        if self.drag is not None:
            self.cancel_block_drag()
        rect = self.geometry.blocks.get(block_id)
        if rect is None:
            logger.debug("Ignoring drag of block %s: not on canvas", block_id)
            return False
        self.drag = BlockDrag(block_id, rect.x, rect.y)
        self._pointer_start = (pointer_x, pointer_y)
        return True

    def update_block_drag(self, pointer_x: float, pointer_y: float) -> None:
        """Follow the pointer; the delta from the press is scaled to canvas units."""
        if self.drag is None:
            return
        scale = self.viewport.scale
        start_x, start_y = self._pointer_start
        self.drag = BlockDrag(
            self.drag.block_id,
            self.drag.origin_x,
            self.drag.origin_y,
            (pointer_x - start_x) / scale,
            (pointer_y - start_y) / scale,
        )
        self.invalidate()

    def end_block_drag(self) -> bool:
        """Commit the dragged position to the block. No-op without a drag.

        Returns True when a position was written.
        """
        drag = self.drag
        if drag is None:
            return False
        self.drag = None
        self.invalidate()

        block = self.catalog.blocks.get(drag.block_id)
        if block is None or not drag.moved:
            return False
        final = drag.placement
        # Single attribute swap: the block sees the old or the new position
        block.placement = Manual(final.x, final.y)
        return True

    def cancel_block_drag(self) -> None:
        if self.drag is None:
            return
        self.drag = None
        self.invalidate()

    # ------------------------------------------------------------------
    # Grid edits
    # ------------------------------------------------------------------

    def move_course(self, course_id: str, semester: int, col_index: int) -> bool:
        """Drop a course onto a cell of its semester, swapping with the occupant."""
        moved = swap_into_cell(self.catalog, course_id, semester, col_index)
        if moved:
            self.invalidate()
        return moved

    def auto_layout(self) -> None:
        """Clear manual block positions and renumber grid columns."""
        self.cancel_block_drag()
        for block in self.catalog.blocks.values():
            block.placement = Packed()
        normalize_columns(self.catalog)
        self.viewport.reset()
        self.invalidate()
