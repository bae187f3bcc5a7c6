"""Elective block placement below the course grid.

Blocks are packed left-to-right in rows and wrap when the next block would
run past the grid's right edge. A block's position source is one of
``Packed``, ``Manual`` or ``Dragging``; an in-progress drag beats a
persisted position, which beats packing. Manual and dragged blocks do not
take a packed slot.
"""

from __future__ import annotations

__all__ = [
    "BlockConnector",
    "BlockDrag",
    "BlockGeometry",
    "block_connectors",
    "block_height",
    "effective_placement",
    "layout_blocks",
]

import logging
from dataclasses import dataclass, field

from curriculum_flow.layout.constants import (
    BLOCK_FOOTER,
    BLOCK_H_GAP,
    BLOCK_HEADER,
    BLOCK_INSET,
    BLOCK_SLOT,
    BLOCK_V_GAP,
    BLOCK_WIDTH,
    BLOCK_ZONE_MARGIN,
    GRID_LEFT,
)
from curriculum_flow.layout.routing.common import Point, straight_path_command
from curriculum_flow.parser.model import BlockPlacement, Dragging, ElectiveBlock, Manual

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockDrag:
    """Transient drag of one block: where it started and how far it moved."""

    block_id: str
    origin_x: float
    origin_y: float
    dx: float = 0.0
    dy: float = 0.0

    @property
    def placement(self) -> Dragging:
        return Dragging(self.origin_x + self.dx, self.origin_y + self.dy)

    @property
    def moved(self) -> bool:
        return self.dx != 0.0 or self.dy != 0.0


@dataclass
class BlockGeometry:
    """Bounding rectangle of a placed elective block and its member slots."""

    block_id: str
    x: float
    y: float
    width: float
    height: float
    placement: BlockPlacement
    course_ids: list[str] = field(default_factory=list)

    @property
    def top_center(self) -> Point:
        return (self.x + self.width / 2, self.y)

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def slot_origin(self, index: int) -> Point:
        """Top-left of the member slot at ``index``."""
        return (self.x + BLOCK_INSET, self.y + BLOCK_HEADER + index * BLOCK_SLOT)


@dataclass
class BlockConnector:
    """Dashed link from a member course card down to its block."""

    course_id: str
    block_id: str
    points: list[Point]
    d: str = ""


def block_height(member_count: int) -> float:
    return BLOCK_HEADER + member_count * BLOCK_SLOT + BLOCK_FOOTER


def effective_placement(block: ElectiveBlock, drag: BlockDrag | None = None) -> BlockPlacement:
    """Resolve which position source applies to ``block`` this pass."""
    if drag is not None and drag.block_id == block.id:
        return drag.placement
    return block.placement


def layout_blocks(
    blocks: list[ElectiveBlock],
    scope_ids: set[str],
    grid_bottom: float,
    max_row_width: float,
    drag: BlockDrag | None = None,
    block_width: float = BLOCK_WIDTH,
) -> tuple[dict[str, BlockGeometry], float]:
    """Place every block that has at least one member in scope.

    Returns (geometry per block ID, bottom of the packed rows).
    """
    geometries: dict[str, BlockGeometry] = {}

    cursor_x = GRID_LEFT
    cursor_y = grid_bottom + BLOCK_ZONE_MARGIN
    row_height = 0.0

    for block in blocks:
        members = [cid for cid in block.course_ids if cid in scope_ids]
        if not members:
            logger.debug("Skipping block %s: no members in scope", block.id)
            continue

        height = block_height(len(members))
        placement = effective_placement(block, drag)

        if isinstance(placement, (Manual, Dragging)):
            x, y = placement.x, placement.y
        else:
            if cursor_x + block_width > max_row_width and cursor_x > GRID_LEFT:
                cursor_x = GRID_LEFT
                cursor_y += row_height + BLOCK_V_GAP
                row_height = 0.0
            x, y = cursor_x, cursor_y
            row_height = max(row_height, height)
            cursor_x += block_width + BLOCK_H_GAP

        geometries[block.id] = BlockGeometry(
            block_id=block.id,
            x=x,
            y=y,
            width=block_width,
            height=height,
            placement=placement,
            course_ids=members,
        )

    return geometries, cursor_y + row_height


def block_connectors(
    block: BlockGeometry,
    member_bottoms: dict[str, Point],
) -> list[BlockConnector]:
    """Route connectors from each placed member's card bottom to ``block``.

    Each connector drops to the vertical midpoint, runs across, then drops
    into the block's top centre.
    """
    end_x, end_y = block.top_center
    connectors: list[BlockConnector] = []
    for cid in block.course_ids:
        start = member_bottoms.get(cid)
        if start is None:
            continue
        mid_y = start[1] + (end_y - start[1]) / 2
        points = [start, (start[0], mid_y), (end_x, mid_y), (end_x, end_y)]
        connectors.append(BlockConnector(
            course_id=cid,
            block_id=block.block_id,
            points=points,
            d=straight_path_command(points),
        ))
    return connectors
