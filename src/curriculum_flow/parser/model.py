"""Data model for curriculum flowcharts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CourseType(Enum):
    """Requirement tier of a course, in auto-layout priority order."""

    REQUIRED = "REQUIRED"
    SELECTED_ELECTIVE = "SELECTED_ELECTIVE"
    ELECTIVE = "ELECTIVE"

    @property
    def tier(self) -> int:
        return _TYPE_TIERS[self]


_TYPE_TIERS = {
    CourseType.REQUIRED: 0,
    CourseType.SELECTED_ELECTIVE: 1,
    CourseType.ELECTIVE: 2,
}


class EdgeKind(Enum):
    """Kind of dependency between two courses."""

    PREREQUISITE = "prerequisite"
    COREQUISITE = "corequisite"


class NodeStatus(Enum):
    """Display classification of a course relative to the focused course."""

    FOCUSED = "focused"
    BLOCK_SIBLING = "blockSibling"
    COREQ = "coreq"
    ANCESTOR = "ancestor"
    DESCENDANT = "descendant"
    FADED = "faded"
    NORMAL = "normal"


# ---------------------------------------------------------------------------
# Block placement: where a block's position comes from
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Packed:
    """Block is placed by the row-packing pass."""


@dataclass(frozen=True)
class Manual:
    """Block sits at a position persisted by a finished drag."""

    x: float
    y: float


@dataclass(frozen=True)
class Dragging:
    """Block follows an in-progress drag. Never stored on a block."""

    x: float
    y: float


BlockPlacement = Packed | Manual | Dragging


@dataclass
class Course:
    """A course card on the semester/column grid."""

    id: str
    code: str
    name: str = ""
    # None means the course cannot be placed on the grid
    semester: int | None = None
    col_index: int | None = None
    prerequisites: list[str] = field(default_factory=list)
    corequisites: list[str] = field(default_factory=list)
    credits: float = 0.0
    is_essential: bool = False
    is_abet: bool = False
    course_type: CourseType = CourseType.REQUIRED

    @property
    def is_placeable(self) -> bool:
        """Whether the course has a usable (semester, column) cell."""
        return (
            self.semester is not None
            and self.col_index is not None
            and self.semester >= 1
            and self.col_index >= 0
        )


@dataclass
class ElectiveBlock:
    """A named container grouping courses under a minimum-credit rule."""

    id: str
    name: str
    min_credits: float = 0.0
    course_ids: list[str] = field(default_factory=list)
    placement: Packed | Manual = field(default_factory=Packed)

    @property
    def is_manual(self) -> bool:
        return isinstance(self.placement, Manual)


@dataclass
class Catalog:
    """Complete flowchart input: ordered courses and elective blocks."""

    title: str = ""
    courses: dict[str, Course] = field(default_factory=dict)
    blocks: dict[str, ElectiveBlock] = field(default_factory=dict)

    def add_course(self, course: Course) -> None:
        self.courses[course.id] = course

    def add_block(self, block: ElectiveBlock) -> None:
        self.blocks[block.id] = block

    def blocks_for_course(self, course_id: str) -> list[str]:
        """Return IDs of the blocks listing a course, in block order."""
        return [bid for bid, b in self.blocks.items() if course_id in b.course_ids]

    def course_at(self, semester: int, col_index: int) -> Course | None:
        """Return the first course claiming a grid cell, or None."""
        for course in self.courses.values():
            if course.semester == semester and course.col_index == col_index:
                return course
        return None
