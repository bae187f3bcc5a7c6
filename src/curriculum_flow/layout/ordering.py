"""Column ordering within semesters.

Auto layout renumbers each semester's columns densely from 0, ordering
courses by (essential first, course-type tier, code). Manual reordering
swaps two cells within one semester.
"""

from __future__ import annotations

from collections import defaultdict

from curriculum_flow.parser.model import Catalog, Course


def column_priority(course: Course) -> tuple[int, int, str, str]:
    """Sort key for auto layout: essential, then type tier, then code."""
    return (
        0 if course.is_essential else 1,
        course.course_type.tier,
        course.code.casefold(),
        course.code,
    )


def normalize_columns(catalog: Catalog) -> dict[str, int]:
    """Reassign ``col_index`` in every semester by ``column_priority``.

    Courses without a semester are left untouched. Returns the new column
    per course ID for the courses that were renumbered.
    """
    by_semester: dict[int, list[Course]] = defaultdict(list)
    for course in catalog.courses.values():
        if course.semester is not None and course.semester >= 1:
            by_semester[course.semester].append(course)

    assigned: dict[str, int] = {}
    for semester in sorted(by_semester):
        ordered = sorted(by_semester[semester], key=column_priority)
        for col, course in enumerate(ordered):
            course.col_index = col
            assigned[course.id] = col
    return assigned


def swap_into_cell(catalog: Catalog, course_id: str, semester: int, col_index: int) -> bool:
    """Move a course to a cell of its own semester, swapping with any occupant.

    Cross-semester moves are rejected. Returns True when anything moved.
    """
    course = catalog.courses.get(course_id)
    if course is None or course.semester is None or col_index < 0:
        return False
    if course.semester != semester or course.col_index == col_index:
        return False

    occupant = catalog.course_at(semester, col_index)
    if occupant is not None and occupant.id != course.id:
        occupant.col_index = course.col_index
    course.col_index = col_index
    return True
