"""Loader for curriculum catalogs stored as JSON.

The document is an object with ``title``, ``courses`` and ``blocks`` keys,
using the camelCase field names of the program editor that produces it.
Structural problems raise ``ValueError``; malformed scalar values fall back
to defaults so a partially filled catalog still lays out.
"""

from __future__ import annotations

import json
import logging
import math

from curriculum_flow.parser.model import (
    Catalog,
    Course,
    CourseType,
    ElectiveBlock,
    Manual,
    Packed,
)

logger = logging.getLogger(__name__)


def parse_catalog(text: str) -> Catalog:
    """Parse a JSON catalog document into a Catalog."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Catalog is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("Catalog must be a JSON object with a 'courses' list")

    raw_courses = data.get("courses", [])
    raw_blocks = data.get("blocks", [])
    if not isinstance(raw_courses, list):
        raise ValueError("'courses' must be a list")
    if not isinstance(raw_blocks, list):
        raise ValueError("'blocks' must be a list")

    catalog = Catalog(title=str(data.get("title") or ""))

    # Per-course "block" keys are folded into block member lists afterwards
    pending_membership: list[tuple[str, str]] = []

    for i, raw in enumerate(raw_courses):
        if not isinstance(raw, dict) or not raw.get("id"):
            raise ValueError(f"Course #{i} has no 'id'")
        course = _parse_course(raw)
        if course.id in catalog.courses:
            raise ValueError(f"Duplicate course id '{course.id}'")
        catalog.add_course(course)
        if raw.get("block"):
            pending_membership.append((course.id, str(raw["block"])))

    for i, raw in enumerate(raw_blocks):
        if not isinstance(raw, dict) or not raw.get("id"):
            raise ValueError(f"Block #{i} has no 'id'")
        catalog.add_block(_parse_block(raw))

    for course_id, block_id in pending_membership:
        block = catalog.blocks.get(block_id)
        if block is None:
            logger.debug("Course %s names unknown block %s", course_id, block_id)
            continue
        if course_id not in block.course_ids:
            block.course_ids.append(course_id)

    return catalog


def dump_catalog(catalog: Catalog) -> str:
    """Serialize a Catalog back to the JSON document format."""
    courses = []
    for c in catalog.courses.values():
        courses.append({
            "id": c.id,
            "code": c.code,
            "name": c.name,
            "semester": c.semester,
            "colIndex": c.col_index,
            "prerequisites": list(c.prerequisites),
            "coRequisites": list(c.corequisites),
            "credits": c.credits,
            "isEssential": c.is_essential,
            "isAbet": c.is_abet,
            "type": c.course_type.value,
        })

    blocks = []
    for b in catalog.blocks.values():
        entry = {
            "id": b.id,
            "name": b.name,
            "minCredits": b.min_credits,
            "courseIds": list(b.course_ids),
        }
        if isinstance(b.placement, Manual):
            entry["position"] = {"x": b.placement.x, "y": b.placement.y}
        blocks.append(entry)

    doc = {"title": catalog.title, "courses": courses, "blocks": blocks}
    return json.dumps(doc, indent=2, ensure_ascii=False) + "\n"


def _parse_course(raw: dict) -> Course:
    return Course(
        id=str(raw["id"]),
        code=str(raw.get("code") or ""),
        name=_parse_name(raw.get("name")),
        semester=_optional_int(raw.get("semester")),
        col_index=_optional_int(raw.get("colIndex")),
        prerequisites=_string_list(raw.get("prerequisites")),
        corequisites=_string_list(raw.get("coRequisites")),
        credits=_float(raw.get("credits")),
        is_essential=bool(raw.get("isEssential", False)),
        is_abet=bool(raw.get("isAbet", False)),
        course_type=_course_type(raw.get("type")),
    )


def _parse_block(raw: dict) -> ElectiveBlock:
    placement: Packed | Manual = Packed()
    pos = raw.get("position")
    if isinstance(pos, dict):
        x = _optional_float(pos.get("x"))
        y = _optional_float(pos.get("y"))
        if x is not None and y is not None:
            placement = Manual(x, y)

    return ElectiveBlock(
        id=str(raw["id"]),
        name=_parse_name(raw.get("name")) or str(raw["id"]),
        min_credits=_float(raw.get("minCredits")),
        course_ids=_string_list(raw.get("courseIds")),
        placement=placement,
    )


def _parse_name(value) -> str:
    """Accept a plain string or a localized {lang: text} mapping."""
    if isinstance(value, dict):
        for lang in ("en", "vi"):
            if value.get(lang):
                return str(value[lang])
        return next((str(v) for v in value.values() if v), "")
    return str(value) if value else ""


def _string_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def _optional_int(value) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _optional_float(value) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return result if math.isfinite(result) else None


def _float(value) -> float:
    result = _optional_float(value)
    return result if result is not None else 0.0


def _course_type(value) -> CourseType:
    try:
        return CourseType(str(value).upper())
    except ValueError:
        return CourseType.REQUIRED
