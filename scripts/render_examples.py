#!/usr/bin/env python3
"""Batch render every example catalog to SVG, once per theme.

Outputs go to /tmp/curriculum_flow_renders/.

Usage:
    python scripts/render_examples.py [--hover COURSE_ID]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from curriculum_flow.layout.engine import compute_layout  # noqa: E402
from curriculum_flow.parser.catalog import parse_catalog  # noqa: E402
from curriculum_flow.render.svg import render_svg  # noqa: E402
from curriculum_flow.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/curriculum_flow_renders")
EXAMPLES_DIR = project_root / "examples"


def render_file(
    json_path: Path, output_dir: Path, *, hovered: str | None = None
) -> tuple[str, list[str]]:
    """Parse, lay out, and render one catalog in every theme.

    Returns (name, list_of_issues).
    """
    name = json_path.stem
    issues: list[str] = []

    try:
        catalog = parse_catalog(json_path.read_text(encoding="utf-8"))
    except ValueError as e:
        return name, [f"PARSE ERROR: {e}"]

    geometry = compute_layout(catalog, hovered=hovered)
    if geometry.unplaced:
        issues.append(f"unplaced: {', '.join(geometry.unplaced)}")

    for theme_name, theme in THEMES.items():
        svg_path = output_dir / f"{name}_{theme_name}.svg"
        svg_path.write_text(render_svg(catalog, geometry, theme), encoding="utf-8")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--hover", default=None, help="Course ID to focus")
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    files = sorted(EXAMPLES_DIR.glob("*.json"))
    print(f"Rendering {len(files)} catalogs to {OUTPUT_DIR}")

    for path in files:
        name, issues = render_file(path, OUTPUT_DIR, hovered=args.hover)
        status = "OK" if not issues else "; ".join(issues)
        print(f"  {name}: {status}")


if __name__ == "__main__":
    main()
