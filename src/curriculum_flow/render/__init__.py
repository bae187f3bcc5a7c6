"""SVG rendering for curriculum flowcharts."""

from curriculum_flow.render.svg import render_svg

__all__ = ["render_svg"]
