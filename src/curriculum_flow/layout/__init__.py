"""Grid layout, lane allocation and routing for curriculum flowcharts."""

from curriculum_flow.layout.engine import LayoutGeometry, NodeGeometry, compute_layout

__all__ = ["LayoutGeometry", "NodeGeometry", "compute_layout"]
