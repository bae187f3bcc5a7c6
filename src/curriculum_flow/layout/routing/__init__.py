"""Edge routing subpackage for curriculum flowcharts.

Public API:
- measure_grid: Lane-aware row/column pixel positions
- route_edges: Orthogonal waypoint generation per edge
- resolve_crossings: Jump arcs where horizontal runs cross other paths
- RoutedPath: Routed path dataclass
"""

from curriculum_flow.layout.routing.common import RoutedPath
from curriculum_flow.layout.routing.core import GridMetrics, measure_grid, route_edges
from curriculum_flow.layout.routing.jumps import resolve_crossings

__all__ = [
    "GridMetrics",
    "RoutedPath",
    "measure_grid",
    "resolve_crossings",
    "route_edges",
]
