"""curriculum-flow: semester-grid layout and orthogonal routing for curriculum flowcharts."""

__version__ = "0.1.0"
