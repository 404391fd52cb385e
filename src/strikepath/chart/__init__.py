"""
Prediction chart engine.

Exports:
- ChartGeometry: screen <-> (price, date) mapping
- PathRecorder: pointer-driven path capture with decaying P&L cells
- DecayTicker: periodic tick source for cell decay
- summarize_path / PathInsights: summary of a finished path
"""

from strikepath.chart.decay_ticker import DecayTicker
from strikepath.chart.geometry import ChartGeometry
from strikepath.chart.insights import PathInsights, summarize_path
from strikepath.chart.path_recorder import PathRecorder

__all__ = [
    "ChartGeometry",
    "DecayTicker",
    "PathInsights",
    "PathRecorder",
    "summarize_path",
]
