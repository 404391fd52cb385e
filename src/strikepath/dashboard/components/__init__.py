"""
Dashboard UI components.
"""

from strikepath.dashboard.components.options_matrix import contracts_to_frame, options_matrix
from strikepath.dashboard.components.prediction_chart import (
    build_pnl_heatmap,
    build_prediction_figure,
    cell_color,
    replay_waypoints,
)

__all__ = [
    "contracts_to_frame",
    "options_matrix",
    "build_pnl_heatmap",
    "build_prediction_figure",
    "cell_color",
    "replay_waypoints",
]
