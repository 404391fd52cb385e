"""
Dashboard data loading functions.

This module provides quote loading for the dashboard, cached for a short TTL.
"""

from strikepath.dashboard.data.market import fetch_quote, load_quote

__all__ = [
    "fetch_quote",
    "load_quote",
]
