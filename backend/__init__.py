# backend/__init__.py
"""
presentation helpers for the forecast series
"""

from .context import format_series_to_context
from .frame import observations_to_frame

__all__ = ["format_series_to_context", "observations_to_frame"]
