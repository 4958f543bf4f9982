"""
business logic services
"""

from .forecast import ForecastService
from .helpers import to_display_string, to_number

__all__ = ["ForecastService", "to_display_string", "to_number"]
