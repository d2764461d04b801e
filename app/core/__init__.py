"""
Core configuration package
"""

from .config import settings
from .exceptions import (
    FlightSearchError,
    TimestampParseError,
    InvalidSeatClassError,
    FlightDataUnavailable
)

__all__ = [
    'settings',
    'FlightSearchError',
    'TimestampParseError',
    'InvalidSeatClassError',
    'FlightDataUnavailable'
]
