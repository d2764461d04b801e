"""
Database models package
"""

from .schema import (
    Base,
    Airport,
    Aircraft,
    ScheduledFlight
)

__all__ = [
    'Base',
    'Airport',
    'Aircraft',
    'ScheduledFlight'
]
