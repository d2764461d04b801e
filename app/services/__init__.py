"""
Search services package
"""

from .flight_data import (
    FlightDataSource,
    DatabaseFlightDataSource,
    CachedFlightDataSource
)
from .search_service import FlightSearchService

__all__ = [
    'FlightDataSource',
    'DatabaseFlightDataSource',
    'CachedFlightDataSource',
    'FlightSearchService'
]
