"""
Flight-data dependency for FastAPI
"""

from functools import lru_cache

from database.config import SessionLocal
from app.core.config import settings
from app.services.flight_data import (
    CachedFlightDataSource,
    DatabaseFlightDataSource,
    FlightDataSource
)


@lru_cache(maxsize=1)
def _shared_flight_source() -> FlightDataSource:
    source = DatabaseFlightDataSource(SessionLocal, settings.TICKET_AGENCY)
    if settings.FLIGHT_CACHE_ENABLED:
        return CachedFlightDataSource(source)
    return source


def get_flight_source() -> FlightDataSource:
    """
    Flight-data source dependency for FastAPI routes.
    Every request shares one source, and with it one cache.
    """
    return _shared_flight_source()
