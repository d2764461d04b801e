"""
API and domain models package
"""

from .domain import (
    Aircraft,
    Airport,
    Flight,
    PartialItinerary,
    ReservationOption,
    SeatClass
)
from .schemas import (
    SearchRequest,
    SearchResponse,
    FlightLeg,
    Itinerary,
    Price,
    SearchMetadata,
    ErrorResponse,
    AirportListResponse
)

__all__ = [
    'Aircraft',
    'Airport',
    'Flight',
    'PartialItinerary',
    'ReservationOption',
    'SeatClass',
    'SearchRequest',
    'SearchResponse',
    'FlightLeg',
    'Itinerary',
    'Price',
    'SearchMetadata',
    'ErrorResponse',
    'AirportListResponse'
]
