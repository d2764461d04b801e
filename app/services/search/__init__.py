from .aircraft import AircraftCapacityTable
from .validators import SeatAvailabilityValidator, LayoverValidator
from .itinerary_search import ItinerarySearchEngine, SearchConfig
from .itinerary_builder import ItineraryBuilder
from .timeutils import (
    FlightTime,
    parse_flight_time,
    format_flight_time,
    day_bucket,
    is_late_enough_to_spill_to_next_day,
    add_one_day,
    connection_gap_millis
)

__all__ = [
    'AircraftCapacityTable',
    'SeatAvailabilityValidator',
    'LayoverValidator',
    'ItinerarySearchEngine',
    'SearchConfig',
    'ItineraryBuilder',
    'FlightTime',
    'parse_flight_time',
    'format_flight_time',
    'day_bucket',
    'is_late_enough_to_spill_to_next_day',
    'add_one_day',
    'connection_gap_millis'
]
