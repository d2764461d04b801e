"""
Breadth-first connecting-flight search
"""
import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List

from app.core.exceptions import FlightDataUnavailable
from app.models.domain import Flight, PartialItinerary, ReservationOption, SeatClass
from app.services.flight_data import FlightDataSource
from .aircraft import AircraftCapacityTable
from .timeutils import (
    DEFAULT_CANONICAL_ZONE,
    Timestamp,
    add_one_day,
    day_bucket,
    is_late_enough_to_spill_to_next_day,
    parse_flight_time,
)
from .validators import LayoverValidator, SeatAvailabilityValidator

logger = logging.getLogger(__name__)

FETCH_FAILURE_POLICIES = ("prune", "abort")


@dataclass(frozen=True)
class SearchConfig:
    """Constants governing one search session"""
    max_hops: int = 3
    min_layover_minutes: int = 30
    max_layover_minutes: int = 180
    next_day_cutoff_hour: int = 21
    canonical_timezone: str = DEFAULT_CANONICAL_ZONE
    fetch_failure_policy: str = "prune"
    avoid_revisits: bool = False

    def __post_init__(self):
        if self.max_hops < 1:
            raise ValueError(f"max_hops must be at least 1, got {self.max_hops}")
        if self.min_layover_minutes > self.max_layover_minutes:
            raise ValueError("min_layover_minutes exceeds max_layover_minutes")
        if self.fetch_failure_policy not in FETCH_FAILURE_POLICIES:
            raise ValueError(
                f"fetch_failure_policy must be one of {FETCH_FAILURE_POLICIES}, "
                f"got {self.fetch_failure_policy!r}"
            )

    @classmethod
    def from_settings(cls, settings) -> "SearchConfig":
        return cls(
            max_hops=settings.MAX_HOPS,
            min_layover_minutes=settings.MINIMUM_LAYOVER_TIME,
            max_layover_minutes=settings.MAXIMUM_LAYOVER_TIME,
            next_day_cutoff_hour=settings.NEXT_DAY_CUTOFF_HOUR,
            canonical_timezone=settings.CANONICAL_TIMEZONE,
            fetch_failure_policy=settings.FETCH_FAILURE_POLICY,
            avoid_revisits=settings.AVOID_AIRPORT_REVISITS,
        )


class ItinerarySearchEngine:
    """
    Enumerates every itinerary from one airport to another that satisfies
    seat availability, layover windows and the hop limit.

    Partial itineraries are expanded in FIFO order, so results come out in
    non-decreasing leg count. Airports may be revisited unless
    avoid_revisits is set; the hop limit is what ends the search.
    """

    def __init__(
        self,
        data_source: FlightDataSource,
        seat_validator: SeatAvailabilityValidator,
        layover_validator: LayoverValidator,
        config: SearchConfig = SearchConfig()
    ):
        self.data_source = data_source
        self.seat_validator = seat_validator
        self.layover_validator = layover_validator
        self.config = config

    @classmethod
    def for_session(
        cls,
        data_source: FlightDataSource,
        config: SearchConfig = SearchConfig()
    ) -> "ItinerarySearchEngine":
        """Build an engine whose capacity table is loaded from the source's catalog."""
        capacity_table = AircraftCapacityTable(data_source.fetch_aircraft_catalog())
        logger.debug("Loaded %d aircraft models", len(capacity_table))
        return cls(
            data_source,
            SeatAvailabilityValidator(capacity_table),
            LayoverValidator.from_minutes(
                config.min_layover_minutes, config.max_layover_minutes
            ),
            config,
        )

    def search(
        self,
        departure_airport: str,
        arrival_airport: str,
        departure_date: Timestamp,
        seat_class
    ) -> List[ReservationOption]:
        """
        Search for itineraries from departure_airport to arrival_airport.

        Args:
            departure_airport: Departure airport code
            arrival_airport: Arrival airport code
            departure_date: Departure time, 'yyyy MMM d HH:mm z'
            seat_class: SeatClass or its value ('Coach', 'FirstClass')

        Returns:
            ReservationOptions in discovery order

        Raises:
            TimestampParseError: if the departure date or any fetched flight
                time is malformed; no partial results are returned
        """
        seat_class = SeatClass.parse(seat_class)

        if departure_airport == arrival_airport:
            return []

        logger.info(
            "Searching %s -> %s from %s (%s, max %d legs)",
            departure_airport, arrival_airport, departure_date,
            seat_class.value, self.config.max_hops
        )

        options: List[ReservationOption] = []
        frontier: Deque[PartialItinerary] = deque()

        outbound = self._fetch(
            departure_airport,
            day_bucket(departure_date, self.config.canonical_timezone)
        )
        for flight in outbound:
            if self.seat_validator.has_seat(flight, seat_class):
                frontier.append((flight,))

        while frontier:
            current = frontier.popleft()
            last = current[-1]

            if last.arrival_code == arrival_airport:
                options.append(ReservationOption(legs=current))
                continue

            if len(current) >= self.config.max_hops:
                continue

            for candidate in self._connecting_flights(last):
                if not self.seat_validator.has_seat(candidate, seat_class):
                    continue
                if not self.layover_validator.is_valid(last.arrival_time, candidate.departure_time):
                    continue
                if self.config.avoid_revisits and self._revisits(current, candidate):
                    continue
                frontier.append(current + (candidate,))

        logger.info(
            "Found %d itineraries %s -> %s",
            len(options), departure_airport, arrival_airport
        )
        return options

    def _connecting_flights(self, last: Flight) -> List[Flight]:
        """
        Departures from last's arrival airport on its arrival day, plus the
        following day when the arrival is past the cutoff hour.
        """
        arrival = parse_flight_time(last.arrival_time)
        zone = self.config.canonical_timezone

        candidates = self._fetch(last.arrival_code, day_bucket(arrival, zone))
        if is_late_enough_to_spill_to_next_day(arrival, self.config.next_day_cutoff_hour, zone):
            candidates.extend(
                self._fetch(last.arrival_code, day_bucket(add_one_day(arrival), zone))
            )
        return candidates

    def _fetch(self, airport_code: str, bucket: str) -> List[Flight]:
        try:
            return list(self.data_source.fetch_flights(airport_code, bucket))
        except FlightDataUnavailable as e:
            if self.config.fetch_failure_policy == "abort":
                raise
            logger.warning("Pruning branch at %s on %s: %s", airport_code, bucket, e)
            return []

    @staticmethod
    def _revisits(current: PartialItinerary, candidate: Flight) -> bool:
        visited = {current[0].departure_code}
        visited.update(leg.arrival_code for leg in current)
        return candidate.arrival_code in visited
