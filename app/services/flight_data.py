"""
Flight-data sources consumed by the itinerary search.

The search needs two reads: the flights departing an airport on one day
bucket, and the aircraft catalog. The airport list backs the airports
endpoint. DatabaseFlightDataSource answers all three from the local
store; CachedFlightDataSource memoizes any source and can be shared by
concurrent searches.
"""
import logging
import threading
from typing import Callable, Dict, List, Optional, Protocol, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database.models import Aircraft as AircraftRow, Airport as AirportRow, ScheduledFlight
from app.core.exceptions import FlightDataUnavailable
from app.models.domain import Aircraft, Airport, Flight

logger = logging.getLogger(__name__)


class FlightDataSource(Protocol):

    def fetch_flights(self, airport_code: str, day_bucket: str) -> List[Flight]:
        """
        Flights departing airport_code on day_bucket ('yyyy_MM_dd').
        An empty list means no flights; failures raise FlightDataUnavailable.
        """
        ...

    def fetch_aircraft_catalog(self) -> List[Aircraft]:
        ...

    def fetch_airports(self) -> List[Airport]:
        ...


def flight_from_row(row: ScheduledFlight) -> Flight:
    """
    Create a Flight model from a ScheduledFlight row.
    """
    return Flight(
        number=row.number,
        airplane=row.airplane_model,
        flight_minutes=row.flight_minutes,
        departure_code=row.departure_code,
        departure_time=row.departure_time,
        arrival_code=row.arrival_code,
        arrival_time=row.arrival_time,
        coach_booked=row.coach_booked,
        first_class_booked=row.first_class_booked,
        coach_price=row.coach_price,
        first_class_price=row.first_class_price,
    )


def aircraft_from_row(row: AircraftRow) -> Aircraft:
    return Aircraft(
        model=row.model,
        manufacturer=row.manufacturer or "",
        coach_seats=row.coach_seats,
        first_class_seats=row.first_class_seats,
    )


def airport_from_row(row: AirportRow) -> Airport:
    return Airport(
        code=row.code,
        name=row.name,
        latitude=row.latitude,
        longitude=row.longitude,
    )


class DatabaseFlightDataSource:
    """
    Reads flights and aircraft from the SQLAlchemy store.
    Opens a short-lived session per fetch so one instance can serve
    several threads.
    """

    def __init__(self, session_factory: Callable[[], Session], ticket_agency: str):
        self.session_factory = session_factory
        self.ticket_agency = ticket_agency

    def fetch_flights(self, airport_code: str, day_bucket: str) -> List[Flight]:
        logger.debug(
            "Agency %s fetching departures from %s on %s",
            self.ticket_agency, airport_code, day_bucket
        )
        try:
            with self.session_factory() as db:
                rows = (
                    db.query(ScheduledFlight)
                    .filter(
                        ScheduledFlight.departure_code == airport_code,
                        ScheduledFlight.day_bucket == day_bucket
                    )
                    .order_by(ScheduledFlight.departure_time, ScheduledFlight.number)
                    .all()
                )
                return [flight_from_row(row) for row in rows]
        except SQLAlchemyError as e:
            raise FlightDataUnavailable(airport_code, day_bucket, str(e)) from e

    def fetch_aircraft_catalog(self) -> List[Aircraft]:
        try:
            with self.session_factory() as db:
                rows = db.query(AircraftRow).order_by(AircraftRow.model).all()
                return [aircraft_from_row(row) for row in rows]
        except SQLAlchemyError as e:
            raise FlightDataUnavailable("aircraft catalog", reason=str(e)) from e

    def fetch_airports(self) -> List[Airport]:
        try:
            with self.session_factory() as db:
                rows = db.query(AirportRow).order_by(AirportRow.code).all()
                return [airport_from_row(row) for row in rows]
        except SQLAlchemyError as e:
            raise FlightDataUnavailable("airport list", reason=str(e)) from e


class CachedFlightDataSource:
    """
    Memoizing wrapper around another source.

    Constructed explicitly and handed to each search service, so sessions
    can share one cache or keep their own. A lock guards the cache
    dictionaries; a reader either sees a complete cached result or none.
    Failed fetches are not cached.
    """

    def __init__(self, source: FlightDataSource):
        self.source = source
        self._lock = threading.Lock()
        self._flights: Dict[Tuple[str, str], Tuple[Flight, ...]] = {}
        self._aircraft: Optional[Tuple[Aircraft, ...]] = None
        self._airports: Optional[Tuple[Airport, ...]] = None

    def fetch_flights(self, airport_code: str, day_bucket: str) -> List[Flight]:
        key = (airport_code, day_bucket)
        with self._lock:
            cached = self._flights.get(key)
        if cached is not None:
            return list(cached)

        # Fetch outside the lock; concurrent misses on one key keep the first result
        flights = tuple(self.source.fetch_flights(airport_code, day_bucket))
        with self._lock:
            cached = self._flights.setdefault(key, flights)
        return list(cached)

    def fetch_aircraft_catalog(self) -> List[Aircraft]:
        with self._lock:
            cached = self._aircraft
        if cached is None:
            catalog = tuple(self.source.fetch_aircraft_catalog())
            with self._lock:
                if self._aircraft is None:
                    self._aircraft = catalog
                cached = self._aircraft
        return list(cached)

    def fetch_airports(self) -> List[Airport]:
        with self._lock:
            cached = self._airports
        if cached is None:
            airports = tuple(self.source.fetch_airports())
            with self._lock:
                if self._airports is None:
                    self._airports = airports
                cached = self._airports
        return list(cached)

    def clear(self):
        with self._lock:
            self._flights.clear()
            self._aircraft = None
            self._airports = None
        logger.info("Flight data cache cleared")

    def __len__(self):
        with self._lock:
            return len(self._flights)
