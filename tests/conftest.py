import json

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.exceptions import FlightDataUnavailable
from app.models.domain import Aircraft, Airport, Flight
from app.services.search import (
    AircraftCapacityTable,
    ItinerarySearchEngine,
    LayoverValidator,
    SearchConfig,
    SeatAvailabilityValidator,
    day_bucket,
)
from database.models import Base


class FakeFlightDataSource:
    """In-memory flight-data source that records every fetch."""

    def __init__(self, flights=(), aircraft=(), failing=(), airports=()):
        self.flights = list(flights)
        self.aircraft = list(aircraft)
        self.airports = list(airports)
        self.airports_unavailable = False
        self.failing = set(failing)
        self.calls = []

    def fetch_flights(self, airport_code, bucket):
        self.calls.append((airport_code, bucket))
        if (airport_code, bucket) in self.failing:
            raise FlightDataUnavailable(airport_code, bucket, "server timed out")
        return [
            flight for flight in self.flights
            if flight.departure_code == airport_code
            and day_bucket(flight.departure_time) == bucket
        ]

    def fetch_aircraft_catalog(self):
        return list(self.aircraft)

    def fetch_airports(self):
        if self.airports_unavailable:
            raise FlightDataUnavailable("airport list", reason="server timed out")
        return list(self.airports)


@pytest.fixture
def aircraft_catalog():
    """A small catalog, deliberately unsorted."""
    return [
        Aircraft(model="B737", manufacturer="Boeing", coach_seats=50, first_class_seats=5),
        Aircraft(model="A320", manufacturer="Airbus", coach_seats=100, first_class_seats=10),
        Aircraft(model="E190", manufacturer="Embraer", coach_seats=80, first_class_seats=0),
    ]


@pytest.fixture
def airport_list():
    """Airports for the in-memory source, deliberately unsorted."""
    return [
        Airport(code="LAX", name="Los Angeles International", latitude=33.94, longitude=-118.41),
        Airport(code="JFK", name="John F. Kennedy International", latitude=40.64, longitude=-73.78),
        Airport(code="ORD", name="O'Hare International"),
    ]


@pytest.fixture
def capacity_table(aircraft_catalog):
    return AircraftCapacityTable(aircraft_catalog)


@pytest.fixture
def make_flight():
    """Factory for flights on 2016 May 10 (GMT) unless full timestamps are given."""
    counter = iter(range(1000, 9999))

    def _make(origin, destination, departs, arrives, airplane="A320",
              coach_booked=0, first_class_booked=0, coach_price=100.0,
              first_class_price=400.0, number=None):
        if len(departs) == 5:
            departs = f"2016 May 10 {departs} GMT"
        if len(arrives) == 5:
            arrives = f"2016 May 10 {arrives} GMT"
        return Flight(
            number=number or str(next(counter)),
            airplane=airplane,
            departure_code=origin,
            departure_time=departs,
            arrival_code=destination,
            arrival_time=arrives,
            coach_booked=coach_booked,
            first_class_booked=first_class_booked,
            coach_price=coach_price,
            first_class_price=first_class_price,
        )

    return _make


@pytest.fixture
def fake_source_factory(aircraft_catalog, airport_list):
    def _make(flights, failing=()):
        return FakeFlightDataSource(flights, aircraft_catalog, failing, airport_list)
    return _make


@pytest.fixture
def engine_factory(capacity_table):
    """Build an engine over a source with default constants unless overridden."""
    def _make(source, **overrides):
        config = SearchConfig(**overrides)
        return ItinerarySearchEngine(
            source,
            SeatAvailabilityValidator(capacity_table),
            LayoverValidator.from_minutes(
                config.min_layover_minutes, config.max_layover_minutes
            ),
            config,
        )
    return _make


@pytest.fixture
def session_factory():
    """Session factory bound to a fresh in-memory SQLite store."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def snapshot_data():
    return {
        "airports": [
            {"code": "BOS", "name": "Logan International", "latitude": 42.36, "longitude": -71.01},
            {"code": "ORD", "name": "O'Hare International", "latitude": 41.97, "longitude": -87.90},
            {"code": "SFO", "name": "San Francisco International", "latitude": 37.62, "longitude": -122.37},
        ],
        "airplanes": [
            {"model": "A320", "manufacturer": "Airbus", "first_class_seats": 12, "coach_seats": 138},
            {"model": "B737", "manufacturer": "Boeing", "first_class_seats": 8, "coach_seats": 120},
        ],
        "flights": [
            {"number": "2816", "airplane": "A320", "flight_minutes": 157,
             "departure_code": "BOS", "departure_time": "2016 May 10 08:15 GMT",
             "arrival_code": "ORD", "arrival_time": "2016 May 10 10:52 GMT",
             "first_class_booked": 3, "coach_booked": 50,
             "first_class_price": 420.5, "coach_price": 98.1},
            {"number": "3104", "airplane": "B737", "flight_minutes": 270,
             "departure_code": "ORD", "departure_time": "2016 May 10 12:00 GMT",
             "arrival_code": "SFO", "arrival_time": "2016 May 10 16:30 GMT",
             "first_class_booked": 0, "coach_booked": 119,
             "first_class_price": 610.0, "coach_price": 180.4},
            {"number": "3105", "airplane": "B737", "flight_minutes": 355,
             "departure_code": "BOS", "departure_time": "2016 May 10 23:30 US/Eastern",
             "arrival_code": "SFO", "arrival_time": "2016 May 11 05:25 US/Eastern",
             "first_class_booked": 8, "coach_booked": 10},
            {"number": "9999", "airplane": "A320",
             "departure_code": "BOS", "departure_time": "2016-05-10 09:00",
             "arrival_code": "ORD", "arrival_time": "2016 May 10 11:00 GMT"},
            {"number": "9998", "airplane": "A320",
             "departure_code": "BOS", "departure_time": "2016 May 10 09:00 GMT"},
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path, snapshot_data):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot_data))
    return path
