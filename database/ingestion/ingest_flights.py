"""
Ingest a reservation-system snapshot (airports, airplanes, flights) from a
JSON file into the flight store

Expected layout:
    {
      "airports":  [{"code": "BOS", "name": "...", "latitude": 42.36, "longitude": -71.01}],
      "airplanes": [{"model": "A320", "manufacturer": "Airbus",
                     "first_class_seats": 12, "coach_seats": 138}],
      "flights":   [{"number": "2816", "airplane": "A320", "flight_minutes": 157,
                     "departure_code": "BOS", "departure_time": "2016 May 10 08:15 GMT",
                     "arrival_code": "ORD", "arrival_time": "2016 May 10 10:52 GMT",
                     "first_class_booked": 3, "coach_booked": 50,
                     "first_class_price": 420.5, "coach_price": 98.1}]
    }
"""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Callable, Dict, List

from sqlalchemy.orm import Session

from database.config import SessionLocal, init_db, reset_db
from database.models import Aircraft, Airport, ScheduledFlight
from app.core.config import settings
from app.core.exceptions import TimestampParseError
from app.services.search.timeutils import day_bucket, parse_flight_time

logger = logging.getLogger(__name__)


def ingest_airports(db: Session, records: List[Dict], stats: Counter):
    """
    Insert or update airport rows keyed by code
    """
    pending = {}
    for record in records:
        code = record.get('code')
        if not code:
            stats['airports_skipped'] += 1
            continue

        airport = pending.get(code)
        if airport is None:
            airport = db.query(Airport).filter(Airport.code == code).one_or_none()
        if airport is None:
            airport = Airport(code=code)
            db.add(airport)
        pending[code] = airport
        airport.name = record.get('name') or code
        airport.latitude = record.get('latitude')
        airport.longitude = record.get('longitude')
        stats['airports'] += 1


def ingest_aircraft(db: Session, records: List[Dict], stats: Counter):
    """
    Insert or update aircraft rows keyed by model
    """
    pending = {}
    for record in records:
        model = record.get('model')
        if not model:
            stats['airplanes_skipped'] += 1
            continue

        aircraft = pending.get(model)
        if aircraft is None:
            aircraft = db.query(Aircraft).filter(Aircraft.model == model).one_or_none()
        if aircraft is None:
            aircraft = Aircraft(model=model)
            db.add(aircraft)
        pending[model] = aircraft
        aircraft.manufacturer = record.get('manufacturer')
        aircraft.first_class_seats = int(record.get('first_class_seats', 0))
        aircraft.coach_seats = int(record.get('coach_seats', 0))
        stats['airplanes'] += 1


def ingest_scheduled_flights(
    db: Session,
    records: List[Dict],
    stats: Counter,
    canonical_zone: str = settings.CANONICAL_TIMEZONE
):
    """
    Insert or update flight rows keyed by number and departure time.
    Records whose timestamps do not parse are skipped, so the store only
    ever holds times the search can read. A key repeated within one
    snapshot updates the row added earlier; the last record wins.
    """
    pending = {}
    for record in records:
        required = ('number', 'airplane', 'departure_code', 'departure_time',
                    'arrival_code', 'arrival_time')
        if not all(record.get(key) for key in required):
            stats['flights_skipped_missing_data'] += 1
            continue

        try:
            departure = parse_flight_time(record['departure_time'])
            parse_flight_time(record['arrival_time'])
        except TimestampParseError as e:
            stats['flights_skipped_bad_time'] += 1
            logger.warning("Skipping flight %s: %s", record['number'], e)
            continue

        key = (record['number'], record['departure_time'])
        flight = pending.get(key)
        if flight is None:
            flight = (
                db.query(ScheduledFlight)
                .filter(
                    ScheduledFlight.number == record['number'],
                    ScheduledFlight.departure_time == record['departure_time']
                )
                .one_or_none()
            )
        if flight is None:
            flight = ScheduledFlight(
                number=record['number'],
                departure_time=record['departure_time']
            )
            db.add(flight)
        pending[key] = flight

        flight.airplane_model = record['airplane']
        flight.flight_minutes = record.get('flight_minutes')
        flight.departure_code = record['departure_code']
        flight.arrival_code = record['arrival_code']
        flight.arrival_time = record['arrival_time']
        flight.day_bucket = day_bucket(departure, canonical_zone)
        flight.first_class_booked = int(record.get('first_class_booked', 0))
        flight.coach_booked = int(record.get('coach_booked', 0))
        flight.first_class_price = record.get('first_class_price')
        flight.coach_price = record.get('coach_price')
        stats['flights'] += 1


def ingest_snapshot(
    file_path: str,
    session_factory: Callable[[], Session] = SessionLocal
) -> Counter:
    """
    Ingest one snapshot file in a single transaction

    Args:
        file_path: Path to the snapshot JSON file
        session_factory: Session factory for the target store

    Returns:
        Statistics counter
    """
    with open(file_path, 'r') as f:
        data = json.load(f)

    stats = Counter()
    with session_factory() as db:
        try:
            # Aircraft and airports first: flights reference both
            ingest_airports(db, data.get('airports', []), stats)
            ingest_aircraft(db, data.get('airplanes', []), stats)
            db.flush()
            ingest_scheduled_flights(db, data.get('flights', []), stats)
            db.commit()
        except Exception:
            db.rollback()
            raise

    return stats


def main():
    """
    Main function to ingest a snapshot
    """
    import argparse
    from app.core.logging_config import setup_logging

    parser = argparse.ArgumentParser(description='Ingest a flight snapshot JSON file into the flight store')
    parser.add_argument('snapshot', help='Path to the snapshot JSON file')
    parser.add_argument('--reset', action='store_true', help='Reset database before ingestion')
    args = parser.parse_args()

    setup_logging(settings.LOG_LEVEL)

    snapshot = Path(args.snapshot)
    if not snapshot.exists():
        print(f"Error: snapshot not found at {snapshot}")
        return

    if args.reset:
        reset_db()
    else:
        init_db()

    print("=" * 60)
    print(f"Ingesting {snapshot}")
    print("=" * 60)

    stats = ingest_snapshot(str(snapshot))

    print(f"Airports:                 {stats['airports']}")
    print(f"Airplanes:                {stats['airplanes']}")
    print(f"Flights:                  {stats['flights']}")
    print("\nSkipped records:")
    print(f"  - Airports:             {stats['airports_skipped']}")
    print(f"  - Airplanes:            {stats['airplanes_skipped']}")
    print(f"  - Flights missing data: {stats['flights_skipped_missing_data']}")
    print(f"  - Flights bad times:    {stats['flights_skipped_bad_time']}")


if __name__ == "__main__":
    main()
