"""
Database models for the flight reservation data store
Holds the airport list, the aircraft catalog and the scheduled flights
that the itinerary search fetches one airport/day at a time
"""

from sqlalchemy import (
    Column, String, Integer, Float, DateTime, ForeignKey,
    Index, UniqueConstraint
)
from sqlalchemy.orm import declarative_base, relationship
from datetime import datetime
import uuid

Base = declarative_base()


class Airport(Base):
    """
    Airport entity with code, name and location
    """
    __tablename__ = 'airports'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    code = Column(String(3), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    latitude = Column(Float)
    longitude = Column(Float)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Airport(code='{self.code}', name='{self.name}')>"


class Aircraft(Base):
    """
    Aircraft model with its seating capacity per class
    """
    __tablename__ = 'aircraft'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    model = Column(String(50), unique=True, nullable=False, index=True)
    manufacturer = Column(String(100))
    first_class_seats = Column(Integer, nullable=False, default=0)
    coach_seats = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return (
            f"<Aircraft(model='{self.model}', first={self.first_class_seats}, "
            f"coach={self.coach_seats})>"
        )


class ScheduledFlight(Base):
    """
    One scheduled leg as published by the reservation system.
    Times are kept in their published 'yyyy MMM d HH:mm z' text form;
    day_bucket is the canonical-zone departure day used for lookups.
    """
    __tablename__ = 'scheduled_flights'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    number = Column(String(10), nullable=False)
    airplane_model = Column(String(50), ForeignKey('aircraft.model'), nullable=False)
    flight_minutes = Column(Integer)

    departure_code = Column(String(3), ForeignKey('airports.code'), nullable=False)
    departure_time = Column(String(40), nullable=False)
    arrival_code = Column(String(3), ForeignKey('airports.code'), nullable=False)
    arrival_time = Column(String(40), nullable=False)

    # yyyy_MM_dd
    day_bucket = Column(String(10), nullable=False)

    # Booked seats, not remaining seats
    first_class_booked = Column(Integer, nullable=False, default=0)
    coach_booked = Column(Integer, nullable=False, default=0)
    first_class_price = Column(Float)
    coach_price = Column(Float)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    aircraft = relationship("Aircraft")
    departure_airport = relationship("Airport", foreign_keys=[departure_code])
    arrival_airport = relationship("Airport", foreign_keys=[arrival_code])

    __table_args__ = (
        UniqueConstraint('number', 'departure_time', name='uq_flight_number_departure'),
        Index('idx_flight_departure_day', 'departure_code', 'day_bucket'),
    )

    def __repr__(self):
        return (
            f"<ScheduledFlight(number='{self.number}', {self.departure_code}->"
            f"{self.arrival_code}, day='{self.day_bucket}')>"
        )
