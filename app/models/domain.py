"""
Domain models shared by the data sources and the itinerary search
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field

from app.core.exceptions import InvalidSeatClassError


class SeatClass(str, Enum):
    """Seat preference accepted by the search"""
    COACH = "Coach"
    FIRST_CLASS = "FirstClass"

    @classmethod
    def parse(cls, value) -> "SeatClass":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidSeatClassError(value) from None


class Aircraft(BaseModel):
    """One aircraft model and its seating capacity"""
    model: str = Field(..., description="Aircraft model identifier")
    manufacturer: str = Field(default="", description="Aircraft manufacturer")
    coach_seats: int = Field(..., ge=0, description="Coach seating capacity")
    first_class_seats: int = Field(..., ge=0, description="First class seating capacity")

    class Config:
        frozen = True

    def capacity(self, seat_class: SeatClass) -> int:
        if seat_class == SeatClass.FIRST_CLASS:
            return self.first_class_seats
        return self.coach_seats


class Airport(BaseModel):
    """Airport served by the reservation system"""
    code: str = Field(..., min_length=3, max_length=3, description="Airport code")
    name: str = Field(..., description="Airport name")
    latitude: Optional[float] = Field(default=None, description="Latitude")
    longitude: Optional[float] = Field(default=None, description="Longitude")

    class Config:
        frozen = True


class Flight(BaseModel):
    """
    One scheduled leg as returned by a flight-data source.

    Times stay in their published text form; the search parses them
    strictly when it needs them, so corrupt data surfaces as a
    TimestampParseError from the search call.
    """
    number: str = Field(default="", description="Flight number")
    airplane: str = Field(..., description="Aircraft model identifier")
    flight_minutes: Optional[int] = Field(default=None, description="Scheduled duration")
    departure_code: str = Field(..., description="Departure airport code")
    departure_time: str = Field(..., description="Departure time, 'yyyy MMM d HH:mm z'")
    arrival_code: str = Field(..., description="Arrival airport code")
    arrival_time: str = Field(..., description="Arrival time, 'yyyy MMM d HH:mm z'")
    coach_booked: int = Field(default=0, ge=0, description="Coach seats already booked")
    first_class_booked: int = Field(default=0, ge=0, description="First class seats already booked")
    coach_price: Optional[float] = None
    first_class_price: Optional[float] = None

    class Config:
        frozen = True

    def booked(self, seat_class: SeatClass) -> int:
        if seat_class == SeatClass.FIRST_CLASS:
            return self.first_class_booked
        return self.coach_booked

    def __str__(self):
        return (
            f"{self.number} {self.departure_code} {self.departure_time} -> "
            f"{self.arrival_code} {self.arrival_time}"
        )


# Ordered, non-empty run of connecting legs still being expanded
PartialItinerary = Tuple[Flight, ...]


class ReservationOption(BaseModel):
    """A completed itinerary: consecutive legs ending at the requested airport"""
    legs: Tuple[Flight, ...] = Field(..., min_length=1)

    class Config:
        frozen = True

    @property
    def departure_code(self) -> str:
        return self.legs[0].departure_code

    @property
    def arrival_code(self) -> str:
        return self.legs[-1].arrival_code

    @property
    def leg_count(self) -> int:
        return len(self.legs)
