"""
Feasibility checks applied to every leg the search considers
"""
from datetime import timedelta

from app.models.domain import Flight, SeatClass
from .aircraft import AircraftCapacityTable
from .timeutils import Timestamp, connection_gap_millis


class SeatAvailabilityValidator:
    """
    Decides whether a flight still has a seat in the requested class.
    Read-only: checking a flight never books or holds a seat.
    """

    def __init__(self, capacity_table: AircraftCapacityTable):
        self.capacity_table = capacity_table

    def has_seat(self, flight: Flight, seat_class: SeatClass) -> bool:
        capacity = self.capacity_table.capacity_for(flight.airplane, seat_class)
        # No capacity information means the flight cannot be sold
        if capacity is None:
            return False
        return flight.booked(seat_class) < capacity


class LayoverValidator:
    """
    Accepts a connection when the gap between arrival and the next
    departure is within [minimum, maximum], both ends inclusive.
    """

    def __init__(self, minimum: timedelta, maximum: timedelta):
        self.minimum_millis = minimum // timedelta(milliseconds=1)
        self.maximum_millis = maximum // timedelta(milliseconds=1)

    @classmethod
    def from_minutes(cls, minimum_minutes: int, maximum_minutes: int) -> "LayoverValidator":
        return cls(timedelta(minutes=minimum_minutes), timedelta(minutes=maximum_minutes))

    def is_valid(self, arrival: Timestamp, departure: Timestamp) -> bool:
        """
        Check if a connection between an arrival and a departure is valid.

        Args:
            arrival: Arrival time of the inbound leg
            departure: Departure time of the connecting leg

        Returns:
            True if connection is valid, False otherwise
        """
        gap = connection_gap_millis(arrival, departure)

        if gap <= 0:
            return False

        if gap < self.minimum_millis:
            return False

        if gap > self.maximum_millis:
            return False

        return True
