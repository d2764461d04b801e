"""
Itinerary builder - turns reservation options into API itineraries
"""
import uuid
from typing import List, Optional

from app.models import FlightLeg, Itinerary, Price, ReservationOption, SeatClass
from app.models.domain import Flight
from .timeutils import connection_gap_millis

MILLIS_PER_MINUTE = 60_000


class ItineraryBuilder:
    """
    Responsible for building Itinerary objects from ReservationOptions
    """

    def build(self, option: ReservationOption, seat_class: SeatClass) -> Itinerary:
        """
        Build an itinerary from a completed reservation option.

        Args:
            option: ReservationOption produced by the search
            seat_class: Seat class the option was searched for

        Returns:
            Itinerary with legs, stops, duration and price when known
        """
        legs = [self._build_leg(flight) for flight in option.legs]
        total_duration = connection_gap_millis(
            option.legs[0].departure_time, option.legs[-1].arrival_time
        ) // MILLIS_PER_MINUTE

        return Itinerary(
            id=str(uuid.uuid4()),
            legs=legs,
            stops=option.leg_count - 1,
            total_duration_minutes=total_duration,
            price=self._total_price(option.legs, seat_class)
        )

    def _build_leg(self, flight: Flight) -> FlightLeg:
        duration = flight.flight_minutes
        if duration is None:
            duration = connection_gap_millis(
                flight.departure_time, flight.arrival_time
            ) // MILLIS_PER_MINUTE

        return FlightLeg(
            flight_number=flight.number,
            airplane=flight.airplane,
            origin=flight.departure_code,
            destination=flight.arrival_code,
            departure_time=flight.departure_time,
            arrival_time=flight.arrival_time,
            duration_minutes=duration
        )

    def _total_price(self, legs, seat_class: SeatClass) -> Optional[Price]:
        """Sum of leg prices; None if any leg has no published price."""
        prices: List[Optional[float]] = [
            leg.first_class_price if seat_class == SeatClass.FIRST_CLASS else leg.coach_price
            for leg in legs
        ]
        if any(price is None for price in prices):
            return None
        return Price(amount=round(sum(prices), 2))
