"""
Aircraft capacity lookup for seat availability checks
"""
from bisect import bisect_left
from typing import Iterable, Optional, Tuple

from app.models.domain import Aircraft, SeatClass


class AircraftCapacityTable:
    """
    Immutable snapshot of the aircraft catalog sorted by model identifier.

    Built once per search session and only read afterwards, so one table
    can be shared by concurrent searches.
    """

    def __init__(self, aircraft: Iterable[Aircraft]):
        ordered = sorted(aircraft, key=lambda plane: plane.model)
        self._aircraft: Tuple[Aircraft, ...] = tuple(ordered)
        self._models: Tuple[str, ...] = tuple(plane.model for plane in ordered)

    def __len__(self):
        return len(self._aircraft)

    def __contains__(self, model: str) -> bool:
        return self.find(model) is not None

    @property
    def models(self) -> Tuple[str, ...]:
        return self._models

    def find(self, model: str) -> Optional[Aircraft]:
        """Binary search for a model; None when the catalog does not list it."""
        index = bisect_left(self._models, model)
        if index < len(self._models) and self._models[index] == model:
            return self._aircraft[index]
        return None

    def capacity_for(self, model: str, seat_class: SeatClass) -> Optional[int]:
        """
        Seating capacity of a model for one class.

        Returns:
            The capacity, or None if the model is unknown
        """
        aircraft = self.find(model)
        if aircraft is None:
            return None
        return aircraft.capacity(seat_class)
