"""
Flight Search Service - Main entry point for itinerary searches
Builds a search session over a flight-data source and shapes its results
"""
import logging
from typing import List, Optional

from app.models import Itinerary, SeatClass
from app.core.config import settings
from app.services.flight_data import FlightDataSource
from app.services.search.itinerary_builder import ItineraryBuilder
from app.services.search.itinerary_search import ItinerarySearchEngine, SearchConfig

logger = logging.getLogger(__name__)


class FlightSearchService:
    """
    Main flight search service.

    One instance is one search session: the aircraft catalog is read once
    when the service is created and reused by every search it runs.
    """

    def __init__(
        self,
        data_source: FlightDataSource,
        config: Optional[SearchConfig] = None
    ):
        self.data_source = data_source
        self.config = config or SearchConfig.from_settings(settings)

        self.engine = ItinerarySearchEngine.for_session(data_source, self.config)
        self.itinerary_builder = ItineraryBuilder()

    def search(
        self,
        origin: str,
        destination: str,
        departure_date: str,
        seat_class: SeatClass = SeatClass.COACH
    ) -> List[Itinerary]:
        """
        Run one search and convert every reservation option into an
        API itinerary, keeping discovery order.
        """
        options = self.engine.search(origin, destination, departure_date, seat_class)
        return [
            self.itinerary_builder.build(option, SeatClass.parse(seat_class))
            for option in options
        ]
