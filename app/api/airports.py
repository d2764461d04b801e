"""
Airport listing API endpoints
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.models import AirportListResponse, ErrorResponse
from app.core import FlightDataUnavailable
from app.core.database import get_flight_source
from app.services import FlightDataSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/airports", tags=["airports"])


@router.get(
    "",
    response_model=AirportListResponse,
    responses={
        503: {"model": ErrorResponse, "description": "Flight data source unavailable"}
    },
    summary="List airports",
    description="List every airport known to the flight store, sorted by code"
)
def list_airports(
    flight_source: FlightDataSource = Depends(get_flight_source)
) -> AirportListResponse:
    try:
        airports = flight_source.fetch_airports()
    except FlightDataUnavailable as e:
        logger.error("Airport listing failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "error": "DATA_SOURCE_UNAVAILABLE",
                "message": str(e),
                "details": {"airport": e.airport_code, "day": e.day_bucket}
            }
        )

    airports = sorted(airports, key=lambda airport: airport.code)
    return AirportListResponse(airports=airports, count=len(airports))
