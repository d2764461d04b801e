"""
Itinerary Search API endpoints
"""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from app.models import (
    SearchRequest, SearchResponse, SearchMetadata, ErrorResponse
)
from app.core import settings, TimestampParseError, FlightDataUnavailable
from app.core.database import get_flight_source
from app.services import FlightDataSource, FlightSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.post(
    "",
    response_model=SearchResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed departure date or flight data"},
        503: {"model": ErrorResponse, "description": "Flight data source unavailable"},
        500: {"model": ErrorResponse, "description": "Internal server error"}
    },
    summary="Search for itineraries",
    description="Search for connecting-flight itineraries between two airports on a given day"
)
def search_flights(
    request: SearchRequest,
    flight_source: FlightDataSource = Depends(get_flight_source)
) -> SearchResponse:
    """
    Search for itineraries based on criteria

    - **origin**: Departure airport code (3 letters)
    - **destination**: Arrival airport code (3 letters)
    - **departure_date**: Departure date, e.g. "2016 May 10 00:00 GMT"
    - **seat_class**: "Coach" or "FirstClass"

    Returns every itinerary satisfying seat availability, layover and hop
    limits, shortest first. An empty list means no valid itinerary exists.
    """
    try:
        search_service = FlightSearchService(flight_source)

        itineraries = search_service.search(
            origin=request.origin,
            destination=request.destination,
            departure_date=request.departure_date,
            seat_class=request.seat_class
        )

        return SearchResponse(
            search_id=str(uuid.uuid4()),
            origin=request.origin,
            destination=request.destination,
            seat_class=request.seat_class,
            itineraries=itineraries,
            meta=SearchMetadata(
                returned=len(itineraries),
                max_hops=search_service.config.max_hops
            )
        )

    except TimestampParseError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "INVALID_TIMESTAMP",
                "message": str(e),
                "details": {"value": e.text}
            }
        )
    except FlightDataUnavailable as e:
        logger.error("Search aborted: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "error": "DATA_SOURCE_UNAVAILABLE",
                "message": str(e),
                "details": {
                    "airport": e.airport_code,
                    "day": e.day_bucket
                }
            }
        )
    except Exception as e:
        logger.exception("Search failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "INTERNAL_ERROR",
                "message": "An internal error occurred while processing the search",
                "details": {"error": str(e)}
            }
        )


@router.get(
    "/health",
    summary="Health check",
    description="Check if the search API is healthy"
)
async def health_check():
    """Simple health check endpoint"""
    return {
        "status": "healthy",
        "service": "flight-reservation-search-api",
        "version": settings.APP_VERSION
    }
