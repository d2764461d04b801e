"""
FastAPI Request/Response Models for the Flight Reservation Search API
"""

from pydantic import BaseModel, Field, validator
from typing import Optional, List

from .domain import Airport, SeatClass


class SearchRequest(BaseModel):
    """Itinerary search request model"""
    origin: str = Field(..., min_length=3, max_length=3, description="Departure airport code")
    destination: str = Field(..., min_length=3, max_length=3, description="Arrival airport code")
    departure_date: str = Field(..., description="Departure date, 'yyyy MMM d HH:mm z'")
    seat_class: SeatClass = Field(default=SeatClass.COACH, description="Seat class")

    @validator('origin', 'destination')
    def validate_airport_code(cls, v):
        """Airport codes are matched upper-case"""
        return v.upper()

    class Config:
        json_schema_extra = {
            "example": {
                "origin": "BOS",
                "destination": "SFO",
                "departure_date": "2016 May 10 00:00 GMT",
                "seat_class": "Coach"
            }
        }


class FlightLeg(BaseModel):
    """Individual flight leg in an itinerary"""
    flight_number: str = Field(..., description="Flight number")
    airplane: str = Field(..., description="Aircraft model")
    origin: str = Field(..., description="Departure airport code")
    destination: str = Field(..., description="Arrival airport code")
    departure_time: str = Field(..., description="Departure time, 'yyyy MMM d HH:mm z'")
    arrival_time: str = Field(..., description="Arrival time, 'yyyy MMM d HH:mm z'")
    duration_minutes: int = Field(..., description="Flight duration in minutes")

    class Config:
        json_schema_extra = {
            "example": {
                "flight_number": "2816",
                "airplane": "A320",
                "origin": "BOS",
                "destination": "ORD",
                "departure_time": "2016 May 10 08:15 GMT",
                "arrival_time": "2016 May 10 10:52 GMT",
                "duration_minutes": 157
            }
        }


class Price(BaseModel):
    """Price information"""
    currency: str = Field(default="USD", description="Currency code")
    amount: float = Field(..., ge=0, description="Total price amount")


class Itinerary(BaseModel):
    """Complete itinerary with one or more flight legs"""
    id: str = Field(..., description="Unique itinerary ID")
    legs: List[FlightLeg] = Field(..., min_length=1, description="Flight legs")
    stops: int = Field(..., ge=0, description="Number of stops")
    total_duration_minutes: int = Field(..., description="Departure to final arrival")
    price: Optional[Price] = Field(default=None, description="Price for the requested seat class, when every leg is priced")


class SearchMetadata(BaseModel):
    """Search result metadata"""
    returned: int = Field(..., description="Number of itineraries returned")
    max_hops: int = Field(..., description="Maximum legs per itinerary")


class SearchResponse(BaseModel):
    """Itinerary search response model"""
    search_id: str = Field(..., description="Unique search ID")
    origin: str = Field(..., description="Departure airport code")
    destination: str = Field(..., description="Arrival airport code")
    seat_class: SeatClass = Field(..., description="Seat class searched")
    itineraries: List[Itinerary] = Field(..., description="Itineraries in discovery order")
    meta: SearchMetadata = Field(..., description="Search metadata")


class ErrorResponse(BaseModel):
    """Error response model"""
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = Field(default=None, description="Additional error details")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "INVALID_TIMESTAMP",
                "message": "Invalid flight timestamp: '2016-05-10'",
                "details": {
                    "field": "departure_date",
                    "value": "2016-05-10"
                }
            }
        }


class AirportListResponse(BaseModel):
    """Airports known to the flight store"""
    airports: List[Airport] = Field(..., description="Airports sorted by code")
    count: int = Field(..., description="Number of airports")
