"""
Exceptions raised by the itinerary search core and its data sources
"""

from typing import Optional


class FlightSearchError(Exception):
    """Base class for all search failures"""


class TimestampParseError(FlightSearchError, ValueError):
    """A flight timestamp did not match the 'yyyy MMM d HH:mm z' format"""

    def __init__(self, text, reason: Optional[str] = None):
        self.text = text
        self.reason = reason
        message = f"Invalid flight timestamp: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidSeatClassError(FlightSearchError, ValueError):
    """Seat preference is neither coach nor first class"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown seat class: {value!r}")


class FlightDataUnavailable(FlightSearchError):
    """
    The flight-data source could not answer a fetch.
    Distinct from an empty answer, which means no flights exist.
    """

    def __init__(self, airport_code: str, day_bucket: Optional[str] = None, reason: str = ""):
        self.airport_code = airport_code
        self.day_bucket = day_bucket
        self.reason = reason
        where = airport_code if day_bucket is None else f"{airport_code} on {day_bucket}"
        message = f"Flight data unavailable for {where}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
