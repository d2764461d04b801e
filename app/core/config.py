"""
Configuration settings for the application
"""

from pydantic_settings import BaseSettings
import os


class Settings(BaseSettings):
    """Application settings"""

    # App settings
    APP_NAME: str = "Flight Reservation Search API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = os.getenv('DATABASE_URL', 'sqlite:///flight_reservations.db')

    # API settings
    API_V1_PREFIX: str = "/v1"

    # Agency identifier sent with every flight-data request
    TICKET_AGENCY: str = "TeamAgency"

    # Search settings
    MAX_HOPS: int = 3  # legs per itinerary
    AVOID_AIRPORT_REVISITS: bool = False
    FETCH_FAILURE_POLICY: str = "prune"  # "prune" or "abort"
    FLIGHT_CACHE_ENABLED: bool = True

    # Connection time rules (in minutes)
    MINIMUM_LAYOVER_TIME: int = 30
    MAXIMUM_LAYOVER_TIME: int = 180  # 3 hours

    # Arrivals after this hour may connect to next-day departures
    NEXT_DAY_CUTOFF_HOUR: int = 21
    CANONICAL_TIMEZONE: str = "GMT"

    # CORS
    CORS_ORIGINS: list = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
