"""
API routes package - itinerary search and airport endpoints
"""

from fastapi import APIRouter
from .search import router as search_router
from .airports import router as airports_router

api_router = APIRouter()
api_router.include_router(search_router)
api_router.include_router(airports_router)

__all__ = ['api_router', 'search_router', 'airports_router']
