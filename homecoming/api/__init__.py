"""API routers for the Homecoming tracker."""

from fastapi import APIRouter

from .flight import router as flight_router
from .health import router as health_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(flight_router)

__all__ = ["api_router"]
