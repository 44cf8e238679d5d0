"""Main API router for v1."""
from fastapi import APIRouter

from app.api.v1.endpoints import meetups

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(meetups.router, prefix="/meetups", tags=["Meetups"])
