"""Pydantic schemas for request/response validation."""
from app.schemas.meetup import (
    MeetupCreate,
    MeetupUpdate,
    MeetupResponse,
    MeetupDetail,
    BannerSummary,
    OwnerSummary,
)
from app.schemas.common import ErrorResponse

__all__ = [
    "MeetupCreate",
    "MeetupUpdate",
    "MeetupResponse",
    "MeetupDetail",
    "BannerSummary",
    "OwnerSummary",
    "ErrorResponse",
]
