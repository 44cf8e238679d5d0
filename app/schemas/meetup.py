"""Meetup schemas."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.utils import to_utc


def utc_date(v: datetime) -> datetime:
    """Convert to UTC, rejecting values that fall outside the datetime range."""
    try:
        return to_utc(v)
    except OverflowError:
        raise ValueError("is out of range")


class MeetupCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1, max_length=255)
    date: datetime
    file_id: int

    @field_validator("date")
    @classmethod
    def check_date_range(cls, v: datetime) -> datetime:
        return utc_date(v)


class MeetupUpdate(BaseModel):
    """Partial update; only the fields sent by the client are applied."""

    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    date: Optional[datetime] = None
    file_id: Optional[int] = None

    @field_validator("title", "description", "location", "date", "file_id", mode="before")
    @classmethod
    def reject_null(cls, v):
        """Omitting a field is allowed, sending it as null is not."""
        if v is None:
            raise ValueError("cannot be null")
        return v

    @field_validator("date")
    @classmethod
    def check_date_range(cls, v: Optional[datetime]) -> Optional[datetime]:
        return utc_date(v) if v is not None else v


class MeetupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    description: str
    location: str
    date: datetime


class BannerSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    path: str
    url: str


class OwnerSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    email: str


class MeetupDetail(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    location: str
    date: datetime
    file_id: Optional[int]
    user_id: int
    banner: Optional[BannerSummary]
    user: OwnerSummary
