"""Meetup endpoints."""
from datetime import datetime
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_user_id, get_now
from app.schemas import (
    MeetupCreate,
    MeetupUpdate,
    MeetupResponse,
    MeetupDetail,
    ErrorResponse,
)
from app.services.meetup import list_meetups, create_meetup, update_meetup, delete_meetup
from app.core.exceptions import MeetupError
from app.core.rate_limit import limiter, RATE_LIMITS

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.get("", response_model=List[MeetupDetail])
@limiter.limit(RATE_LIMITS["meetups_read"])
async def list_meetups_endpoint(
    request: Request,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    List the meetups organized by the authenticated user.

    Each meetup includes its banner file (name, path, url) when one is
    attached, and the organizer's name and email.

    Example:
        Request:
            GET /api/v1/meetups
            Authorization: Bearer eyJhbGc...

        Response (200):
            [
                {
                    "id": 3,
                    "title": "Python Meetup #12",
                    "description": "Talks about async and typing",
                    "location": "Main St. 100",
                    "date": "2050-01-01T10:30:00Z",
                    "file_id": 7,
                    "user_id": 1,
                    "banner": {
                        "name": "banner.png",
                        "path": "a1b2c3.png",
                        "url": "http://localhost:8000/files/a1b2c3.png"
                    },
                    "user": {"name": "Ada", "email": "ada@example.com"}
                }
            ]
    """
    return list_meetups(db, user_id)


@router.post("", response_model=MeetupResponse, responses=ERROR_RESPONSES)
@limiter.limit(RATE_LIMITS["meetups_write"])
async def create_meetup_endpoint(
    request: Request,
    meetup: MeetupCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now)
):
    """
    Create a meetup organized by the authenticated user.

    All fields are required. The date may be anywhere from the start of
    the current hour onwards.

    Raises:
        HTTPException: 400 if a field is missing/invalid or the date is in the past
        HTTPException: 401 if not authenticated

    Example:
        Request:
            POST /api/v1/meetups
            {
                "title": "Python Meetup #12",
                "description": "Talks about async and typing",
                "location": "Main St. 100",
                "date": "2050-01-01T10:30:00Z",
                "file_id": 7
            }

        Response (200):
            {
                "title": "Python Meetup #12",
                "description": "Talks about async and typing",
                "location": "Main St. 100",
                "date": "2050-01-01T10:30:00Z"
            }

        Response (400):
            {
                "error": "Past dates are not permitted"
            }
    """
    try:
        return create_meetup(db, user_id, meetup.model_dump(), now)
    except MeetupError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/{meetup_id}", response_model=MeetupResponse, responses=ERROR_RESPONSES)
@limiter.limit(RATE_LIMITS["meetups_write"])
async def update_meetup_endpoint(
    request: Request,
    meetup_id: int,
    meetup: MeetupUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now)
):
    """
    Partially update a meetup (organizer only).

    Only fields present in the body are changed. A body without a date
    leaves the date untouched and skips the past-date check for it.

    Raises:
        HTTPException: 400 if the meetup already happened or the new date is in the past
        HTTPException: 401 if the caller does not organize this meetup
        HTTPException: 404 if the meetup does not exist
    """
    try:
        return update_meetup(db, meetup_id, user_id, meetup.model_dump(exclude_unset=True), now)
    except MeetupError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{meetup_id}", responses=ERROR_RESPONSES)
@limiter.limit(RATE_LIMITS["meetups_write"])
async def delete_meetup_endpoint(
    request: Request,
    meetup_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now)
):
    """
    Cancel (delete) an upcoming meetup (organizer only).

    Responds 200 with an empty body.

    Raises:
        HTTPException: 400 if the meetup already happened
        HTTPException: 401 if the caller does not organize this meetup
        HTTPException: 404 if the meetup does not exist
    """
    try:
        delete_meetup(db, meetup_id, user_id, now)
    except MeetupError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return Response(status_code=200)
