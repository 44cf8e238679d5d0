"""Meetup business logic."""
from datetime import datetime
from typing import Any, Dict, List
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import IntegrityError

from app.db.models import File, Meetup
from app.core.utils import to_utc, is_past_hour
from app.core.exceptions import AuthorizationError, BusinessRuleError, NotFoundError, ValidationError
from app.core.logging_config import get_logger
from app.core.constants import (
    PAST_DATE_NOT_PERMITTED,
    CANNOT_UPDATE_PAST_MEETUP,
    CANNOT_DELETE_PAST_MEETUP,
    NO_UPDATE_PERMISSION,
    NOT_AUTHORIZED,
    MEETUP_NOT_FOUND,
    BANNER_NOT_FOUND,
    INVALID_REFERENCE,
)

logger = get_logger(__name__)


def _summary(meetup: Meetup) -> Dict[str, Any]:
    """Fields echoed back after a create or update."""
    return {
        "title": meetup.title,
        "description": meetup.description,
        "location": meetup.location,
        "date": to_utc(meetup.date),
    }


def _get_meetup(db: Session, meetup_id: int) -> Meetup:
    meetup = db.query(Meetup).filter(Meetup.id == meetup_id).first()
    if meetup is None:
        raise NotFoundError(MEETUP_NOT_FOUND)
    return meetup


def _check_banner(db: Session, file_id) -> None:
    if file_id is not None and db.get(File, file_id) is None:
        raise ValidationError(BANNER_NOT_FOUND)


def _save(db: Session, meetup: Meetup) -> None:
    """Commit pending changes, turning constraint violations into a 400."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("meetup_save_failed", error=str(e.orig))
        raise ValidationError(INVALID_REFERENCE) from e
    db.refresh(meetup)


def list_meetups(db: Session, user_id: int) -> List[Dict[str, Any]]:
    """
    List every meetup organized by a user.

    Banner and owner are eager-loaded in the same query, so the result
    needs no further lazy loads.

    Args:
        db: Database session
        user_id: Owner whose meetups are listed

    Returns:
        List of meetups with id, title, description, location, date,
        file_id, user_id, banner {name, path, url} (or None) and
        user {name, email}, ordered by date
    """
    meetups = (
        db.query(Meetup)
        .options(joinedload(Meetup.banner), joinedload(Meetup.user))
        .filter(Meetup.user_id == user_id)
        .order_by(Meetup.date.asc(), Meetup.id.asc())
        .all()
    )

    result = []
    for meetup in meetups:
        banner = None
        if meetup.banner is not None:
            banner = {
                "name": meetup.banner.name,
                "path": meetup.banner.path,
                "url": meetup.banner.url,
            }

        result.append({
            "id": meetup.id,
            "title": meetup.title,
            "description": meetup.description,
            "location": meetup.location,
            "date": to_utc(meetup.date),
            "file_id": meetup.file_id,
            "user_id": meetup.user_id,
            "banner": banner,
            "user": {"name": meetup.user.name, "email": meetup.user.email},
        })

    return result


def create_meetup(db: Session, user_id: int, data: Dict[str, Any], now: datetime) -> Dict[str, Any]:
    """
    Create a meetup owned by ``user_id``.

    The date is compared at hour granularity: a date anywhere in the
    current hour is accepted, an earlier hour is rejected. The stored
    value keeps its full precision.

    Raises:
        BusinessRuleError: if the date falls in an hour that has passed
        ValidationError: if file_id does not reference an uploaded file
    """
    date = to_utc(data["date"])
    if is_past_hour(date, now):
        logger.info("meetup_rejected", reason="past_date", user_id=user_id)
        raise BusinessRuleError(PAST_DATE_NOT_PERMITTED)

    _check_banner(db, data["file_id"])

    meetup = Meetup(
        title=data["title"],
        description=data["description"],
        location=data["location"],
        date=date,
        file_id=data["file_id"],
        user_id=user_id,
    )
    db.add(meetup)
    _save(db, meetup)

    logger.info("meetup_created", meetup_id=meetup.id, user_id=user_id)
    return _summary(meetup)


def update_meetup(
    db: Session,
    meetup_id: int,
    user_id: int,
    data: Dict[str, Any],
    now: datetime
) -> Dict[str, Any]:
    """
    Apply a partial update to a meetup.

    Checks run in this order: the meetup exists, its current date has not
    passed, the new date (only when one is sent) has not passed, and the
    caller owns it. Only keys present in ``data`` are written.

    Raises:
        NotFoundError: unknown meetup id
        BusinessRuleError: stored or requested date is in a past hour
        AuthorizationError: caller is not the owner
        ValidationError: new file_id does not reference an uploaded file
    """
    meetup = _get_meetup(db, meetup_id)

    if is_past_hour(meetup.date, now):
        logger.info("meetup_rejected", reason="past_meetup", meetup_id=meetup_id, user_id=user_id)
        raise BusinessRuleError(CANNOT_UPDATE_PAST_MEETUP)

    # No date in the body means the date is not changing, so there is nothing to check
    if data.get("date") is not None:
        data = {**data, "date": to_utc(data["date"])}
        if is_past_hour(data["date"], now):
            logger.info("meetup_rejected", reason="past_date", meetup_id=meetup_id, user_id=user_id)
            raise BusinessRuleError(PAST_DATE_NOT_PERMITTED)

    if meetup.user_id != user_id:
        logger.warning("meetup_update_forbidden", meetup_id=meetup_id, user_id=user_id)
        raise AuthorizationError(NO_UPDATE_PERMISSION)

    if "file_id" in data:
        _check_banner(db, data["file_id"])

    for field, value in data.items():
        setattr(meetup, field, value)

    _save(db, meetup)

    logger.info("meetup_updated", meetup_id=meetup.id, fields=sorted(data))
    return _summary(meetup)


def delete_meetup(db: Session, meetup_id: int, user_id: int, now: datetime) -> None:
    """
    Delete a meetup owned by ``user_id``.

    Raises:
        NotFoundError: unknown meetup id
        AuthorizationError: caller is not the owner
        BusinessRuleError: the meetup has already happened
    """
    meetup = _get_meetup(db, meetup_id)

    if meetup.user_id != user_id:
        logger.warning("meetup_delete_forbidden", meetup_id=meetup_id, user_id=user_id)
        raise AuthorizationError(NOT_AUTHORIZED)

    if meetup.is_past(now):
        logger.info("meetup_rejected", reason="past_meetup", meetup_id=meetup_id, user_id=user_id)
        raise BusinessRuleError(CANNOT_DELETE_PAST_MEETUP)

    db.delete(meetup)
    db.commit()

    logger.info("meetup_deleted", meetup_id=meetup_id, user_id=user_id)
