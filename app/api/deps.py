"""Shared API dependencies."""
from datetime import datetime

from app.db import get_db
from app.core.security import get_current_user_id
from app.core.utils import utc_now


def get_now() -> datetime:
    """Reference "current" time for business rules; overridden in tests."""
    return utc_now()


__all__ = ["get_db", "get_current_user_id", "get_now"]
