"""Database models."""
from app.db.models.user import User
from app.db.models.file import File
from app.db.models.meetup import Meetup

__all__ = ["User", "File", "Meetup"]
