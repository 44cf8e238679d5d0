"""Database base class and model imports."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models here so create_all() sees them
from app.db.models.user import User  # noqa: F401, E402
from app.db.models.file import File  # noqa: F401, E402
from app.db.models.meetup import Meetup  # noqa: F401, E402
