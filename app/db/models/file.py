"""File model (uploaded banner images)."""
from datetime import datetime, timezone as tz
from sqlalchemy import Column, Integer, String, DateTime

from app.db.base import Base
from app.core.config import settings
from app.core.constants import FILES_URL_PREFIX


class File(Base):
    __tablename__ = "files"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    path = Column(String(255), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))

    @property
    def url(self) -> str:
        """Public URL where the stored file is served."""
        return f"{settings.APP_URL.rstrip('/')}{FILES_URL_PREFIX}/{self.path}"
