"""Meetup model."""
from datetime import datetime, timezone as tz
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from app.db.base import Base
from app.core.utils import to_utc, utc_now


class Meetup(Base):
    __tablename__ = "meetups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String(255), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    file_id = Column(Integer, ForeignKey("files.id", ondelete="SET NULL"), nullable=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(tz.utc),
        onupdate=lambda: datetime.now(tz.utc),
    )

    # Relationships
    banner = relationship("File")
    user = relationship("User", back_populates="meetups")

    __table_args__ = (
        Index("idx_meetups_user", "user_id"),
    )

    def is_past(self, now: datetime) -> bool:
        """True once the meetup's date is behind ``now`` (full precision)."""
        return to_utc(self.date) < to_utc(now)

    @property
    def past(self) -> bool:
        return self.is_past(utc_now())
