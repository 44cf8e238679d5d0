"""Database package."""
from app.db.session import engine, SessionLocal, get_db, init_db
from app.db.base import Base

__all__ = ["engine", "SessionLocal", "get_db", "init_db", "Base"]
