"""Shared test fixtures and configuration."""
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.db.models import User, File, Meetup
from app.api.deps import get_db, get_now
from app.db.session import enable_sqlite_foreign_keys
from app.core.security import create_user_token


# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

# Fixed "current" time used by every business rule under test
FIXED_NOW = datetime(2030, 6, 15, 12, 20, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def disable_rate_limiting_for_tests(request):
    """Disable rate limiting for all tests except rate limiting tests."""
    from app.core.rate_limit import limiter

    if "rate_limit" in request.keywords:
        limiter.enabled = True
        limiter.reset()
        yield
        limiter.reset()
        limiter.enabled = False
    else:
        limiter.enabled = False
        yield


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh database for each test."""
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    # Enforce foreign keys like the production database does
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with a test database and a frozen clock."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_now] = lambda: FIXED_NOW
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def owner(db_session):
    user = User(name="Ada Lovelace", email="ada@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session):
    user = User(name="Alan Turing", email="alan@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def banner(db_session):
    file = File(name="banner.png", path="4f1c2e.png")
    db_session.add(file)
    db_session.commit()
    db_session.refresh(file)
    return file


@pytest.fixture
def make_meetup(db_session, owner, banner):
    """Factory for meetups persisted directly through the session."""
    def _make(date, user=None, **fields):
        meetup = Meetup(
            title=fields.get("title", "Python Meetup"),
            description=fields.get("description", "Lightning talks"),
            location=fields.get("location", "Main St. 100"),
            date=date,
            file_id=fields.get("file_id", banner.id),
            user_id=(user or owner).id,
        )
        db_session.add(meetup)
        db_session.commit()
        db_session.refresh(meetup)
        return meetup
    return _make


@pytest.fixture
def auth_headers(owner):
    """Authorization header for the meetup owner."""
    return {"Authorization": f"Bearer {create_user_token(owner.id)}"}


@pytest.fixture
def other_auth_headers(other_user):
    return {"Authorization": f"Bearer {create_user_token(other_user.id)}"}
