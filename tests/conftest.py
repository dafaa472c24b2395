"""Shared pytest fixtures: an in-memory SQLite database and an API client."""

import os

# Point the application engine at a throwaway in-memory database before any
# portfolio_backend module is imported.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from portfolio_backend.database import Base, get_db
from portfolio_backend.main import app
from portfolio_backend.models.skill import Skill
from portfolio_backend.services.skill_service import SkillService

# ---------------------------------------------------------------------------
# In-memory SQLite test database (shared via StaticPool)
# ---------------------------------------------------------------------------
SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Dependency override that uses the test in-memory database."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_db():
    """Create and tear down tables around each test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """TestClient with the DB dependency overridden."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db():
    """SQLAlchemy session for pre-populating test data."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def service(db):
    """SkillService bound to the test session."""
    return SkillService(db)


@pytest.fixture
def add_skill(db):
    """Factory inserting a Skill row directly, bypassing the service."""

    def _add(name: str, category: str = "Backend", **fields) -> Skill:
        skill = Skill(name=name, category=category, **fields)
        db.add(skill)
        db.commit()
        db.refresh(skill)
        return skill

    return _add
