"""Pytest configuration and fixtures."""

import os
from datetime import datetime, timezone

# Must be set before realestate_api builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from realestate_api.db.session import get_db, init_models, make_engine
from realestate_api.main import app
from realestate_api.services.seeder import DatabaseSeeder

FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test."""
    eng = make_engine("sqlite://")
    init_models(eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture
def session(engine):
    SessionLocal = sessionmaker(bind=engine, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(session):
    """Session over a database holding the fixture dataset."""
    DatabaseSeeder(session).seed(now=FIXED_NOW)
    return session


@pytest.fixture
def client(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
