"""
Shared test configuration.

Settings are read at import time, so the environment is prepared here
before any app module is imported.
"""

import os

os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite+aiosqlite:///:memory:"
os.environ["CREATE_TABLES_ON_STARTUP"] = "true"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_TO_FILE"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.database import Database


@pytest.fixture
def client():
    """Test client fixture backed by a fresh in-memory database."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def db():
    """Create test database and yield a session."""
    database = Database("sqlite+aiosqlite:///:memory:")
    await database.create_tables()

    async with database.session_factory() as session:
        yield session

    await database.dispose()
