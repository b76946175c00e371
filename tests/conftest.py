"""
Pytest fixtures for profile service tests.

Uses an in-memory SQLite database shared through StaticPool, so every
session in a test sees the same data.
"""

import os

import pytest

# Set test environment variables before importing application modules
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_CREATE_TABLES", "true")

from core.config import get_settings  # noqa: E402
from core.db import DatabaseManager  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make each test read settings from the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh in-memory database for each test."""
    database = DatabaseManager()
    database.initialize("sqlite://")
    database.create_all_tables()

    yield database

    database.dispose()


@pytest.fixture
def test_session(test_db):
    """Get a test session from the test database."""
    with test_db.session() as session:
        yield session


@pytest.fixture
def sample_profile():
    """Sample profile payload."""
    return {"name": "Alice", "icon": "star"}
