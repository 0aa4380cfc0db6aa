# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Swaps MongoDB for an in-memory mongomock database
# - Provides a TestClient that keeps cookies (and so flashes) between calls
# =============================================================================

import asyncio
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")
os.environ.setdefault("MONGODB_DATABASE", "check-inn-test")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-sessions")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.dependencies import get_database
from app.main import app


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def db():
    """Fresh in-memory database per test."""
    return AsyncMongoMockClient()["check-inn-test"]


@pytest.fixture
def client(db):
    """
    TestClient wired to the in-memory database.

    Not used as a context manager, so the lifespan (real MongoDB
    connection) never runs.
    """
    app.dependency_overrides[get_database] = lambda: db
    test_client = TestClient(app, raise_server_exceptions=False)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def run():
    """Run a coroutine to completion from a sync test."""
    return asyncio.run


@pytest.fixture
def hotel_form():
    """Valid hotel form fields as the browser posts them."""
    return {
        "hotel[name]": "Inn",
        "hotel[location]": "X",
        "hotel[price]": "10",
        "hotel[description]": "d",
        "hotel[image]": "i",
    }


@pytest.fixture
def create_hotel(client, hotel_form):
    """Create a hotel over HTTP and return its id."""

    def _create(**overrides) -> str:
        form = {**hotel_form, **{f"hotel[{k}]": v for k, v in overrides.items()}}
        response = client.post("/hotels", data=form, follow_redirects=False)
        assert response.status_code == 303
        return response.headers["location"].rsplit("/", 1)[-1]

    return _create
