"""
Fixtures for API route tests.

Routes are exercised through TestClient with app.dependency_overrides;
the lifespan is not entered, so no Supabase client is created.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app


@pytest.fixture
def app():
    """Create a fresh app for each test."""
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
