"""Shared fixtures for the insights API tests."""

import pytest
from fastapi.testclient import TestClient

from insights_api.config import get_settings
from insights_api.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
