"""Shared test fixtures for settings and the HTTP application."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from pindrop.core.config import Settings, get_settings


@pytest.fixture
def settings() -> Settings:
    """Test application settings, isolated from any local .env file."""
    return Settings(_env_file=None, rate_limit_per_minute=10_000, batch_max_items=5)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Application built with the test settings."""
    from pindrop.main import create_app

    with patch("pindrop.main.get_settings", return_value=settings):
        application = create_app()
    application.dependency_overrides[get_settings] = lambda: settings
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Synchronous HTTP client for the test application."""
    return TestClient(app)
