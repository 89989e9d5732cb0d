"""Pytest configuration and fixtures."""

from collections.abc import Iterator
from datetime import datetime, timezone

import pytest
import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient

from image_tag.api.dependencies import get_clock
from image_tag.config import Settings
from image_tag.main import create_app

# Friday evening, the reference moment used across the resolver scenarios
FRIDAY_EVENING = datetime(2020, 6, 5, 22, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Keep structlog configuration from leaking between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings with a Monday image day, isolated from the host environment."""
    monkeypatch.delenv("FG_IMAGE_DAY", raising=False)
    return Settings(_env_file=None, image_day=1)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Application whose clock is frozen at FRIDAY_EVENING."""
    application = create_app(settings)
    application.dependency_overrides[get_clock] = lambda: (lambda: FRIDAY_EVENING)
    return application


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Test client that does not follow the tag redirects."""
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
