# tests/conftest.py
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from pizzeria.core.config import Settings, get_settings
from pizzeria.core.rate_limit import limiter
from pizzeria.main import app


@pytest.fixture
def test_settings() -> Settings:
    return Settings(enabled_stores=["ny", "chicago"])


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    # Rate-Limit-Zähler sind prozessweit, jeder Test startet mit leerem Speicher
    limiter.reset()
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_settings, None)
        limiter.reset()
