"""
Pytest fixtures for Backend Reputation tests.

Every test gets a fresh FakeProviders; services and client are wired to it
through httpx.MockTransport.
"""

from __future__ import annotations

import httpx
import pytest

from backend_reputation.api_server.server import create_app
from backend_reputation.api_server.services import build_services

from fakes import FakeProviders, make_settings


@pytest.fixture
def fake() -> FakeProviders:
    return FakeProviders()


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def services(fake, settings):
    return build_services(settings, transport=httpx.MockTransport(fake.handle))


@pytest.fixture
def client(services, settings):
    """FastAPI TestClient over the fake providers."""
    from fastapi.testclient import TestClient

    app = create_app(settings=settings, services=services)
    with TestClient(app) as test_client:
        yield test_client
