from unittest.mock import AsyncMock

import httpx
import pytest
from httpx import ASGITransport

BACKEND_URL = "http://backend.test"


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("BACKEND_BASE_URL", BACKEND_URL)
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_123")
    monkeypatch.setenv("STRIPE_PUBLISHABLE_KEY", "pk_test_123")


@pytest.fixture
def processor():
    return AsyncMock()


@pytest.fixture
async def client(mock_env, processor):
    from staychill.main import app, lifespan

    async with lifespan(app):
        app.state.payment_processor = processor
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
