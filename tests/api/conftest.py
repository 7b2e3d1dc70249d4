"""API test fixtures — FastAPI app + httpx async client.

Invariants:
    - Every test gets a fresh app from create_app() (no shared overrides)
    - Unhandled exceptions are turned into responses, not re-raised into the test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from barcode_image_service.main import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
