"""API test fixtures: FastAPI app behind an in-process httpx client.

Invariants:
    - No socket is bound: requests go through ASGITransport
    - App exceptions are re-raised into the test unless a test opts out
"""

import pytest
from httpx import ASGITransport, AsyncClient

from datadip_mock.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
