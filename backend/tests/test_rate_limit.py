"""Rate limiting tests."""

import pytest
from httpx import AsyncClient

from portfolio_tracker.core.rate_limit import limiter


@pytest.mark.asyncio
async def test_user_create_rate_limit(client: AsyncClient):
    """Account creation is limited to 10 per minute per client."""
    limiter.enabled = True
    limiter.reset()
    try:
        responses = []
        for i in range(12):
            resp = await client.post(
                "/api/v1/users/",
                json={"username": f"user{i}", "password": "password123"},
            )
            responses.append(resp.status_code)
    finally:
        limiter.reset()
        limiter.enabled = False

    assert responses[:10] == [201] * 10
    assert 429 in responses[10:], "Rate limiting should block excessive account creation"
