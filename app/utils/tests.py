from typing import Dict, Optional

import httpx
from fastapi import FastAPI

from api.dependencies.rate_limits import setup_rate_limiter


def create_test_app(routers, dependency_overrides: Optional[Dict] = None) -> FastAPI:
    """
    Create a bare FastAPI application around the given routers.

    The application has the shared rate limiter attached but no lifespan, so
    tests control every provider through ``dependency_overrides``.

    Example:
        app = create_test_app(slack_router, {get_slack_gateway: lambda: gateway})
    """
    app = FastAPI()
    setup_rate_limiter(app)

    if not isinstance(routers, list):
        routers = [routers]
    for router in routers:
        app.include_router(router)

    if dependency_overrides:
        app.dependency_overrides.update(dependency_overrides)

    return app


async def rate_limiting_helper(
    app,
    endpoint: str,
    request_limit: int,
    method: str = "get",
    expected_status: int = 200,
    headers: Optional[dict] = None,
):
    """
    Send ``request_limit`` requests that must succeed, then one that must be
    rejected with the 429 body produced by ``rate_limit_handler``.
    """
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        send = getattr(client, method.lower())

        for i in range(request_limit):
            response = await send(endpoint, headers=headers or {})
            assert (
                response.status_code == expected_status
            ), f"Request {i+1} failed with status {response.status_code}"

        response = await send(endpoint, headers=headers or {})
        assert response.status_code == 429, "Expected rate limiting to trigger"
        assert response.json() == {"message": "Rate limit exceeded"}
