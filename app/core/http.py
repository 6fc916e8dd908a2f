"""HTTP client configuration."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx

from app.core.config import settings


def create_http_client(
    base_url: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Build the shared async client for the schools API."""
    return httpx.AsyncClient(
        base_url=base_url or settings.API_BASE_URL,
        timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT,
        headers={"Accept": "application/json"},
        transport=transport,
    )


@asynccontextmanager
async def get_http_client(**kwargs) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Yield a client and close it on exit."""
    async with create_http_client(**kwargs) as client:
        yield client
