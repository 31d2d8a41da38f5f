from __future__ import annotations

from typing import AsyncIterator

import httpx

from .config import get_settings


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """FastAPI dependency yielding an outbound client scoped to one request."""
    settings = get_settings()
    async with httpx.AsyncClient(timeout=settings.timeout_seconds) as client:
        yield client
