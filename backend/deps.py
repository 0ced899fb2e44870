# backend/deps.py
from typing import AsyncIterator

import httpx

from backend.config import HTTP_TIMEOUT_SECS


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Yield a shared-per-request httpx client and ensure it closes."""
    async with httpx.AsyncClient(
        timeout=HTTP_TIMEOUT_SECS, headers={"User-Agent": "SkillRoute/1.0"}
    ) as client:
        yield client
