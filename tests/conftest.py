"""Pytest configuration and shared fixtures."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from formguard.main import app
from formguard.services.rate_limiter import rate_limiter


class FakeRedis:
    """In-memory stand-in for the subset of redis.asyncio the store uses."""

    def __init__(self, available: bool = True):
        self.available = available
        self.values: dict[str, str] = {}
        self.lists: dict[str, list[str]] = {}
        self.ttls: dict[str, int] = {}
        self.closed = False

    async def ping(self) -> bool:
        if not self.available:
            raise ConnectionError("Connection refused")
        return True

    async def setex(self, key: str, ttl: int, value: str) -> bool:
        self.values[key] = value
        self.ttls[key] = ttl
        return True

    async def get(self, key: str):
        return self.values.get(key)

    async def delete(self, key: str) -> int:
        return 1 if self.values.pop(key, None) is not None else 0

    async def exists(self, key: str) -> int:
        return 1 if key in self.values else 0

    async def lpush(self, key: str, value: str) -> int:
        self.lists.setdefault(key, []).insert(0, value)
        return len(self.lists[key])

    async def ltrim(self, key: str, start: int, end: int) -> bool:
        self.lists[key] = self.lists.get(key, [])[start:end + 1]
        return True

    async def lrange(self, key: str, start: int, end: int) -> list[str]:
        return self.lists.get(key, [])[start:end + 1]

    async def lrem(self, key: str, count: int, value: str) -> int:
        items = self.lists.get(key, [])
        kept = [i for i in items if i != value]
        self.lists[key] = kept
        return len(items) - len(kept)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    rate_limiter.reset()
    yield
    rate_limiter.reset()


@pytest.fixture
def client(fake_redis):
    """API client whose Redis connection is the in-memory fake."""
    with patch("formguard.main.aioredis.from_url", return_value=fake_redis):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def client_without_redis():
    """API client whose Redis ping fails at startup."""
    with patch("formguard.main.aioredis.from_url", return_value=FakeRedis(available=False)):
        with TestClient(app) as c:
            yield c
