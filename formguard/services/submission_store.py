"""Submission store — Redis-backed persistence for sanitized submissions."""

import json
from typing import Optional

import structlog

from formguard.config import get_settings

logger = structlog.get_logger()

# Keep the recent list bounded
RECENT_LIMIT = 100


class SubmissionStore:
    """Stores accepted submissions in Redis."""

    def __init__(self, redis_client, ttl_seconds: Optional[int] = None):
        self.redis = redis_client
        self.ttl_seconds = ttl_seconds or get_settings().SUBMISSION_TTL_SECONDS
        self._prefix = "formguard:submission:"

    def _key(self, submission_id: str) -> str:
        return f"{self._prefix}{submission_id}"

    async def create(self, submission_id: str, record: dict) -> None:
        """Store a submission record."""
        key = self._key(submission_id)
        await self.redis.setex(key, self.ttl_seconds, json.dumps(record, default=str))

        # Add to recent submissions list
        await self.redis.lpush(f"{self._prefix}recent", submission_id)
        await self.redis.ltrim(f"{self._prefix}recent", 0, RECENT_LIMIT - 1)

        logger.info("submission_stored", submission_id=submission_id)

    async def get(self, submission_id: str) -> Optional[dict]:
        """Retrieve a submission record."""
        data = await self.redis.get(self._key(submission_id))
        if data is None:
            return None
        return json.loads(data)

    async def list_recent(self, limit: int = 20) -> list[str]:
        """List recent submission IDs, newest first."""
        ids = await self.redis.lrange(f"{self._prefix}recent", 0, limit - 1)
        return [i.decode() if isinstance(i, bytes) else i for i in ids]

    async def delete(self, submission_id: str) -> bool:
        """Delete a submission. Returns False if it did not exist."""
        removed = await self.redis.delete(self._key(submission_id))
        await self.redis.lrem(f"{self._prefix}recent", 0, submission_id)
        if removed:
            logger.info("submission_deleted", submission_id=submission_id)
        return bool(removed)

    async def exists(self, submission_id: str) -> bool:
        """Check if a submission exists."""
        return bool(await self.redis.exists(self._key(submission_id)))
