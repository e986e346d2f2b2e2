"""Submission rate limiter — per-client token buckets held in memory."""

import time
from dataclasses import dataclass
from typing import Optional

from formguard.config import get_settings


@dataclass
class RateLimitDecision:
    """Outcome of one rate limit check."""

    allowed: bool
    remaining: int
    retry_after_seconds: float


class SubmissionRateLimiter:
    """Token bucket limiter for stored submissions, keyed by client.

    Validation-only requests are never limited; only writes to the store are.
    For several server instances a shared Redis bucket would be needed.

    One bucket is kept per client. Once more than `max_clients` are tracked,
    buckets idle for a whole window (and therefore full again) are dropped.
    """

    def __init__(
        self,
        max_submissions: Optional[int] = None,
        window_seconds: Optional[int] = None,
        max_clients: int = 10_000,
    ):
        settings = get_settings()
        self.max_submissions = max_submissions or settings.RATE_LIMIT_MAX_SUBMISSIONS
        self.window_seconds = window_seconds or settings.RATE_LIMIT_WINDOW_SECONDS
        self.max_clients = max_clients
        # client -> (tokens, last refill timestamp)
        self._buckets: dict[str, tuple[int, float]] = {}

    @property
    def seconds_per_token(self) -> float:
        return self.window_seconds / self.max_submissions

    def _refill(self, client: str, now: float) -> tuple[int, float]:
        tokens, last_refill = self._buckets.get(client, (self.max_submissions, now))
        earned = int((now - last_refill) / self.seconds_per_token)
        if earned > 0:
            tokens = min(self.max_submissions, tokens + earned)
            last_refill = now
        return tokens, last_refill

    def check(self, client: str) -> RateLimitDecision:
        """Consume one token for the client if one is available."""
        now = time.time()
        tokens, last_refill = self._refill(client, now)

        allowed = tokens > 0
        if allowed:
            tokens -= 1
        self._buckets[client] = (tokens, last_refill)
        if len(self._buckets) > self.max_clients:
            self.prune(now)

        retry_after = 0.0 if tokens > 0 else max(0.0, self.seconds_per_token - (now - last_refill))
        return RateLimitDecision(allowed=allowed, remaining=tokens, retry_after_seconds=retry_after)

    def remaining(self, client: str) -> int:
        """Tokens left for a client, without consuming one."""
        tokens, _ = self._refill(client, time.time())
        return tokens

    def prune(self, now: Optional[float] = None) -> int:
        """Drop buckets idle for at least one window. Returns how many were dropped."""
        now = time.time() if now is None else now
        idle = [
            client for client, (_, last_refill) in self._buckets.items()
            if now - last_refill >= self.window_seconds
        ]
        for client in idle:
            del self._buckets[client]
        return len(idle)

    def reset(self) -> None:
        """Forget every client."""
        self._buckets.clear()


# Module-level singleton
rate_limiter = SubmissionRateLimiter()
