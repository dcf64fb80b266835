"""
Redis session store: feed sessions shared across server instances.

Used when SESSION_BACKEND=redis. Each session is a JSON document under
feed:session:<key> with a Redis expiry equal to the session TTL, so idle
sessions disappear without the background sweep.
"""

import json
from datetime import datetime, timedelta
from typing import Any, Optional

from redis import asyncio as redis_async

from feed.models.session import FeedSession

KEY_PREFIX = "feed:session:"


class RedisSessionStore:
    """Thin async wrapper around Redis implementing feed.sources.SessionStore."""

    def __init__(self, url: str, ttl: timedelta, client: Optional[Any] = None):
        self._redis = client if client is not None else redis_async.from_url(
            url,
            encoding="utf-8",
            decode_responses=True,
        )
        self._ttl_seconds = max(1, int(ttl.total_seconds()))

    @staticmethod
    def build_key(key: str) -> str:
        return f"{KEY_PREFIX}{key}"

    async def get(self, key: str) -> Optional[FeedSession]:
        payload = await self._redis.get(self.build_key(key))
        if not payload:
            return None
        return FeedSession.model_validate(json.loads(payload))

    async def save(self, key: str, session: FeedSession) -> None:
        payload = session.model_dump(mode="json")
        payload["seen_video_ids"] = sorted(session.seen_video_ids)
        await self._redis.set(self.build_key(key), json.dumps(payload), ex=self._ttl_seconds)

    async def delete(self, key: str) -> bool:
        return bool(await self._redis.delete(self.build_key(key)))

    async def sweep_expired(self, now: datetime, ttl: timedelta) -> int:
        # Redis expires keys on its own
        return 0

    async def count(self) -> int:
        n = 0
        async for _ in self._redis.scan_iter(match=f"{KEY_PREFIX}*"):
            n += 1
        return n

    async def ping(self) -> bool:
        return bool(await self._redis.ping())
