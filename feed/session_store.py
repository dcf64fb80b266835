"""
In-process session store for single-instance deployments.

Sessions live in a dict and are lost on restart; every user then starts again
from a fresh seen-set. Multi-instance deployments use the Redis store in
feed_server.services instead.
"""

from datetime import datetime, timedelta
from typing import Dict, Optional

from .models.session import FeedSession


class InMemorySessionStore:
    """Session store backed by a process-local dict."""

    def __init__(self):
        self._sessions: Dict[str, FeedSession] = {}

    async def get(self, key: str) -> Optional[FeedSession]:
        return self._sessions.get(key)

    async def save(self, key: str, session: FeedSession) -> None:
        self._sessions[key] = session

    async def delete(self, key: str) -> bool:
        return self._sessions.pop(key, None) is not None

    async def sweep_expired(self, now: datetime, ttl: timedelta) -> int:
        expired = [
            key for key, session in self._sessions.items()
            if session.is_expired(now, ttl)
        ]
        for key in expired:
            del self._sessions[key]
        return len(expired)

    async def count(self) -> int:
        return len(self._sessions)
