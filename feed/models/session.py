"""
Session model: per-user anti-repeat state carried across feed pages.
"""

from datetime import datetime, timedelta
from typing import Iterable, Set

from pydantic import BaseModel, Field


class FeedSession(BaseModel):
    """Video ids already delivered to one requester within the current browsing window."""

    seen_video_ids: Set[str] = Field(default_factory=set)
    # Informational only; nothing reads it back.
    seed: int = 0
    last_touched_at: datetime

    def is_expired(self, now: datetime, ttl: timedelta) -> bool:
        return now - self.last_touched_at > ttl

    def touch(self, now: datetime) -> None:
        self.last_touched_at = now

    def add_seen(self, video_ids: Iterable[str]) -> None:
        self.seen_video_ids.update(video_ids)
