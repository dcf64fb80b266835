"""
Data source abstractions consumed by feed assembly.

The assembler only reads videos, sponsors and users and mutates the session
store. Implementations: in-memory/JSON catalog and MongoDB catalog
(feed_server.services), in-memory and Redis session stores.
"""

from datetime import datetime, timedelta
from typing import Dict, List, Optional, Protocol

from .models.query import VideoQuery
from .models.session import FeedSession
from .models.video import Sponsor, User, Video


class VideoSource(Protocol):
    """Protocol for video catalog reads. Implement for in-memory/JSON or MongoDB."""

    async def find_videos(
        self,
        query: VideoQuery,
        limit: Optional[int] = None,
        newest_first: bool = True,
    ) -> List[Video]:
        """
        Return videos matching query with their owner joined.
        limit=None means return all matches.
        """
        ...

    async def sample_videos(self, query: VideoQuery, size: int) -> List[Video]:
        """Return up to size videos matching query, picked at random."""
        ...


class SponsorSource(Protocol):
    """Protocol for sponsor brand records."""

    async def find_by_video_ids(self, video_ids: List[str]) -> Dict[str, Sponsor]:
        """Map video id -> non-deleted sponsor record. Videos without one are absent."""
        ...


class UserSource(Protocol):
    """Protocol for user record lookup (role, block list)."""

    async def get_user(self, user_id: str) -> Optional[User]:
        """Return user if exists, else None."""
        ...


class SessionStore(Protocol):
    """Protocol for feed session storage. Implement in-process or externalized (Redis)."""

    async def get(self, key: str) -> Optional[FeedSession]:
        ...

    async def save(self, key: str, session: FeedSession) -> None:
        ...

    async def delete(self, key: str) -> bool:
        """Delete one session. Return True if it existed."""
        ...

    async def sweep_expired(self, now: datetime, ttl: timedelta) -> int:
        """Delete sessions idle longer than ttl. Return how many were deleted."""
        ...

    async def count(self) -> int:
        ...
