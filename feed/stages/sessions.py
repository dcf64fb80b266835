"""
Session stage: resolve the requester's anti-repeat session and record shown videos.

Page 1 and expired sessions start over with an empty seen-set; any later page
within the TTL continues the existing one and refreshes its timestamp.
"""

import logging
import random
from datetime import datetime
from typing import Iterable, Optional

from ..models.config import FeedConfig
from ..models.session import FeedSession
from ..sources import SessionStore

logger = logging.getLogger(__name__)


def session_key(user_id: Optional[str], config: FeedConfig) -> str:
    """Store key for a requester. Anonymous requests share the guest key."""
    return str(user_id) if user_id else config.guest_session_key


async def get_session(
    store: SessionStore,
    user_id: Optional[str],
    page_number: int,
    config: FeedConfig,
    rng: random.Random,
    now: datetime,
) -> FeedSession:
    """
    Return the live session for user_id, or a fresh one.

    A fresh session is allocated (and saved) when none exists, when the caller
    asks for page 1, or when the stored one has been idle longer than the TTL.
    """
    key = session_key(user_id, config)
    existing = await store.get(key)

    if existing is None or page_number == 1 or existing.is_expired(now, config.session_ttl):
        reason = "missing" if existing is None else ("page_1" if page_number == 1 else "expired")
        session = FeedSession(seed=rng.randrange(10000), last_touched_at=now)
        await store.save(key, session)
        logger.debug("[sessions] NEW key=%s reason=%s", key, reason)
        return session

    existing.touch(now)
    logger.debug("[sessions] CONTINUE key=%s seen=%d", key, len(existing.seen_video_ids))
    return existing


def mark_seen(session: FeedSession, video_ids: Iterable[str]) -> None:
    """Add video_ids to the session's seen-set. Re-adding an id is a no-op."""
    session.add_seen(video_ids)
