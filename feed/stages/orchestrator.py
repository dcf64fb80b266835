"""
Pipeline orchestrator: assembles one feed page.

Order: session → sponsored slots → candidate pool → owner interleave →
mark seen → splice sponsored → CDN rewrite.

The main entry point is assemble_feed. get_featured_feed serves the
featured list (no session, no sponsors).
"""

import logging
import random
from datetime import datetime
from typing import List, Optional

from ..models.config import FeedConfig, resolve_config
from ..models.query import VideoQuery
from ..models.request import FeedRequest
from ..models.slot import FeedSlot
from ..sources import SessionStore, SponsorSource, VideoSource
from ..utils import utcnow
from .candidate_pool import get_candidate_pool
from .cdn import rewrite_feed
from .interleave import interleave_by_owner
from .sessions import get_session, mark_seen, session_key
from .sponsors import get_sponsored_slots, splice_sponsored

logger = logging.getLogger(__name__)


async def assemble_feed(
    request: FeedRequest,
    *,
    videos: VideoSource,
    sponsors: SponsorSource,
    sessions: SessionStore,
    config: Optional[FeedConfig] = None,
    cdn_base_url: Optional[str] = None,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> List[FeedSlot]:
    """
    Assemble one page of the personalized feed.

    page_number == 1 resets the requester's session; later pages skip every
    organic video already delivered in the session. Data source errors
    propagate to the caller unchanged.

    Returns:
        Organic slots (owner-interleaved) with sponsored slots after every
        sponsor_interval-th organic item, leftovers appended; URLs rewritten.
    """
    # Resolve config and injected randomness/clock
    config = resolve_config(config)
    rng = rng if rng is not None else random.Random()
    now = now if now is not None else utcnow()

    session = await get_session(
        sessions, request.user_id, request.page_number, config, rng, now
    )

    sponsored = await get_sponsored_slots(videos, sponsors, request, config, rng)

    pool = await get_candidate_pool(videos, request, session, config, rng, now)
    organic = interleave_by_owner(pool, rng, limit=request.per_page)

    # Only organic ids count as seen; sponsored slots may repeat across pages
    mark_seen(session, [v.id for v in organic])
    await sessions.save(session_key(request.user_id, config), session)

    page = splice_sponsored(
        [FeedSlot(video=v) for v in organic],
        sponsored,
        config.sponsor_interval,
    )
    logger.info(
        "[feed] user=%s page=%d per_page=%d organic=%d sponsored=%d seen=%d",
        request.user_id or config.guest_session_key,
        request.page_number,
        request.per_page,
        len(organic),
        len(sponsored),
        len(session.seen_video_ids),
    )
    return rewrite_feed(page, cdn_base_url)


async def get_featured_feed(
    request: FeedRequest,
    *,
    videos: VideoSource,
    config: Optional[FeedConfig] = None,
    cdn_base_url: Optional[str] = None,
) -> List[FeedSlot]:
    """Featured organic videos from influencers, newest first. Empty list when none."""
    config = resolve_config(config)
    query = VideoQuery(
        blocked_owner_ids=set(request.blocked_owner_ids),
        sponsored=False,
        featured_only=True,
        required_owner_role=config.required_owner_role,
    )
    found = await videos.find_videos(query, limit=None, newest_first=True)
    slots = [FeedSlot(video=v) for v in found if query.matches(v)]
    logger.debug("[feed] featured count=%d", len(slots))
    return rewrite_feed(slots, cdn_base_url)
