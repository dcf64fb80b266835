"""
Candidate pool: eligible, not-yet-seen organic videos biased toward recency.

Fetches an over-sized newest-first batch, splits it into recent / week / older
tiers, shuffles each tier and drains them in that order. If the drained pool
is short, a random sample of eligible videos fills the rest.

The public entry point is get_candidate_pool.
"""

import logging
import random
from datetime import datetime
from typing import List, NamedTuple

from ..models.config import FeedConfig
from ..models.query import VideoQuery
from ..models.request import FeedRequest
from ..models.session import FeedSession
from ..models.video import Video
from ..sources import VideoSource
from ..utils import age_of

logger = logging.getLogger(__name__)


class RecencyTiers(NamedTuple):
    recent: List[Video]
    week: List[Video]
    older: List[Video]


def organic_query(
    request: FeedRequest,
    session: FeedSession,
    config: FeedConfig,
) -> VideoQuery:
    """Eligibility filter for organic feed candidates."""
    return VideoQuery(
        blocked_owner_ids=set(request.blocked_owner_ids),
        exclude_ids=set(session.seen_video_ids),
        sponsored=False,
        required_owner_role=config.required_owner_role,
    )


def split_into_tiers(
    videos: List[Video],
    now: datetime,
    config: FeedConfig,
) -> RecencyTiers:
    """Bucket videos by age: recent (<= recent window), week (<= week window), older."""
    tiers = RecencyTiers([], [], [])
    for video in videos:
        age = age_of(video.created_at, now)
        if age <= config.recent_window:
            tiers.recent.append(video)
        elif age <= config.week_window:
            tiers.week.append(video)
        else:
            tiers.older.append(video)
    return tiers


def shuffle_tiers(tiers: RecencyTiers, rng: random.Random) -> RecencyTiers:
    for tier in tiers:
        rng.shuffle(tier)
    return tiers


def drain_tiers(tiers: RecencyTiers, limit: int) -> List[Video]:
    """Take from recent, then week, then older until limit items are collected."""
    picked: List[Video] = []
    for tier in tiers:
        for video in tier:
            if len(picked) >= limit:
                return picked
            picked.append(video)
    return picked


async def get_candidate_pool(
    videos: VideoSource,
    request: FeedRequest,
    session: FeedSession,
    config: FeedConfig,
    rng: random.Random,
    now: datetime,
) -> List[Video]:
    """
    Build up to request.per_page organic candidates.

    Excludes private, deleted, sponsored, already-seen, blocked-owner and
    non-influencer videos. Returns fewer items when the catalog runs dry.
    """
    per_page = request.per_page
    query = organic_query(request, session, config)

    # Over-fetch newest first so every tier has material
    raw = await videos.find_videos(
        query,
        limit=per_page * config.candidate_overfetch_multiplier,
        newest_first=True,
    )
    eligible = [v for v in raw if query.matches(v)]

    tiers = shuffle_tiers(split_into_tiers(eligible, now, config), rng)
    picked = drain_tiers(tiers, per_page)
    logger.debug(
        "[candidate_pool] raw=%d eligible=%d tiers=(%d,%d,%d) picked=%d",
        len(raw), len(eligible), len(tiers.recent), len(tiers.week), len(tiers.older), len(picked),
    )

    # Supplementary random sample when the tiers could not fill the page
    if len(picked) < per_page:
        missing = per_page - len(picked)
        picked_ids = {v.id for v in picked}
        fill_query = query.excluding(picked_ids)
        sample = await videos.sample_videos(fill_query, missing)
        for video in sample:
            if len(picked) >= per_page:
                break
            if video.id in picked_ids or not fill_query.matches(video):
                continue
            picked.append(video)
            picked_ids.add(video.id)
        logger.debug(
            "[candidate_pool] SAMPLE_FILL missing=%d sampled=%d total=%d",
            missing, len(sample), len(picked),
        )

    return picked
