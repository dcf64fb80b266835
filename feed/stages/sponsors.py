"""
Sponsored slots: pick paid videos for this page and splice them into the organic feed.

Budget is per_page // sponsor_slot_divisor. When fewer distinct sponsored
videos exist than slots, videos are repeated as separate slots with a
"<video id>_<index>" instance id.
"""

import logging
import random
from typing import Dict, List

from ..models.config import FeedConfig
from ..models.query import VideoQuery
from ..models.request import FeedRequest
from ..models.slot import FeedSlot
from ..models.video import Sponsor, Video
from ..sources import SponsorSource, VideoSource
from ..utils import shuffled

logger = logging.getLogger(__name__)


def sponsor_slot_budget(per_page: int, config: FeedConfig) -> int:
    """Number of sponsored slots for one page."""
    return per_page // config.sponsor_slot_divisor


def sponsored_query(request: FeedRequest) -> VideoQuery:
    """Sponsored videos: public, not deleted, owner not blocked. No role or seen filter."""
    return VideoQuery(
        blocked_owner_ids=set(request.blocked_owner_ids),
        sponsored=True,
        required_owner_role=None,
    )


def fill_sponsor_slots(
    videos: List[Video],
    sponsors: Dict[str, Sponsor],
    budget: int,
    rng: random.Random,
) -> List[FeedSlot]:
    """Cycle through videos until budget slots exist, then shuffle the slots."""
    slots: List[FeedSlot] = []
    if not videos:
        return slots
    while len(slots) < budget:
        for video in videos:
            if len(slots) >= budget:
                break
            slots.append(
                FeedSlot(
                    video=video,
                    sponsored=True,
                    sponsor=sponsors.get(video.id),
                    instance_id=f"{video.id}_{len(slots)}",
                )
            )
    rng.shuffle(slots)
    return slots


async def get_sponsored_slots(
    videos: VideoSource,
    sponsors: SponsorSource,
    request: FeedRequest,
    config: FeedConfig,
    rng: random.Random,
) -> List[FeedSlot]:
    """
    Sponsored slots for one page, at most sponsor_slot_budget(per_page).

    Videos without a sponsor record are kept with sponsor=None.
    """
    budget = sponsor_slot_budget(request.per_page, config)
    if budget <= 0:
        return []

    query = sponsored_query(request)
    found = await videos.find_videos(
        query,
        limit=budget * config.sponsor_overfetch_multiplier,
        newest_first=False,
    )
    found = [v for v in found if query.matches(v)]
    if not found:
        logger.debug("[sponsors] NONE_AVAILABLE budget=%d", budget)
        return []

    picked = shuffled(found, rng)[:budget]
    by_video_id = await sponsors.find_by_video_ids([v.id for v in picked])
    missing = [v.id for v in picked if v.id not in by_video_id]
    if missing:
        logger.debug("[sponsors] SPONSOR_RECORD_MISSING video_ids=%s", missing)

    slots = fill_sponsor_slots(picked, by_video_id, budget, rng)
    logger.debug("[sponsors] budget=%d distinct=%d slots=%d", budget, len(picked), len(slots))
    return slots


def splice_sponsored(
    organic: List[FeedSlot],
    sponsored: List[FeedSlot],
    interval: int,
) -> List[FeedSlot]:
    """
    Insert one sponsored slot after every interval-th organic slot.

    Sponsored slots left over after the walk are appended at the end.
    """
    result: List[FeedSlot] = []
    remaining = iter(sponsored)
    used = 0
    for i, slot in enumerate(organic):
        result.append(slot)
        if (i + 1) % interval == 0 and used < len(sponsored):
            result.append(next(remaining))
            used += 1
    result.extend(remaining)
    return result
