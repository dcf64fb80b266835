"""Pure helpers: feed card formatting and page size limits."""

from typing import Optional

from feed.models.slot import FeedSlot

from .models import FeedCard, OwnerCard, SponsorCard

# Feed page size limits (used by routes/videos)
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50


def clamp_page_size(per_page: Optional[int], default: int = DEFAULT_PAGE_SIZE) -> int:
    """Page size from the query string: default when missing, capped at MAX_PAGE_SIZE."""
    if per_page is None:
        return min(default, MAX_PAGE_SIZE)
    return max(1, min(per_page, MAX_PAGE_SIZE))


def to_feed_card(slot: FeedSlot) -> FeedCard:
    """Convert a FeedSlot (organic or sponsored) to the public FeedCard."""
    video = slot.video
    owner = None
    if video.owner is not None:
        owner = OwnerCard(
            id=video.owner.id,
            name=video.owner.name,
            username=video.owner.username,
            role=video.owner.role,
            profile_pic=video.owner.profile_pic,
            cover_image=video.owner.cover_image,
        )
    sponsor = None
    if slot.sponsor is not None:
        sponsor = SponsorCard.model_validate(slot.sponsor.model_dump())
    return FeedCard(
        id=video.id,
        instance_id=slot.instance_id,
        original_video_id=video.id if slot.sponsored else None,
        name=video.name,
        caption=video.caption,
        url=video.url,
        thumbnail_url=video.thumbnail_url,
        created_at=video.created_at,
        view_count=video.view_count,
        tags=video.tags,
        sponsored=slot.sponsored,
        is_featured=video.is_featured,
        owner=owner,
        sponsor_info=sponsor,
    )
