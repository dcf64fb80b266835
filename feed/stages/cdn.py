"""
CDN rewrite: map object-storage bucket URLs to public delivery URLs.

Applied to every slot of an assembled page (video, thumbnail, owner images,
sponsor brand assets). Only storage-bucket URLs are rewritten, so applying the
transform to its own output changes nothing.
"""

import re
from typing import List, Optional
from urllib.parse import urlparse

from ..models.slot import FeedSlot

# Host label "s3": bucket.s3.amazonaws.com, bucket.s3-eu-west-1.amazonaws.com,
# s3.us-east-1.amazonaws.com/bucket (path style)
_STORAGE_HOST = re.compile(r"(^|\.)s3([.-]|$)")


def is_storage_url(url: Optional[str]) -> bool:
    if not url:
        return False
    host = urlparse(url).hostname or ""
    return bool(_STORAGE_HOST.search(host))


def _object_key(url: str) -> str:
    parsed = urlparse(url)
    path = parsed.path.lstrip("/")
    host = parsed.hostname or ""
    if host.startswith("s3.") or host.startswith("s3-"):
        # Path-style URL: first segment is the bucket name
        path = path.split("/", 1)[1] if "/" in path else ""
    return path


def cdn_url(cdn_base_url: str, key: str) -> str:
    return f"{cdn_base_url.rstrip('/')}/{key.lstrip('/')}"


def rewrite_storage_url(url: Optional[str], cdn_base_url: Optional[str]) -> Optional[str]:
    """Rewrite a storage-bucket URL onto the CDN; return any other value unchanged."""
    if not cdn_base_url or not is_storage_url(url):
        return url
    return cdn_url(cdn_base_url, _object_key(url))


def rewrite_slot(slot: FeedSlot, cdn_base_url: Optional[str]) -> FeedSlot:
    """Copy of slot with all media URLs pointing at the CDN. slot is not mutated."""
    if not cdn_base_url:
        return slot

    video = slot.video
    video_updates = {
        "thumbnail_url": rewrite_storage_url(video.thumbnail_url, cdn_base_url),
    }
    if video.s3_bucket_id:
        video_updates["url"] = cdn_url(cdn_base_url, video.s3_bucket_id)
    if video.owner is not None:
        video_updates["owner"] = video.owner.model_copy(update={
            "profile_pic": rewrite_storage_url(video.owner.profile_pic, cdn_base_url),
            "cover_image": rewrite_storage_url(video.owner.cover_image, cdn_base_url),
        })

    slot_updates = {"video": video.model_copy(update=video_updates)}
    if slot.sponsor is not None:
        slot_updates["sponsor"] = slot.sponsor.model_copy(update={
            "logo": rewrite_storage_url(slot.sponsor.logo, cdn_base_url),
            "cover_image": rewrite_storage_url(slot.sponsor.cover_image, cdn_base_url),
            "shop_image": rewrite_storage_url(slot.sponsor.shop_image, cdn_base_url),
        })
    return slot.model_copy(update=slot_updates)


def rewrite_feed(slots: List[FeedSlot], cdn_base_url: Optional[str]) -> List[FeedSlot]:
    return [rewrite_slot(slot, cdn_base_url) for slot in slots]
