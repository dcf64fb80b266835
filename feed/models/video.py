"""
Video, User and Sponsor models: typed records read from the video catalog.

Built from catalog dicts via Video.model_validate(d). Document-store field
names (isPrivate, createdAt, ...) are converted by the server's schema adapter
before they reach these models.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


def as_utc(value: datetime) -> datetime:
    """Naive datetimes from the store are UTC; make them timezone-aware."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class User(BaseModel):
    """
    A platform user: video owner or requesting viewer.

    blocked_user_ids is only meaningful for the requester; owners embedded in
    videos usually carry an empty list.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: Optional[str] = ""
    username: Optional[str] = ""
    role: Optional[str] = None
    profile_pic: Optional[str] = None
    cover_image: Optional[str] = None
    blocked_user_ids: List[str] = []


class Sponsor(BaseModel):
    """Brand record attached to a sponsored video (reverse lookup on video_id)."""

    model_config = ConfigDict(extra="allow")

    id: str
    video_id: Optional[str] = None
    brand_name: str = ""
    logo: Optional[str] = None
    description: Optional[str] = ""
    url: Optional[str] = None
    display_text: str = "Sponsored"
    cover_image: Optional[str] = None
    shop_image: Optional[str] = None
    shop_text: str = ""
    username: str = ""
    is_deleted: bool = False


class Video(BaseModel):
    """
    Video payload used across the feed stages.

    owner is the joined owner record; it is None when the store could not join
    one (such videos never pass the organic eligibility filter).
    """

    model_config = ConfigDict(extra="allow")

    id: str
    owner_id: str
    owner: Optional[User] = None
    created_at: datetime
    name: Optional[str] = ""
    caption: Optional[str] = ""
    url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    s3_bucket_id: Optional[str] = None
    is_private: bool = False
    is_deleted: bool = False
    is_featured: bool = False
    sponsored: bool = False
    view_count: int = 0
    tags: List[str] = []

    @field_validator("created_at")
    @classmethod
    def _created_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    @property
    def owner_role(self) -> Optional[str]:
        return self.owner.role if self.owner is not None else None
