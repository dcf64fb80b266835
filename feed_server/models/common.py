"""Common Pydantic models shared across routes."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class OwnerCard(BaseModel):
    id: str
    name: Optional[str] = ""
    username: Optional[str] = ""
    role: Optional[str] = None
    profile_pic: Optional[str] = None
    cover_image: Optional[str] = None


class SponsorCard(BaseModel):
    id: str
    brand_name: str = ""
    logo: Optional[str] = None
    description: Optional[str] = ""
    url: Optional[str] = None
    display_text: str = "Sponsored"
    cover_image: Optional[str] = None
    shop_image: Optional[str] = None
    shop_text: str = ""
    username: str = ""


class FeedCard(BaseModel):
    id: str
    instance_id: Optional[str] = None
    original_video_id: Optional[str] = None
    name: Optional[str] = ""
    caption: Optional[str] = ""
    url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    created_at: datetime
    view_count: int = 0
    tags: List[str] = []
    sponsored: bool = False
    is_featured: bool = False
    owner: Optional[OwnerCard] = None
    sponsor_info: Optional[SponsorCard] = None
