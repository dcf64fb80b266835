"""Feed and session Pydantic models."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from .common import FeedCard


class FeedResponse(BaseModel):
    message: str
    data: List[FeedCard]


class SessionInfo(BaseModel):
    key: str
    seen_count: int
    last_touched_at: datetime
    expires_at: datetime


class StatsResponse(BaseModel):
    data_source: str
    session_backend: str
    active_sessions: int
    catalog_videos: Optional[int] = None
