"""
Feed request: who is asking, which page, and how many items.
"""

from typing import Optional, Set

from pydantic import BaseModel, Field


class FeedRequest(BaseModel):
    """
    One page request against the feed.

    user_id None means an anonymous request (shared guest session).
    page_number 1 always starts a fresh session.
    """

    user_id: Optional[str] = None
    blocked_owner_ids: Set[str] = Field(default_factory=set)
    per_page: int = Field(default=10, ge=1)
    page_number: int = Field(default=1, ge=1)
