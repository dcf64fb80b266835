"""
Video query: the eligibility filter shared by every video source.

Sources translate it into their own query language (Mongo aggregation,
in-memory scan). matches() is the in-process reference used by the in-memory
catalog and re-applied by the stages to whatever a source returns.
"""

from typing import Optional, Set

from pydantic import BaseModel, Field

from .video import Video


class VideoQuery(BaseModel):
    """
    Filter over the video catalog.

    Always excludes private and deleted videos. required_owner_role=None skips
    the owner join requirement (sponsored videos are not role-filtered).
    """

    blocked_owner_ids: Set[str] = Field(default_factory=set)
    exclude_ids: Set[str] = Field(default_factory=set)
    sponsored: bool = False
    featured_only: bool = False
    required_owner_role: Optional[str] = None

    def matches(self, video: Video) -> bool:
        if video.is_private or video.is_deleted:
            return False
        if video.owner_id in self.blocked_owner_ids:
            return False
        if video.id in self.exclude_ids:
            return False
        if video.sponsored != self.sponsored:
            return False
        if self.featured_only and not video.is_featured:
            return False
        if self.required_owner_role is not None:
            if video.owner_role != self.required_owner_role:
                return False
        return True

    def excluding(self, video_ids: Set[str]) -> "VideoQuery":
        """Copy of this query that also excludes video_ids."""
        return self.model_copy(update={"exclude_ids": self.exclude_ids | set(video_ids)})
