"""
Feed slot: one entry of an assembled feed page.

Sponsored videos may be repeated to fill the slot budget, so a slot wraps a
video reference plus a slot-local instance id instead of copying the record.
"""

from typing import Optional

from pydantic import BaseModel

from .video import Sponsor, Video


class FeedSlot(BaseModel):
    """An organic or sponsored position in the feed."""

    video: Video
    sponsored: bool = False
    sponsor: Optional[Sponsor] = None
    # "<video id>_<slot index>" for sponsored slots; None for organic ones.
    instance_id: Optional[str] = None
