"""Data models for feed assembly."""

from .config import DEFAULT_CONFIG, FeedConfig, resolve_config
from .query import VideoQuery
from .request import FeedRequest
from .session import FeedSession
from .slot import FeedSlot
from .video import Sponsor, User, Video, as_utc

__all__ = [
    "DEFAULT_CONFIG",
    "FeedConfig",
    "FeedRequest",
    "FeedSession",
    "FeedSlot",
    "Sponsor",
    "User",
    "Video",
    "VideoQuery",
    "as_utc",
    "resolve_config",
]
