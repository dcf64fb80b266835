"""
Clipfeed feed assembly

Single entry point for the feed package:
- models/: FeedConfig, FeedRequest, FeedSession, FeedSlot, Video, User, Sponsor, VideoQuery
- stages/: sessions, candidate_pool, interleave, sponsors, cdn, orchestrator
- sources: VideoSource, SponsorSource, UserSource, SessionStore protocols
- session_store: InMemorySessionStore
"""

from .models import (
    DEFAULT_CONFIG,
    FeedConfig,
    FeedRequest,
    FeedSession,
    FeedSlot,
    Sponsor,
    User,
    Video,
    VideoQuery,
    resolve_config,
)
from .session_store import InMemorySessionStore
from .sources import SessionStore, SponsorSource, UserSource, VideoSource
from .stages import (
    assemble_feed,
    get_featured_feed,
    get_session,
    interleave_by_owner,
    mark_seen,
    rewrite_storage_url,
    session_key,
)

__all__ = [
    "DEFAULT_CONFIG",
    "FeedConfig",
    "FeedRequest",
    "FeedSession",
    "FeedSlot",
    "InMemorySessionStore",
    "SessionStore",
    "Sponsor",
    "SponsorSource",
    "User",
    "UserSource",
    "Video",
    "VideoQuery",
    "VideoSource",
    "assemble_feed",
    "get_featured_feed",
    "get_session",
    "interleave_by_owner",
    "mark_seen",
    "resolve_config",
    "rewrite_storage_url",
    "session_key",
]
