"""Pipeline stages: sessions, candidate pool, owner interleave, sponsors, CDN rewrite, orchestration."""

from .candidate_pool import get_candidate_pool
from .cdn import rewrite_feed, rewrite_storage_url
from .interleave import interleave_by_owner
from .orchestrator import assemble_feed, get_featured_feed
from .sessions import get_session, mark_seen, session_key
from .sponsors import get_sponsored_slots, splice_sponsored, sponsor_slot_budget

__all__ = [
    "assemble_feed",
    "get_candidate_pool",
    "get_featured_feed",
    "get_session",
    "get_sponsored_slots",
    "interleave_by_owner",
    "mark_seen",
    "rewrite_feed",
    "rewrite_storage_url",
    "session_key",
    "splice_sponsored",
    "sponsor_slot_budget",
]
