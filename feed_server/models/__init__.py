"""Pydantic request/response models for the API."""

from .common import FeedCard, OwnerCard, SponsorCard
from .feed import FeedResponse, SessionInfo, StatsResponse

__all__ = [
    "FeedCard",
    "FeedResponse",
    "OwnerCard",
    "SessionInfo",
    "SponsorCard",
    "StatsResponse",
]
