"""
Shared fixtures and record builders for the feed tests.

All tests use a fixed clock (NOW) and a seeded random.Random so feed
assembly is deterministic.
"""

import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import pytest

from feed.models.video import Sponsor, User, Video
from feed.session_store import InMemorySessionStore
from feed_server.services import InMemoryCatalog

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def make_user(user_id: str, role: str = "influencer", blocked: Optional[List[str]] = None) -> User:
    return User(
        id=user_id,
        name=user_id.title(),
        username=user_id,
        role=role,
        profile_pic=f"https://media.s3.amazonaws.com/avatars/{user_id}.jpg",
        blocked_user_ids=blocked or [],
    )


def make_video(
    video_id: str,
    owner_id: str,
    age: timedelta = timedelta(days=10),
    **fields,
) -> Video:
    return Video(
        id=video_id,
        owner_id=owner_id,
        created_at=NOW - age,
        s3_bucket_id=f"videos/{video_id}.mp4",
        thumbnail_url=f"https://media.s3.amazonaws.com/thumbs/{video_id}.jpg",
        **fields,
    )


def make_sponsor(sponsor_id: str, video_id: str, **fields) -> Sponsor:
    return Sponsor(
        id=sponsor_id,
        video_id=video_id,
        brand_name=f"Brand {sponsor_id}",
        logo=f"https://media.s3.amazonaws.com/brands/{sponsor_id}.png",
        **fields,
    )


def organic_ids(slots) -> List[str]:
    return [s.video.id for s in slots if not s.sponsored]


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def session_store():
    return InMemorySessionStore()


@pytest.fixture
def influencers():
    return [make_user(f"owner{i}") for i in range(4)]


@pytest.fixture
def catalog(influencers):
    """30 organic videos across 4 influencers plus one sponsored video with a brand record."""
    videos = [
        make_video(f"v{i:02d}", f"owner{i % 4}", age=timedelta(hours=3 + i * 7))
        for i in range(30)
    ]
    videos.append(make_video("ad1", "brand", sponsored=True))
    return InMemoryCatalog(
        videos=videos,
        users=influencers + [make_user("brand", role="sponsor")],
        sponsors=[make_sponsor("s1", "ad1")],
        rng=random.Random(7),
    )


def assert_owner_diverse(videos) -> None:
    """Adjacent items share an owner only when every remaining item has that owner."""
    owners = [v.owner_id for v in videos]
    for i in range(1, len(owners)):
        if owners[i] == owners[i - 1]:
            assert all(o == owners[i] for o in owners[i:]), owners
