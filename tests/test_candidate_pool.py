#!/usr/bin/env python3
"""
Candidate Pool Tests

Tests recency tiering, drain order, organic eligibility and the random
sample fill used when the newest-first batch cannot fill a page.

Run:
----
    pytest tests/test_candidate_pool.py -v
"""

import asyncio
import random
from datetime import timedelta

from feed.models.config import FeedConfig
from feed.models.request import FeedRequest
from feed.models.session import FeedSession
from feed.stages.candidate_pool import (
    RecencyTiers,
    drain_tiers,
    get_candidate_pool,
    organic_query,
    split_into_tiers,
)
from feed_server.services import InMemoryCatalog

from conftest import NOW, make_user, make_video

CONFIG = FeedConfig()


def _pool(source, request, session=None, rng=None):
    session = session or FeedSession(last_touched_at=NOW)
    return asyncio.run(
        get_candidate_pool(source, request, session, CONFIG, rng or random.Random(3), NOW)
    )


class TestTiers:
    """Age buckets: recent (<= 24h), week (<= 7d), older."""

    def test_split_by_age(self):
        videos = [
            make_video("r", "o", age=timedelta(hours=2)),
            make_video("w", "o", age=timedelta(days=3)),
            make_video("x", "o", age=timedelta(days=30)),
        ]
        tiers = split_into_tiers(videos, NOW, CONFIG)
        assert [v.id for v in tiers.recent] == ["r"]
        assert [v.id for v in tiers.week] == ["w"]
        assert [v.id for v in tiers.older] == ["x"]

    def test_boundary_ages_go_to_newer_tier(self):
        videos = [
            make_video("edge24h", "o", age=timedelta(hours=24)),
            make_video("edge7d", "o", age=timedelta(days=7)),
        ]
        tiers = split_into_tiers(videos, NOW, CONFIG)
        assert [v.id for v in tiers.recent] == ["edge24h"]
        assert [v.id for v in tiers.week] == ["edge7d"]

    def test_future_timestamps_count_as_recent(self):
        videos = [make_video("future", "o", age=timedelta(hours=-5))]
        assert split_into_tiers(videos, NOW, CONFIG).recent[0].id == "future"

    def test_drain_takes_recent_then_week_then_older(self):
        r = [make_video(f"r{i}", "o", age=timedelta(hours=1)) for i in range(2)]
        w = [make_video(f"w{i}", "o", age=timedelta(days=2)) for i in range(2)]
        o = [make_video(f"o{i}", "o") for i in range(2)]
        picked = drain_tiers(RecencyTiers(r, w, o), 5)
        assert [v.id for v in picked] == ["r0", "r1", "w0", "w1", "o0"]

    def test_drain_stops_at_limit_inside_first_tier(self):
        r = [make_video(f"r{i}", "o", age=timedelta(hours=1)) for i in range(4)]
        assert len(drain_tiers(RecencyTiers(r, [], []), 2)) == 2


class TestEligibility:
    """Only public, live, organic, unseen influencer videos from unblocked owners."""

    def _catalog(self):
        return InMemoryCatalog(
            videos=[
                make_video("ok", "inf", age=timedelta(hours=1)),
                make_video("private", "inf", is_private=True),
                make_video("deleted", "inf", is_deleted=True),
                make_video("ad", "inf", sponsored=True),
                make_video("plain", "viewer"),
                make_video("blocked", "bad"),
                make_video("seen", "inf"),
                make_video("orphan", "ghost"),
            ],
            users=[
                make_user("inf"),
                make_user("bad"),
                make_user("viewer", role="user"),
            ],
            rng=random.Random(1),
        )

    def test_filters_ineligible_videos(self):
        session = FeedSession(seen_video_ids={"seen"}, last_touched_at=NOW)
        request = FeedRequest(blocked_owner_ids={"bad"}, per_page=10)
        pool = _pool(self._catalog(), request, session)
        assert [v.id for v in pool] == ["ok"]

    def test_organic_query_carries_session_and_blocks(self):
        session = FeedSession(seen_video_ids={"a"}, last_touched_at=NOW)
        query = organic_query(FeedRequest(blocked_owner_ids={"b"}), session, CONFIG)
        assert query.exclude_ids == {"a"}
        assert query.blocked_owner_ids == {"b"}
        assert query.sponsored is False
        assert query.required_owner_role == "influencer"


class TestPoolAssembly:
    def test_recent_videos_fill_page_first(self):
        videos = [make_video(f"old{i}", "inf") for i in range(5)]
        videos += [make_video(f"new{i}", "inf", age=timedelta(hours=i + 1)) for i in range(3)]
        catalog = InMemoryCatalog(videos=videos, users=[make_user("inf")])
        pool = _pool(catalog, FeedRequest(per_page=4))
        ids = [v.id for v in pool]
        assert len(ids) == 4
        assert set(ids[:3]) == {"new0", "new1", "new2"}
        assert ids[3].startswith("old")

    def test_short_catalog_returns_fewer(self):
        catalog = InMemoryCatalog(
            videos=[make_video("only", "inf")], users=[make_user("inf")]
        )
        assert [v.id for v in _pool(catalog, FeedRequest(per_page=5))] == ["only"]

    def test_sample_fill_adds_unpicked_videos_only(self):
        inf = make_user("inf")
        batch = [make_video(f"b{i}", "inf", owner=inf) for i in range(2)]
        extra = [make_video(f"s{i}", "inf", owner=inf) for i in range(5)]

        class ShortBatchSource:
            """Returns a short newest-first batch but a wider random sample."""

            def __init__(self):
                self.sample_queries = []

            async def find_videos(self, query, limit=None, newest_first=True):
                return list(batch)

            async def sample_videos(self, query, size):
                self.sample_queries.append((query, size))
                # Deliberately includes an already-picked id
                return [batch[0]] + extra[:size]

        source = ShortBatchSource()
        pool = _pool(source, FeedRequest(per_page=5))
        ids = [v.id for v in pool]
        assert len(ids) == 5
        assert len(set(ids)) == 5
        assert {"b0", "b1"} <= set(ids)

        query, size = source.sample_queries[0]
        assert size == 3
        assert {"b0", "b1"} <= query.exclude_ids

    def test_no_sample_when_page_is_full(self):
        inf = make_user("inf")
        batch = [make_video(f"b{i}", "inf", owner=inf) for i in range(6)]

        class FullSource:
            async def find_videos(self, query, limit=None, newest_first=True):
                assert limit == 3 * CONFIG.candidate_overfetch_multiplier
                assert newest_first is True
                return list(batch)

            async def sample_videos(self, query, size):
                raise AssertionError("sample should not be needed")

        assert len(_pool(FullSource(), FeedRequest(per_page=3))) == 3
