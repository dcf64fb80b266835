#!/usr/bin/env python3
"""
Owner Interleave Tests

Tests that no two adjacent items share an owner unless every remaining item
belongs to that owner, that the output is a permutation of the input, and
that truncation keeps the prefix.

Run:
----
    pytest tests/test_interleave.py -v
"""

import random
from collections import Counter

import pytest

from feed.stages.interleave import interleave_by_owner

from conftest import assert_owner_diverse, make_video


def _videos(owner_counts):
    out = []
    for owner, n in owner_counts.items():
        out.extend(make_video(f"{owner}-{i}", owner) for i in range(n))
    return out


class TestInterleave:
    @pytest.mark.parametrize("seed", range(10))
    def test_balanced_owners_adjacent_only_at_tail(self, seed):
        videos = _videos({"a": 3, "b": 3, "c": 3})
        assert_owner_diverse(interleave_by_owner(videos, random.Random(seed)))

    def test_one_video_per_owner_all_emitted(self):
        videos = _videos({"a": 1, "b": 1})
        owners = [v.owner_id for v in interleave_by_owner(videos, random.Random(0))]
        assert sorted(owners) == ["a", "b"]

    @pytest.mark.parametrize("seed", range(10))
    def test_skewed_owners_relax_only_at_tail(self, seed):
        videos = _videos({"a": 6, "b": 2, "c": 1})
        result = interleave_by_owner(videos, random.Random(seed))
        assert_owner_diverse(result)

    def test_output_is_permutation(self):
        videos = _videos({"a": 4, "b": 2})
        result = interleave_by_owner(videos, random.Random(5))
        assert Counter(v.id for v in result) == Counter(v.id for v in videos)

    def test_single_owner_keeps_everything(self):
        videos = _videos({"solo": 4})
        result = interleave_by_owner(videos, random.Random(0))
        assert len(result) == 4

    def test_limit_truncates(self):
        videos = _videos({"a": 3, "b": 3})
        full = interleave_by_owner(videos, random.Random(9))
        cut = interleave_by_owner(videos, random.Random(9), limit=4)
        assert [v.id for v in cut] == [v.id for v in full[:4]]

    def test_empty_input(self):
        assert interleave_by_owner([], random.Random(0)) == []

    def test_input_not_mutated(self):
        videos = _videos({"a": 2, "b": 2})
        before = [v.id for v in videos]
        interleave_by_owner(videos, random.Random(1))
        assert [v.id for v in videos] == before
