#!/usr/bin/env python3
"""
CDN Rewrite Tests

Run:
----
    pytest tests/test_cdn.py -v
"""

from feed.models.slot import FeedSlot
from feed.stages.cdn import (
    is_storage_url,
    rewrite_feed,
    rewrite_slot,
    rewrite_storage_url,
)

from conftest import make_sponsor, make_user, make_video

CDN = "https://d111.cloudfront.net"


class TestRewriteStorageUrl:
    def test_virtual_hosted_bucket(self):
        url = "https://media.s3.amazonaws.com/thumbs/a.jpg"
        assert rewrite_storage_url(url, CDN) == f"{CDN}/thumbs/a.jpg"

    def test_regional_bucket(self):
        url = "https://media.s3-eu-west-1.amazonaws.com/a.jpg"
        assert rewrite_storage_url(url, CDN) == f"{CDN}/a.jpg"

    def test_path_style_drops_bucket(self):
        url = "https://s3.us-east-1.amazonaws.com/media/thumbs/a.jpg"
        assert rewrite_storage_url(url, CDN) == f"{CDN}/thumbs/a.jpg"

    def test_non_storage_url_untouched(self):
        url = "https://images.example.com/s3/a.jpg"
        assert not is_storage_url(url)
        assert rewrite_storage_url(url, CDN) == url

    def test_idempotent(self):
        once = rewrite_storage_url("https://media.s3.amazonaws.com/a.jpg", CDN)
        assert rewrite_storage_url(once, CDN) == once

    def test_none_and_missing_cdn(self):
        assert rewrite_storage_url(None, CDN) is None
        url = "https://media.s3.amazonaws.com/a.jpg"
        assert rewrite_storage_url(url, None) == url

    def test_trailing_slash_on_cdn(self):
        url = "https://media.s3.amazonaws.com/a.jpg"
        assert rewrite_storage_url(url, CDN + "/") == f"{CDN}/a.jpg"


class TestRewriteSlot:
    def _slot(self):
        video = make_video("v1", "owner", owner=make_user("owner"), sponsored=True)
        return FeedSlot(
            video=video,
            sponsored=True,
            sponsor=make_sponsor("s1", "v1", shop_image="https://shop.example.com/x.png"),
            instance_id="v1_0",
        )

    def test_all_media_urls_rewritten(self):
        out = rewrite_slot(self._slot(), CDN)
        assert out.video.url == f"{CDN}/videos/v1.mp4"
        assert out.video.thumbnail_url == f"{CDN}/thumbs/v1.jpg"
        assert out.video.owner.profile_pic == f"{CDN}/avatars/owner.jpg"
        assert out.sponsor.logo == f"{CDN}/brands/s1.png"
        assert out.sponsor.shop_image == "https://shop.example.com/x.png"
        assert out.instance_id == "v1_0"

    def test_input_not_mutated(self):
        slot = self._slot()
        rewrite_slot(slot, CDN)
        assert slot.video.url is None
        assert slot.video.thumbnail_url.startswith("https://media.s3")

    def test_no_cdn_returns_slot_unchanged(self):
        slot = self._slot()
        assert rewrite_slot(slot, None) is slot

    def test_rewrite_feed_twice_is_stable(self):
        slots = [self._slot()]
        once = rewrite_feed(slots, CDN)
        twice = rewrite_feed(once, CDN)
        assert [s.model_dump() for s in once] == [s.model_dump() for s in twice]
