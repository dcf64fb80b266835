#!/usr/bin/env python3
"""
Schema Adapter Tests

Tests conversion of document-store records (camelCase fields, extended JSON
ids and dates, joined owners) into the feed models.

Run:
----
    pytest tests/test_schema_adapter.py -v
"""

from datetime import datetime, timezone

from feed_server.schema import (
    is_document_format,
    to_sponsor,
    to_user,
    to_video,
    to_video_dict,
)


VIDEO_DOC = {
    "_id": {"$oid": "65a000000000000000000001"},
    "owner": {"$oid": "65b000000000000000000001"},
    "name": "Morning run",
    "caption": "5k before work",
    "s3BucketId": "videos/run.mp4",
    "thumbnailUrl": "https://media.s3.amazonaws.com/thumbs/run.jpg",
    "isPrivate": False,
    "isDeleted": False,
    "isFeatured": True,
    "viewCount": 42,
    "createdAt": {"$date": "2026-10-18T08:00:00Z"},
}


class TestVideoAdapter:
    def test_document_fields_mapped(self):
        video = to_video(VIDEO_DOC)
        assert video.id == "65a000000000000000000001"
        assert video.owner_id == "65b000000000000000000001"
        assert video.owner is None
        assert video.s3_bucket_id == "videos/run.mp4"
        assert video.is_featured is True
        assert video.sponsored is False
        assert video.view_count == 42
        assert video.created_at == datetime(2026, 10, 18, 8, 0, tzinfo=timezone.utc)

    def test_joined_owner_doc(self):
        doc = dict(VIDEO_DOC)
        doc["owner"] = {
            "_id": "65b000000000000000000001",
            "name": "Ana",
            "role": "influencer",
            "profilePic": "https://media.s3.amazonaws.com/a.jpg",
        }
        video = to_video(doc)
        assert video.owner_id == "65b000000000000000000001"
        assert video.owner_role == "influencer"
        assert video.owner.profile_pic.endswith("a.jpg")

    def test_naive_datetime_treated_as_utc(self):
        doc = dict(VIDEO_DOC, createdAt=datetime(2026, 1, 1, 12, 0))
        assert to_video(doc).created_at.tzinfo is not None

    def test_feed_format_passes_through(self):
        raw = {"id": "v1", "owner_id": "o1", "created_at": "2026-10-01T00:00:00Z"}
        assert not is_document_format(raw)
        assert to_video_dict(raw) is raw
        assert to_video(raw).id == "v1"


class TestUserAndSponsorAdapter:
    def test_user_blocked_list(self):
        user = to_user({
            "_id": {"$oid": "65b000000000000000000009"},
            "name": "Sam",
            "role": "user",
            "blockedUsers": [{"$oid": "65b000000000000000000002"}],
        })
        assert user.id == "65b000000000000000000009"
        assert user.blocked_user_ids == ["65b000000000000000000002"]

    def test_sponsor_fields(self):
        sponsor = to_sponsor({
            "_id": "s1",
            "videoId": {"$oid": "65a000000000000000000008"},
            "brandName": "Acme",
            "shopImage": "https://media.s3.amazonaws.com/shop.png",
            "isDeleted": False,
        })
        assert sponsor.video_id == "65a000000000000000000008"
        assert sponsor.brand_name == "Acme"
        assert sponsor.display_text == "Sponsored"
        assert sponsor.shop_image.endswith("shop.png")
