"""
Video schema adapter: convert document-store records → feed model format.

Supports:
- Document-store format (MongoDB export / live docs): _id, isPrivate, createdAt,
  s3BucketId, thumbnailUrl, owner (ObjectId or joined user doc), profilePic,
  blockedUsers, videoId, brandName, ...
- feed format: pass-through (id, owner_id, created_at, ...).

Output dicts are valid for feed.models.video.Video / User / Sponsor.model_validate().
"""

from typing import Any, Dict, Optional

from feed.models.video import Sponsor, User, Video


def _str_id(value: Any) -> str:
    """ObjectId, {"$oid": ...} (extended JSON) or plain string → string id."""
    if isinstance(value, dict) and "$oid" in value:
        return str(value["$oid"])
    return str(value) if value is not None else ""


def _date(value: Any) -> Any:
    """{"$date": ...} (extended JSON) → raw value; datetimes and ISO strings pass through."""
    if isinstance(value, dict) and "$date" in value:
        return value["$date"]
    return value


def _pick(doc: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in doc and doc[key] is not None:
            return doc[key]
    return default


def is_document_format(doc: Dict[str, Any]) -> bool:
    """Detect if a doc uses document-store field names (e.g. _id, createdAt)."""
    return "_id" in doc or "createdAt" in doc or "isPrivate" in doc


def to_user_dict(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a users collection doc to a User dict."""
    if not is_document_format(doc):
        return doc
    return {
        "id": _str_id(_pick(doc, "_id", "id")),
        "name": _pick(doc, "name", default=""),
        "username": _pick(doc, "username", default=""),
        "role": _pick(doc, "role"),
        "profile_pic": _pick(doc, "profilePic", "profile_pic"),
        "cover_image": _pick(doc, "coverImage", "cover_image"),
        "blocked_user_ids": [_str_id(u) for u in _pick(doc, "blockedUsers", "blocked_user_ids", default=[])],
    }


def to_video_dict(doc: Dict[str, Any], owner: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Convert a videos collection doc to a Video dict.

    owner may be passed explicitly (already joined); otherwise a joined owner doc
    embedded under "owner" is used, and a bare owner id leaves owner unset.

    Returns:
        Dict valid for Video.model_validate().
    """
    if not is_document_format(doc):
        return doc
    raw_owner = doc.get("owner")
    if owner is None and isinstance(raw_owner, dict) and "$oid" not in raw_owner:
        owner = raw_owner
    owner_dict = to_user_dict(owner) if owner is not None else None
    owner_id = owner_dict["id"] if owner_dict else _str_id(raw_owner)
    return {
        "id": _str_id(_pick(doc, "_id", "id")),
        "owner_id": owner_id,
        "owner": owner_dict,
        "created_at": _date(_pick(doc, "createdAt", "created_at")),
        "name": _pick(doc, "name", default=""),
        "caption": _pick(doc, "caption", default=""),
        "url": _pick(doc, "url"),
        "thumbnail_url": _pick(doc, "thumbnailUrl", "thumbnail_url"),
        "s3_bucket_id": _pick(doc, "s3BucketId", "s3_bucket_id"),
        "is_private": bool(_pick(doc, "isPrivate", "is_private", default=False)),
        "is_deleted": bool(_pick(doc, "isDeleted", "is_deleted", default=False)),
        "is_featured": bool(_pick(doc, "isFeatured", "is_featured", default=False)),
        "sponsored": bool(_pick(doc, "sponsored", default=False)),
        "view_count": int(_pick(doc, "viewCount", "view_count", default=0)),
        "tags": list(_pick(doc, "tags", default=[])),
    }


def to_sponsor_dict(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a sponsors collection doc to a Sponsor dict."""
    if not ("_id" in doc or "videoId" in doc or "brandName" in doc):
        return doc
    video_id = _pick(doc, "videoId", "video_id")
    return {
        "id": _str_id(_pick(doc, "_id", "id")),
        "video_id": _str_id(video_id) if video_id is not None else None,
        "brand_name": _pick(doc, "brandName", "brand_name", default=""),
        "logo": _pick(doc, "logo"),
        "description": _pick(doc, "description", default=""),
        "url": _pick(doc, "url"),
        "display_text": _pick(doc, "displayText", "display_text", default="Sponsored"),
        "cover_image": _pick(doc, "coverImage", "cover_image"),
        "shop_image": _pick(doc, "shopImage", "shop_image"),
        "shop_text": _pick(doc, "shopText", "shop_text", default=""),
        "username": _pick(doc, "username", default=""),
        "is_deleted": bool(_pick(doc, "isDeleted", "is_deleted", default=False)),
    }


def to_user(doc: Dict[str, Any]) -> User:
    return User.model_validate(to_user_dict(doc))


def to_video(doc: Dict[str, Any], owner: Optional[Dict[str, Any]] = None) -> Video:
    return Video.model_validate(to_video_dict(doc, owner))


def to_sponsor(doc: Dict[str, Any]) -> Sponsor:
    return Sponsor.model_validate(to_sponsor_dict(doc))
