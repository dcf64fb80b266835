"""
MongoDB catalog: videos, users and sponsors collections via motor.

Used when DATA_SOURCE=mongo. Organic queries join the owner with $lookup and
filter on owner.role; sponsored queries use an outer join so videos whose owner
cannot be found are still returned.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorClient

from feed.models.query import VideoQuery
from feed.models.video import Sponsor, User, Video

from ..schema import to_sponsor, to_user, to_video

logger = logging.getLogger(__name__)


def _object_id(value: str) -> Any:
    """ObjectId for valid hex ids; other ids are matched as plain strings."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return value


def _object_ids(values) -> List[Any]:
    return [_object_id(v) for v in values]


def build_match(query: VideoQuery) -> Dict[str, Any]:
    """Translate a VideoQuery into the $match stage on the videos collection."""
    match: Dict[str, Any] = {
        "isPrivate": False,
        "isDeleted": False,
    }
    if query.blocked_owner_ids:
        match["owner"] = {"$nin": _object_ids(query.blocked_owner_ids)}
    if query.exclude_ids:
        match["_id"] = {"$nin": _object_ids(query.exclude_ids)}
    if query.sponsored:
        match["sponsored"] = True
    else:
        match["sponsored"] = {"$ne": True}
    if query.featured_only:
        match["isFeatured"] = True
    return match


def build_pipeline(
    query: VideoQuery,
    limit: Optional[int] = None,
    newest_first: bool = True,
    sample_size: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Aggregation pipeline: match → owner lookup → role filter → sort → limit/sample."""
    pipeline: List[Dict[str, Any]] = [
        {"$match": build_match(query)},
        {"$addFields": {"ownerId": "$owner"}},
        {
            "$lookup": {
                "from": "users",
                "localField": "owner",
                "foreignField": "_id",
                "as": "owner",
            }
        },
    ]
    if query.required_owner_role is not None:
        pipeline.append({"$unwind": "$owner"})
        pipeline.append({"$match": {"owner.role": query.required_owner_role}})
    else:
        pipeline.append({"$unwind": {"path": "$owner", "preserveNullAndEmptyArrays": True}})
    if sample_size is not None:
        pipeline.append({"$sample": {"size": sample_size}})
        return pipeline
    if newest_first:
        pipeline.append({"$sort": {"createdAt": -1, "_id": -1}})
    if limit is not None:
        pipeline.append({"$limit": limit})
    return pipeline


class MongoCatalog:
    """Catalog backed by a MongoDB database (videos, users, sponsors collections)."""

    def __init__(self, uri: str, db_name: str, client: Optional[Any] = None):
        if not uri and client is None:
            raise ValueError("MongoCatalog requires a DATABASE_URI")
        self._client = client if client is not None else AsyncIOMotorClient(
            uri, serverSelectionTimeoutMS=5000
        )
        self._db = self._client[db_name]

    async def _aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Video]:
        docs = await self._db["videos"].aggregate(pipeline).to_list(length=None)
        return [to_video(_with_owner_id(doc)) for doc in docs]

    async def find_videos(
        self,
        query: VideoQuery,
        limit: Optional[int] = None,
        newest_first: bool = True,
    ) -> List[Video]:
        if limit is not None and limit <= 0:
            return []
        return await self._aggregate(build_pipeline(query, limit=limit, newest_first=newest_first))

    async def sample_videos(self, query: VideoQuery, size: int) -> List[Video]:
        if size <= 0:
            return []
        return await self._aggregate(build_pipeline(query, sample_size=size))

    async def find_by_video_ids(self, video_ids: List[str]) -> Dict[str, Sponsor]:
        if not video_ids:
            return {}
        cursor = self._db["sponsors"].find({
            "isDeleted": False,
            "videoId": {"$in": _object_ids(video_ids)},
        })
        out: Dict[str, Sponsor] = {}
        for doc in await cursor.to_list(length=None):
            sponsor = to_sponsor(doc)
            if sponsor.video_id:
                out[sponsor.video_id] = sponsor
        return out

    async def get_user(self, user_id: str) -> Optional[User]:
        doc = await self._db["users"].find_one({"_id": _object_id(user_id)})
        return to_user(doc) if doc else None

    async def ping(self) -> bool:
        try:
            await self._client.admin.command("ping")
            return True
        except Exception as e:
            logger.warning("[mongo] ping failed: %s", e)
            return False


def _with_owner_id(doc: Dict[str, Any]) -> Dict[str, Any]:
    """After an outer $lookup the owner may be missing; keep the original owner id if so."""
    if "owner" not in doc or doc["owner"] is None:
        doc = dict(doc)
        doc["owner"] = doc.get("ownerId")
    return doc
