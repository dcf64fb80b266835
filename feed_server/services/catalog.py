"""
Video catalog backed by in-memory records.

Implements VideoSource, SponsorSource and UserSource from feed.sources.
InMemoryCatalog is used for local runs and tests; JsonCatalog loads it from
the fixtures directory (videos.json, users.json, sponsors.json) in
document-store export format.
"""

import json
import random
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from feed.models.query import VideoQuery
from feed.models.video import Sponsor, User, Video

from ..schema import to_sponsor, to_user, to_video


class InMemoryCatalog:
    """
    Catalog over in-memory users, videos and sponsors.

    Owners are joined at query time from the users map, like a $lookup; a video
    whose owner is unknown keeps owner=None.
    """

    def __init__(
        self,
        videos: Iterable[Union[Dict[str, Any], Video]] = (),
        users: Iterable[Union[Dict[str, Any], User]] = (),
        sponsors: Iterable[Union[Dict[str, Any], Sponsor]] = (),
        rng: Optional[random.Random] = None,
    ):
        self._rng = rng if rng is not None else random.Random()
        self._users: Dict[str, User] = {}
        self._videos: Dict[str, Video] = {}
        self._sponsors: List[Sponsor] = []
        for u in users:
            self.add_user(u)
        for v in videos:
            self.add_video(v)
        for s in sponsors:
            self.add_sponsor(s)

    def add_user(self, user: Union[Dict[str, Any], User]) -> User:
        u = to_user(user) if isinstance(user, dict) else user
        self._users[u.id] = u
        return u

    def add_video(self, video: Union[Dict[str, Any], Video]) -> Video:
        v = to_video(video) if isinstance(video, dict) else video
        self._videos[v.id] = v
        return v

    def add_sponsor(self, sponsor: Union[Dict[str, Any], Sponsor]) -> Sponsor:
        s = to_sponsor(sponsor) if isinstance(sponsor, dict) else sponsor
        self._sponsors.append(s)
        return s

    @property
    def video_count(self) -> int:
        return len(self._videos)

    def _joined(self, video: Video) -> Video:
        owner = self._users.get(video.owner_id)
        if owner is None:
            return video
        return video.model_copy(update={"owner": owner})

    def _matching(self, query: VideoQuery) -> List[Video]:
        joined = (self._joined(v) for v in self._videos.values())
        return [v for v in joined if query.matches(v)]

    async def find_videos(
        self,
        query: VideoQuery,
        limit: Optional[int] = None,
        newest_first: bool = True,
    ) -> List[Video]:
        matches = self._matching(query)
        if newest_first:
            matches.sort(key=lambda v: v.created_at, reverse=True)
        return matches[:limit] if limit is not None else matches

    async def sample_videos(self, query: VideoQuery, size: int) -> List[Video]:
        matches = self._matching(query)
        if size <= 0 or not matches:
            return []
        return self._rng.sample(matches, min(size, len(matches)))

    async def find_by_video_ids(self, video_ids: List[str]) -> Dict[str, Sponsor]:
        wanted = set(video_ids)
        return {
            s.video_id: s
            for s in self._sponsors
            if not s.is_deleted and s.video_id in wanted
        }

    async def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    async def ping(self) -> bool:
        return True


def _load_json_list(path: Path) -> List[Dict[str, Any]]:
    if not path.exists():
        return []
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        # {"videos": [...]} style exports
        data = next((v for v in data.values() if isinstance(v, list)), [])
    return data


class JsonCatalog(InMemoryCatalog):
    """
    Catalog backed by JSON files in one directory.
    Used when DATA_SOURCE=json; directory comes from FIXTURES_DIR.
    """

    def __init__(self, fixtures_dir: Union[Path, str], rng: Optional[random.Random] = None):
        self._dir = Path(fixtures_dir)
        videos_path = self._dir / "videos.json"
        if not videos_path.exists():
            raise FileNotFoundError(f"Videos JSON not found: {videos_path}")
        super().__init__(
            videos=_load_json_list(videos_path),
            users=_load_json_list(self._dir / "users.json"),
            sponsors=_load_json_list(self._dir / "sponsors.json"),
            rng=rng,
        )
