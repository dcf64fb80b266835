"""Feed session inspection and reset endpoints."""

from fastapi import APIRouter, HTTPException

from feed import session_key

from ..models import SessionInfo
from ..state import get_state

router = APIRouter()


def _key(user_id: str) -> str:
    state = get_state()
    return session_key(user_id, state.feed_config)


@router.get("/{user_id}", response_model=SessionInfo)
async def get_session_info(user_id: str):
    """Get session info. Use the guest key for the shared anonymous session."""
    state = get_state()
    key = _key(user_id)
    session = await state.session_store.get(key)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return SessionInfo(
        key=key,
        seen_count=len(session.seen_video_ids),
        last_touched_at=session.last_touched_at,
        expires_at=session.last_touched_at + state.feed_config.session_ttl,
    )


@router.delete("/{user_id}")
async def reset_session(user_id: str):
    """Drop a session so the next page starts from an empty seen-set."""
    state = get_state()
    key = _key(user_id)
    if not await state.session_store.delete(key):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"status": "ok", "key": key}
