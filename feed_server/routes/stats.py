"""Stats endpoint."""

from fastapi import APIRouter

from ..models import StatsResponse
from ..state import get_state

router = APIRouter()


@router.get("/stats", response_model=StatsResponse)
async def get_stats():
    """Get current statistics."""
    state = get_state()
    return StatsResponse(
        data_source=state.config.data_source,
        session_backend=state.config.session_backend,
        active_sessions=await state.session_store.count(),
        catalog_videos=getattr(state.catalog, "video_count", None),
    )
