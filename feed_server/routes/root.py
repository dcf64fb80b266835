"""Root and health endpoints."""

from typing import Tuple

from fastapi import APIRouter

from ..state import AppState, get_state

router = APIRouter()

API_NAME = "Clipfeed Feed API"
API_VERSION = "1.0.0"


async def _catalog_available(state: AppState) -> Tuple[bool, str]:
    """Return (available, message) for the configured catalog."""
    ping = getattr(state.catalog, "ping", None)
    if ping is None:
        return True, "in-process"
    try:
        ok = await ping()
        return ok, "connected" if ok else "not reachable"
    except Exception as e:
        return False, str(e)


@router.get("/")
def root():
    state = get_state()
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "data_source": state.config.data_source,
        "session_backend": state.config.session_backend,
        "endpoints": {
            "feed": ["/api/videos", "/api/videos/featured"],
            "sessions": ["/api/sessions/{user_id}"],
            "stats": ["/api/stats"],
        },
    }


@router.get("/api/health")
async def health():
    state = get_state()
    catalog_ok, catalog_msg = await _catalog_available(state)
    return {
        "status": "healthy" if catalog_ok else "degraded",
        "catalog": {"available": catalog_ok, "message": catalog_msg},
        "sweeper_running": state.sweeper.running,
    }
