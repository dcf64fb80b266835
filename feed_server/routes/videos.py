"""Feed endpoints: personalized feed and featured list."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from feed import FeedRequest, assemble_feed, get_featured_feed

from ..models import FeedResponse
from ..state import AppState, get_state
from ..utils import clamp_page_size, to_feed_card

logger = logging.getLogger(__name__)

router = APIRouter()


async def _feed_request(
    state: AppState,
    user_id: Optional[str],
    per_page: int,
    page_number: int,
) -> FeedRequest:
    """Build a FeedRequest, pulling the block list from the requester's user record."""
    blocked = set()
    if user_id:
        user = await state.catalog.get_user(user_id)
        if user is None:
            raise HTTPException(status_code=404, detail="User not found")
        blocked = set(user.blocked_user_ids)
    return FeedRequest(
        user_id=user_id or None,
        blocked_owner_ids=blocked,
        per_page=per_page,
        page_number=page_number,
    )


@router.get("", response_model=FeedResponse)
async def get_feed(
    per_page: Optional[int] = Query(None, alias="perPage", ge=1),
    page_no: int = Query(1, alias="pageNo", ge=1),
    user_id: Optional[str] = Query(None),
):
    """One page of the personalized feed. pageNo=1 starts a new browsing session."""
    state = get_state()
    request = await _feed_request(
        state,
        user_id,
        clamp_page_size(per_page, state.feed_config.default_per_page),
        page_no,
    )
    slots = await assemble_feed(
        request,
        videos=state.catalog,
        sponsors=state.catalog,
        sessions=state.session_store,
        config=state.feed_config,
        cdn_base_url=state.config.cdn_base_url,
        rng=state.rng,
    )
    return FeedResponse(
        message="Videos retrieved successfully",
        data=[to_feed_card(slot) for slot in slots],
    )


@router.get("/featured", response_model=FeedResponse)
async def get_featured(user_id: Optional[str] = Query(None)):
    """Featured videos from influencers, newest first."""
    state = get_state()
    request = await _feed_request(state, user_id, state.feed_config.default_per_page, 1)
    slots = await get_featured_feed(
        request,
        videos=state.catalog,
        config=state.feed_config,
        cdn_base_url=state.config.cdn_base_url,
    )
    if not slots:
        raise HTTPException(status_code=404, detail="No videos found")
    return FeedResponse(
        message="Videos retrieved successfully",
        data=[to_feed_card(slot) for slot in slots],
    )
