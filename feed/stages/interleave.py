"""
Owner diversity: reorder candidates so consecutive items come from different owners.

Greedy single pass over per-owner queues, no backtracking. The constraint is
relaxed only when every remaining item belongs to the owner just emitted.
"""

import logging
import random
from typing import Dict, List, Optional

from ..models.video import Video

logger = logging.getLogger(__name__)


def interleave_by_owner(
    videos: List[Video],
    rng: random.Random,
    limit: Optional[int] = None,
) -> List[Video]:
    """
    Interleave videos by owner.

    Args:
        videos: Candidate pool. Not mutated.
        rng: Random source for per-owner queue order and owner pick order.
        limit: Truncate the result to this many items (None = keep all).

    Returns:
        Reordered list where no two adjacent items share an owner unless only
        one owner had items left at that point.
    """
    queues: Dict[str, List[Video]] = {}
    for video in videos:
        queues.setdefault(video.owner_id, []).append(video)
    for queue in queues.values():
        rng.shuffle(queue)

    result: List[Video] = []
    last_owner: Optional[str] = None
    relaxed = 0

    while any(queues.values()):
        owner_ids = list(queues)
        rng.shuffle(owner_ids)
        chosen = next(
            (oid for oid in owner_ids if oid != last_owner and queues[oid]),
            None,
        )
        if chosen is None:
            # Only the last owner has items left
            chosen = next(oid for oid in queues if queues[oid])
            relaxed += 1
        result.append(queues[chosen].pop(0))
        last_owner = chosen

    if relaxed:
        logger.debug("[interleave] RELAXED same-owner picks=%d owners=%d", relaxed, len(queues))

    return result[:limit] if limit is not None else result
