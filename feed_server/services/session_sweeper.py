"""
Background sweep of idle feed sessions.

Runs as an asyncio task for the lifetime of the app: every interval it asks
the session store to delete sessions idle longer than the TTL. Only map
iteration and deletion, so request handling is never blocked for long.
"""

import asyncio
import logging
from datetime import timedelta
from typing import Callable, Optional

from feed.sources import SessionStore
from feed.utils import utcnow

logger = logging.getLogger(__name__)


class SessionSweeper:
    """Periodic expiry of sessions in a SessionStore."""

    def __init__(
        self,
        store: SessionStore,
        ttl: timedelta,
        interval_seconds: float,
        clock: Callable = utcnow,
    ):
        self._store = store
        self._ttl = ttl
        self._interval = interval_seconds
        self._clock = clock
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def sweep_once(self) -> int:
        removed = await self._store.sweep_expired(self._clock(), self._ttl)
        if removed:
            logger.info("[sweeper] removed %d expired sessions", removed)
        return removed

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                await self.sweep_once()
            except Exception as e:
                logger.exception("[sweeper] sweep failed: %s", e)

    def start(self) -> None:
        """Start the sweep loop on the running event loop. No-op if already running."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("[sweeper] started interval=%ss ttl=%s", self._interval, self._ttl)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("[sweeper] stopped")
