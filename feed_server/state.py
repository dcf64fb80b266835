"""Application state: catalog, session store, sweeper and feed config."""

import logging
import random
from typing import Any, Optional

from feed.models.config import FeedConfig
from feed.session_store import InMemorySessionStore

from .config import ServerConfig, get_config
from .services import (
    JsonCatalog,
    MongoCatalog,
    RedisSessionStore,
    SessionSweeper,
)

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(
        self,
        config: ServerConfig,
        feed_config: Optional[FeedConfig] = None,
        catalog: Optional[Any] = None,
        session_store: Optional[Any] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.feed_config = feed_config if feed_config is not None else config.load_feed_config()
        self.rng = rng if rng is not None else random.Random()

        # Catalog: videos, sponsors and users (JSON fixtures or MongoDB)
        self.catalog = catalog if catalog is not None else self._create_catalog(config)
        logger.info("[startup] Catalog: %s", type(self.catalog).__name__)

        # Session store: in-process dict or Redis
        self.session_store = (
            session_store if session_store is not None else self._create_session_store(config)
        )
        logger.info("[startup] Session store: %s", type(self.session_store).__name__)

        self.sweeper = SessionSweeper(
            self.session_store,
            ttl=self.feed_config.session_ttl,
            interval_seconds=self.feed_config.session_sweep_interval_seconds,
        )

    def _create_catalog(self, config: ServerConfig) -> Any:
        if config.data_source == "mongo":
            return MongoCatalog(config.database_uri or "", config.database_name)
        return JsonCatalog(config.fixtures_dir, rng=self.rng)

    def _create_session_store(self, config: ServerConfig) -> Any:
        if config.session_backend == "redis":
            return RedisSessionStore(config.redis_url, ttl=self.feed_config.session_ttl)
        return InMemorySessionStore()


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        config = get_config()
        ok, errors = config.validate()
        if not ok:
            raise ValueError(f"Invalid server configuration: {'; '.join(errors)}")
        _state = AppState(config)
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the global state (tests, embedding the app in another process)."""
    global _state
    _state = state
