"""Backing logic: catalogs, session stores, background sweep."""

from .catalog import InMemoryCatalog, JsonCatalog
from .mongo_catalog import MongoCatalog
from .redis_session_store import RedisSessionStore
from .session_sweeper import SessionSweeper

__all__ = [
    "InMemoryCatalog",
    "JsonCatalog",
    "MongoCatalog",
    "RedisSessionStore",
    "SessionSweeper",
]
