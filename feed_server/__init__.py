"""
Clipfeed Feed API Server

Usage: uvicorn feed_server:app --reload --port 8000
"""

from .app import app, create_app
from .config import ServerConfig, get_config, reload_config
from .services import (
    InMemoryCatalog,
    JsonCatalog,
    MongoCatalog,
    RedisSessionStore,
    SessionSweeper,
)
from .state import AppState, get_state, set_state

__all__ = [
    "app",
    "create_app",
    "AppState",
    "ServerConfig",
    "get_config",
    "get_state",
    "reload_config",
    "set_state",
    "InMemoryCatalog",
    "JsonCatalog",
    "MongoCatalog",
    "RedisSessionStore",
    "SessionSweeper",
]
