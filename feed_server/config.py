"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from feed.models.config import FeedConfig

# Single .env at the repository root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)

DATA_SOURCES = ("json", "mongo")
SESSION_BACKENDS = ("memory", "redis")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Catalog: "json" (fixtures directory) | "mongo"
    data_source: str = "json"
    fixtures_dir: Path = Path(__file__).parent.parent / "data"
    database_uri: Optional[str] = None
    database_name: str = "clipfeed"

    # Session store: "memory" (single instance) | "redis" (shared)
    session_backend: str = "memory"
    redis_url: str = "redis://localhost:6379/0"

    # CDN base URL for storage-bucket URL rewriting
    cdn_base_url: Optional[str] = None

    # Optional JSON file merged into FeedConfig defaults
    feed_config_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        data_source = os.getenv("DATA_SOURCE", "json").strip().lower() or "json"
        if data_source not in DATA_SOURCES:
            raise ValueError(f"DATA_SOURCE must be one of {DATA_SOURCES}, got {data_source!r}")
        session_backend = os.getenv("SESSION_BACKEND", "memory").strip().lower() or "memory"
        if session_backend not in SESSION_BACKENDS:
            raise ValueError(
                f"SESSION_BACKEND must be one of {SESSION_BACKENDS}, got {session_backend!r}"
            )

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            data_source=data_source,
            fixtures_dir=_path_env("FIXTURES_DIR", base_dir / "data"),
            database_uri=os.getenv("DATABASE_URI") or None,
            database_name=os.getenv("DATABASE_NAME", "clipfeed"),
            session_backend=session_backend,
            redis_url=os.getenv("REDIS_URL", "redis://localhost:6379/0"),
            cdn_base_url=os.getenv("CLOUD_FRONT_URL") or None,
            feed_config_path=_path_env("FEED_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.data_source == "mongo" and not self.database_uri:
            errors.append("DATA_SOURCE=mongo requires DATABASE_URI")

        if self.data_source == "json" and not self.fixtures_dir.exists():
            errors.append(f"Fixtures directory not found: {self.fixtures_dir}")

        if self.feed_config_path and not self.feed_config_path.exists():
            errors.append(f"Feed config file not found: {self.feed_config_path}")

        return len(errors) == 0, errors

    def load_feed_config(self) -> FeedConfig:
        """FeedConfig from feed_config_path merged over defaults (defaults when unset)."""
        if not self.feed_config_path:
            return FeedConfig()
        with open(self.feed_config_path) as f:
            return FeedConfig.from_dict(json.load(f))


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
