"""
Feed configuration: session, recency tiers, candidate fetch, and sponsor parameters.

FeedConfig defaults are defined here. The server may pass a dict
(e.g. from FEED_CONFIG_PATH); from_dict() merges it with these defaults.
"""

from datetime import timedelta
from typing import Dict, Optional

from pydantic import BaseModel, Field, model_validator


class FeedConfig(BaseModel):
    """Configuration for feed assembly."""

    # -------------------------------------------------------------------------
    # Pagination
    # -------------------------------------------------------------------------

    # Page size used when the caller does not pass perPage.
    default_per_page: int = Field(default=10, ge=1)

    # -------------------------------------------------------------------------
    # Session (anti-repeat state across pages)
    # -------------------------------------------------------------------------

    # A session idle longer than this is replaced on the next request and swept.
    session_ttl_seconds: int = Field(default=3600, gt=0)
    # Period of the background sweep that deletes idle sessions.
    session_sweep_interval_seconds: int = Field(default=1800, gt=0)
    # Key shared by every unauthenticated request.
    guest_session_key: str = "guest"

    # -------------------------------------------------------------------------
    # Recency tiers
    # recent: age <= recent_window_hours; week: age <= week_window_days; older: rest
    # -------------------------------------------------------------------------

    recent_window_hours: int = Field(default=24, gt=0)
    week_window_days: int = Field(default=7, gt=0)

    # -------------------------------------------------------------------------
    # Candidate pool
    # -------------------------------------------------------------------------

    # Raw organic fetch size = per_page * multiplier, so tiering has material to work with.
    candidate_overfetch_multiplier: int = Field(default=5, ge=1)
    # Only videos owned by users with this role reach the organic feed.
    required_owner_role: str = "influencer"

    # -------------------------------------------------------------------------
    # Sponsored slots
    # slots = per_page // sponsor_slot_divisor; fetch = slots * sponsor_overfetch_multiplier
    # -------------------------------------------------------------------------

    sponsor_slot_divisor: int = Field(default=4, ge=1)
    sponsor_overfetch_multiplier: int = Field(default=2, ge=1)
    # One sponsored slot is spliced in after every N organic items.
    sponsor_interval: int = Field(default=3, ge=1)

    @model_validator(mode="after")
    def tiers_are_ordered(self):
        if timedelta(days=self.week_window_days) <= timedelta(hours=self.recent_window_hours):
            raise ValueError(
                f"week_window_days ({self.week_window_days}) must cover more than "
                f"recent_window_hours ({self.recent_window_hours})"
            )
        return self

    @property
    def session_ttl(self) -> timedelta:
        return timedelta(seconds=self.session_ttl_seconds)

    @property
    def recent_window(self) -> timedelta:
        return timedelta(hours=self.recent_window_hours)

    @property
    def week_window(self) -> timedelta:
        return timedelta(days=self.week_window_days)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "FeedConfig":
        """Create config from dictionary (e.g., loaded from JSON).

        Accepts flat keys or the grouped sections "session", "tiers" and "sponsors".
        """
        flat = {k: v for k, v in config_dict.items() if not isinstance(v, dict)}
        if "session" in config_dict:
            s = config_dict["session"]
            if "ttl_seconds" in s:
                flat["session_ttl_seconds"] = s["ttl_seconds"]
            if "sweep_interval_seconds" in s:
                flat["session_sweep_interval_seconds"] = s["sweep_interval_seconds"]
            if "guest_key" in s:
                flat["guest_session_key"] = s["guest_key"]
        if "tiers" in config_dict:
            t = config_dict["tiers"]
            if "recent_hours" in t:
                flat["recent_window_hours"] = t["recent_hours"]
            if "week_days" in t:
                flat["week_window_days"] = t["week_days"]
        if "sponsors" in config_dict:
            sp = config_dict["sponsors"]
            if "slot_divisor" in sp:
                flat["sponsor_slot_divisor"] = sp["slot_divisor"]
            if "overfetch_multiplier" in sp:
                flat["sponsor_overfetch_multiplier"] = sp["overfetch_multiplier"]
            if "interval" in sp:
                flat["sponsor_interval"] = sp["interval"]
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = FeedConfig()


def resolve_config(config: Optional["FeedConfig"]) -> "FeedConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
