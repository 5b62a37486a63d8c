"""Library settings, read from ``ROUTE_GUARDS_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class GuardSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ROUTE_GUARDS_", env_file=".env")

    # Session key holding the authenticated user's identifier.
    session_user_key: str = "user_id"

    # Rejection used by the built-in authenticated-user guard.
    unauthorized_status: int = 401
    unauthorized_reason: str = "Not authorized"

    # Record a PipelineTrace in ctx.state["trace"] for every chain.
    debug: bool = False


@lru_cache
def get_settings() -> GuardSettings:
    return GuardSettings()
