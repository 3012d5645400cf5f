"""
octopus_client.settings

Client configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the host client.
- Hide secrets from repr/logging (e.g., API key).
- Offer a cached settings instance for callers that want process-wide config.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """
    Connection settings for an Octopus Deploy server.
    Values are read from `OCTOPUS_*` environment variables when not passed explicitly.
    """

    model_config = SettingsConfigDict(env_prefix="OCTOPUS_", case_sensitive=False)

    service_name: str = "octopus-client"
    log_level: str = "INFO"

    # Server
    base_url: str = "http://localhost:8065"
    api_key: str = Field(default="", repr=False)

    # Transport
    timeout_seconds: float = 30.0
    verify_ssl: bool = True


@lru_cache(maxsize=1)
def get_settings() -> ClientSettings:
    # Cache avoids re-parsing env vars for every client built in the same process.
    return ClientSettings()


# --- Module Notes -----------------------------------------------------------
# The library itself never calls `get_settings()`; the host client takes settings
# explicitly so embedding applications stay in control of configuration.
