"""API client configuration models."""
from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict

from core.config import Settings, settings as default_settings


class ClientConfig(BaseModel):
    """Per-client configuration; frozen so the API key never changes after construction."""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    base_url: str = "http://thecatapi.com/api"
    timeout: float = 10.0
    user_agent: str = "catapi-client/1.0"
    debug: bool = False

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **overrides) -> "ClientConfig":
        s = settings or default_settings
        values = {
            "api_key": s.cat_api.api_key,
            "base_url": s.cat_api.base_url,
            "timeout": s.cat_api.timeout,
            "user_agent": s.cat_api.user_agent,
            "debug": s.DEBUG,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
