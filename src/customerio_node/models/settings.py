"""Client settings: base URLs and timeout, from YAML with env overrides."""

import os
from pathlib import Path
from typing import Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for settings loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, Field

DEFAULT_TRACKING_BASE_URL = "https://track.customer.io/api/v1"
DEFAULT_API_BASE_URL = "https://api.customer.io/v1/api"


class Settings(BaseModel):
    """Connection settings for the Customer.io client."""

    tracking_base_url: str = Field(
        default=DEFAULT_TRACKING_BASE_URL,
        description="Track API base URL (customers, events, segments)",
    )
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="App API base URL (campaign triggers)",
    )
    timeout: float = 30.0

    @classmethod
    def from_yaml(cls, path: Optional[str | Path] = None) -> "Settings":
        """
        Load settings from YAML (flat, or nested under a `customerio` key),
        then apply CUSTOMERIO_* environment overrides.
        """
        data: dict = {}
        if path is not None:
            loaded = yaml.safe_load(Path(path).read_text()) or {}
            data = loaded.get("customerio", loaded)
        return cls.from_env(data)

    @classmethod
    def from_env(cls, base: Optional[dict] = None) -> "Settings":
        """Build settings from `base` with environment variables taking precedence."""
        flat = dict(base or {})
        env_tracking = os.environ.get("CUSTOMERIO_TRACKING_BASE_URL")
        env_api = os.environ.get("CUSTOMERIO_API_BASE_URL")
        env_timeout = os.environ.get("CUSTOMERIO_TIMEOUT")
        if env_tracking:
            flat["tracking_base_url"] = env_tracking
        if env_api:
            flat["api_base_url"] = env_api
        if env_timeout:
            flat["timeout"] = float(env_timeout)
        settings = cls.model_validate(flat)
        settings.tracking_base_url = settings.tracking_base_url.rstrip("/")
        settings.api_base_url = settings.api_base_url.rstrip("/")
        return settings
