"""
Runtime settings, read once from ``BIGCOLOR_*`` environment variables.
"""

import functools
import os
from typing import Literal

from pydantic import BaseModel, Field


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=8973, ge=1, le=65535)
    log_level: str = "INFO"
    wcag_level: Literal["AA", "AAA"] = "AA"
    wcag_size: Literal["small", "large"] = "small"
    default_amount: float = Field(default=10.0, ge=0.0, le=100.0)


ENV_PREFIX = "BIGCOLOR_"


def load_settings(environ=None) -> Settings:
    """Build settings from ``environ`` (default ``os.environ``)."""
    env = os.environ if environ is None else environ
    values = {}
    for name in Settings.model_fields:
        raw = env.get(ENV_PREFIX + name.upper())
        if raw is not None:
            values[name] = raw
    return Settings(**values)


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
