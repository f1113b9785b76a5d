"""mtgdb.config

Client configuration.  Settings are frozen once a client is built; point
``base_url`` at a local mtgdb.info instance to run against a test server.
"""
from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "DEFAULT_API_URL",
    "ClientSettings",
    "load_settings",
]

DEFAULT_API_URL = "https://api.mtgdb.info"

ENV_API_URL = "MTGDB_API_URL"
ENV_TIMEOUT = "MTGDB_TIMEOUT"


class ClientSettings(BaseModel):
    """Configuration options for the mtgdb.info client."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        default=DEFAULT_API_URL,
        description="Root URL of the mtgdb.info API",
    )
    timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds to wait for a response; None leaves the transport default",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("base_url cannot be blank")
        return v


def load_settings(dotenv_path: Optional[str] = None, **overrides) -> ClientSettings:
    """Build settings from a ``.env`` file and the environment.

    Keyword overrides that are not None win over the environment.
    """
    load_dotenv(dotenv_path)
    values = {}
    url = os.getenv(ENV_API_URL)
    if url:
        values["base_url"] = url
    timeout = os.getenv(ENV_TIMEOUT)
    if timeout:
        try:
            values["timeout"] = float(timeout)
        except ValueError:
            raise ValueError(f"{ENV_TIMEOUT} must be a number of seconds, got {timeout!r}") from None
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ClientSettings(**values)
