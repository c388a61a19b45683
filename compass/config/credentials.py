"""Credential and client configuration models."""

import re
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from compass.config.common import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

_HOSTNAME_RE = re.compile(
    r"^(?=.{1,253}$)([A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?)(\.[A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*$"
)


class Credentials(BaseModel):
    """Login credentials for a single Compass school portal."""

    model_config = ConfigDict(frozen=True)

    hostname: str
    username: str
    password: str = Field(repr=False)

    @field_validator("hostname")
    @classmethod
    def _check_hostname(cls, value: str) -> str:
        if "://" in value:
            raise ValueError("hostname must not include a scheme (e.g. school.compass.education)")
        if not _HOSTNAME_RE.match(value):
            raise ValueError(f"invalid hostname: {value!r}")
        return value

    @field_validator("username", "password")
    @classmethod
    def _check_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value


class CompassConfig(BaseModel):
    """HTTP settings shared by the authenticator and session client."""

    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "CompassConfig":
        """Load configuration from YAML file."""
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)
