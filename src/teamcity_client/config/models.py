"""Pydantic models for client configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from teamcity_client.config.constants import (
    BASIC_AUTH_API_BASE,
    DEFAULT_TIMEOUT,
    TOKEN_API_BASE,
)


class ServerProfile(BaseModel):
    """A named TeamCity server connection profile."""

    name: str
    url: str = Field(description="Server base URL, e.g. https://teamcity:8111")
    token: str | None = Field(default=None, description="Access token")
    username: str | None = Field(default=None, description="Basic auth username")
    password: str | None = Field(default=None, description="Basic auth password")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def uses_basic_auth(self) -> bool:
        return not self.token and bool(self.username) and bool(self.password)

    @property
    def api_base_url(self) -> str:
        """REST root; basic auth is served under ``/httpAuth``."""
        base = BASIC_AUTH_API_BASE if self.uses_basic_auth else TOKEN_API_BASE
        return f"{self.url}{base}"


class ClientConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    profiles: dict[str, ServerProfile] = Field(default_factory=dict)
