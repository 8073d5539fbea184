"""Authentication strategies for the TeamCity server."""

from __future__ import annotations

import logging
from collections.abc import Generator

import httpx

from teamcity_client.config.models import ServerProfile

logger = logging.getLogger(__name__)


class TokenAuth(httpx.Auth):
    """Authenticate using a TeamCity access token (bearer header)."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


class BasicAuth(httpx.BasicAuth):
    """HTTP Basic auth wrapper."""


def resolve_auth(profile: ServerProfile) -> httpx.Auth | None:
    """Resolve authentication from a server profile. Tokens win over basic auth."""
    if profile.token:
        return TokenAuth(profile.token)
    if profile.username and profile.password:
        return BasicAuth(profile.username, profile.password)
    logger.warning("No credentials configured for %s; requests are anonymous", profile.url)
    return None
