"""Server information."""

from __future__ import annotations

import httpx

from teamcity_client.client.rest import RestHelper
from teamcity_client.models.server import Server


class ServerService:
    def __init__(self, http: httpx.Client) -> None:
        self.rest = RestHelper(http, "server")

    def get(self) -> Server:
        """Return version and identity details of the server."""
        return self.rest.get("", "server", Server)
