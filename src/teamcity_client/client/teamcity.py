"""TeamCity client: one entry point over all resource services."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx

from teamcity_client.client.auth import resolve_auth
from teamcity_client.config.manager import ConfigManager
from teamcity_client.config.models import ServerProfile
from teamcity_client.services.agent_pools import AgentPoolService
from teamcity_client.services.build_features import BuildFeatureService
from teamcity_client.services.build_types import BuildTypeService
from teamcity_client.services.project_features import ProjectFeatureService
from teamcity_client.services.projects import ProjectService
from teamcity_client.services.server import ServerService
from teamcity_client.services.vcs_roots import VcsRootService

logger = logging.getLogger(__name__)


class TeamCityClient:
    """Synchronous client for the TeamCity REST API.

    Services share one ``httpx.Client`` and its connection pool::

        with TeamCityClient.from_env() as tc:
            project = tc.projects.get_by_id("MyProject")
    """

    def __init__(self, profile: ServerProfile, *, http: httpx.Client | None = None) -> None:
        self.profile = profile
        self.base_url = profile.api_base_url
        if not profile.verify_ssl:
            logger.warning("TLS certificate verification is disabled for %s", profile.url)
        self._owns_http = http is None
        self._http = http or httpx.Client(
            base_url=self.base_url,
            auth=resolve_auth(profile),
            verify=profile.verify_ssl,
            timeout=profile.timeout,
            headers={"Accept": "application/json"},
        )
        self.projects = ProjectService(self._http)
        self.agent_pools = AgentPoolService(self._http)
        self.build_types = BuildTypeService(self._http)
        self.server = ServerService(self._http)
        self.vcs_roots = VcsRootService(self._http)

    @classmethod
    def from_env(cls, config_path: Path | None = None, **overrides: Any) -> TeamCityClient:
        """Build a client from env vars, falling back to the default config profile."""
        profile = ConfigManager(config_path).resolve_server(**overrides)
        return cls(profile)

    @classmethod
    def from_profile(cls, name: str, config_path: Path | None = None) -> TeamCityClient:
        return cls(ConfigManager(config_path).resolve_server(profile_name=name))

    def project_features(self, project_id: str) -> ProjectFeatureService:
        return ProjectFeatureService(self._http, project_id)

    def build_features(self, build_type_id: str) -> BuildFeatureService:
        return BuildFeatureService(self._http, build_type_id)

    def validate(self) -> bool:
        """Check that the server answers with a version; errors propagate."""
        return bool(self.server.get().version)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> TeamCityClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
