"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from teamcity_client.client.teamcity import TeamCityClient
from teamcity_client.config.manager import ConfigManager
from teamcity_client.config.models import ServerProfile

SERVER = "https://tc:8111"
BASE = f"{SERVER}/app/rest"


def pytest_addoption(parser):
    parser.addoption("--server-url", action="store", default=None)
    parser.addoption("--server-token", action="store", default=None)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "TEAMCITY_ADDR",
        "TEAMCITY_TOKEN",
        "TEAMCITY_USER",
        "TEAMCITY_PASSWORD",
        "TEAMCITY_PROFILE",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ServerProfile:
    """Return a sample token-authenticated server profile."""
    return ServerProfile(name="test-tc", url=SERVER, token="secret-token")


@pytest.fixture
def client(sample_profile: ServerProfile) -> Iterator[TeamCityClient]:
    with TeamCityClient(sample_profile) as tc:
        yield tc


@pytest.fixture
def mock_project() -> dict:
    """Sample project as returned with ``fields=$long,uuid``."""
    return {
        "id": "Backend",
        "uuid": "b9a4c0a5-1f0e-4c1a-9f55-0d2b3c6e7f10",
        "name": "Backend",
        "description": "Backend services",
        "parentProjectId": "_Root",
        "parentProject": {"id": "_Root", "name": "<Root project>"},
        "href": "/app/rest/projects/id:Backend",
        "webUrl": f"{SERVER}/project.html?projectId=Backend",
        "archived": False,
        "parameters": {
            "count": 2,
            "property": [
                {"name": "env.GOPATH", "value": "/go", "inherited": False},
                {"name": "teamcity.ui.settings.readOnly", "value": "false", "inherited": True},
            ],
        },
        "buildTypes": {"count": 0, "buildType": []},
    }


@pytest.fixture
def mock_server() -> dict:
    """Sample ``/server`` response."""
    return {
        "version": "2023.11.4 (build 147586)",
        "versionMajor": 2023,
        "versionMinor": 11,
        "buildNumber": "147586",
        "buildDate": "20240308T000000+0000",
        "internalId": "b7e4e8b8-9c0b-4ab5-8fd1-5a0d2b5e3e2a",
        "role": "main_node",
        "webUrl": SERVER,
        "startTime": "20240401T101010+0000",
        "currentTime": "20240402T111111+0000",
    }


@pytest.fixture
def mock_slack_feature() -> dict:
    """Slack connection project feature as read back from the server."""
    return {
        "id": "PROJECT_EXT_7",
        "type": "OAuthProvider",
        "properties": {
            "count": 3,
            "property": [
                {"name": "clientId", "value": "abcd.1234"},
                {"name": "displayName", "value": "Notifier"},
                {"name": "providerType", "value": "slackConnection"},
            ],
        },
    }
