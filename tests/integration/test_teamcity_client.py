"""Integration tests for client construction, server info and validation."""

from pathlib import Path

import httpx
import pytest
import respx

from teamcity_client.client.errors import AuthenticationError, ConfigurationError
from teamcity_client.client.teamcity import TeamCityClient
from teamcity_client.config.manager import ConfigManager
from teamcity_client.config.models import ServerProfile

SERVER = "https://tc:8111"
BASE = f"{SERVER}/app/rest"


class TestServer:
    @respx.mock
    def test_get(self, client: TeamCityClient, mock_server: dict):
        respx.get(f"{BASE}/server").mock(return_value=httpx.Response(200, json=mock_server))
        server = client.server.get()
        assert server.version_major == 2023
        assert server.build_number == "147586"

    @respx.mock
    def test_validate(self, client: TeamCityClient, mock_server: dict):
        respx.get(f"{BASE}/server").mock(return_value=httpx.Response(200, json=mock_server))
        assert client.validate() is True

    @respx.mock
    def test_validate_bad_token(self, client: TeamCityClient):
        respx.get(f"{BASE}/server").mock(
            return_value=httpx.Response(401, text="Authentication required")
        )
        with pytest.raises(AuthenticationError):
            client.validate()


class TestBasicAuth:
    @respx.mock
    def test_uses_http_auth_prefix(self, mock_server: dict):
        route = respx.get(f"{SERVER}/httpAuth/app/rest/server").mock(
            return_value=httpx.Response(200, json=mock_server)
        )
        profile = ServerProfile(name="basic", url=SERVER, username="admin", password="pw")
        with TeamCityClient(profile) as tc:
            tc.server.get()
        assert route.calls.last.request.headers["authorization"].startswith("Basic ")


class TestConstruction:
    @respx.mock
    def test_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_config: Path, mock_server: dict):
        monkeypatch.setenv("TEAMCITY_ADDR", "https://ci.example.com/")
        monkeypatch.setenv("TEAMCITY_TOKEN", "env-token")
        route = respx.get("https://ci.example.com/app/rest/server").mock(
            return_value=httpx.Response(200, json=mock_server)
        )
        with TeamCityClient.from_env(config_path=tmp_config) as tc:
            tc.server.get()
        assert route.calls.last.request.headers["authorization"] == "Bearer env-token"

    def test_from_env_without_url(self, tmp_config: Path):
        with pytest.raises(ConfigurationError, match="TEAMCITY_ADDR"):
            TeamCityClient.from_env(config_path=tmp_config)

    def test_from_profile(self, tmp_config: Path):
        mgr = ConfigManager(config_path=tmp_config)
        mgr.add_profile(ServerProfile(name="prod", url="https://prod.example.com", token="t"))
        with TeamCityClient.from_profile("prod", config_path=tmp_config) as tc:
            assert tc.base_url == "https://prod.example.com/app/rest/"

    def test_shared_http_client_not_closed(self, sample_profile: ServerProfile):
        http = httpx.Client(base_url=f"{BASE}/")
        with TeamCityClient(sample_profile, http=http):
            pass
        assert not http.is_closed
        http.close()
