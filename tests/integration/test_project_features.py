"""Integration tests for project feature operations."""

import json

import httpx
import pytest
import respx

from teamcity_client.client.errors import NotFoundError, ValidationError
from teamcity_client.client.teamcity import TeamCityClient
from teamcity_client.models.project_feature import (
    ProjectFeatureSlackConnection,
    ProjectFeatureVersionedSettings,
    SlackConnectionOptions,
    VersionedSettingsOptions,
)

BASE = "https://tc:8111/app/rest"
FEATURES = f"{BASE}/projects/id:Backend/projectFeatures"


def _slack(**options) -> ProjectFeatureSlackConnection:
    return ProjectFeatureSlackConnection(
        project_id="Backend",
        options=SlackConnectionOptions(**options),
    )


class TestProjectFeatureCreate:
    @respx.mock
    def test_create_slack_connection(self, client: TeamCityClient, mock_slack_feature: dict):
        route = respx.post(f"{FEATURES}/").mock(
            return_value=httpx.Response(200, json=mock_slack_feature)
        )
        feature = client.project_features("Backend").create(
            _slack(client_id="abcd.1234", client_secret="xyz", display_name="Notifier"),
        )

        sent = json.loads(route.calls.last.request.content)
        assert sent["type"] == "OAuthProvider"
        names = [p["name"] for p in sent["properties"]["property"]]
        assert "secure:clientSecret" in names
        assert "secure:token" not in names

        assert isinstance(feature, ProjectFeatureSlackConnection)
        assert feature.id == "PROJECT_EXT_7"
        assert feature.properties().map() == {
            "clientId": "abcd.1234",
            "displayName": "Notifier",
            "providerType": "slackConnection",
        }

    def test_create_for_other_project_rejected(self, client: TeamCityClient):
        feature = ProjectFeatureSlackConnection(project_id="Frontend")
        with pytest.raises(ValidationError, match="Frontend"):
            client.project_features("Backend").create(feature)

    @respx.mock
    def test_create_versioned_settings(self, client: TeamCityClient):
        respx.post(f"{FEATURES}/").mock(
            return_value=httpx.Response(200, json={
                "id": "PROJECT_EXT_2",
                "type": "versionedSettings",
                "properties": {"property": [
                    {"name": "enabled", "value": "true"},
                    {"name": "rootId", "value": "Backend_Git"},
                ]},
            })
        )
        feature = client.project_features("Backend").create(
            ProjectFeatureVersionedSettings(
                options=VersionedSettingsOptions(vcs_root_id="Backend_Git"),
            ),
        )
        assert isinstance(feature, ProjectFeatureVersionedSettings)
        assert feature.options.vcs_root_id == "Backend_Git"


class TestProjectFeatureRead:
    @respx.mock
    def test_get_by_id(self, client: TeamCityClient, mock_slack_feature: dict):
        respx.get(f"{FEATURES}/id:PROJECT_EXT_7").mock(
            return_value=httpx.Response(200, json=mock_slack_feature)
        )
        feature = client.project_features("Backend").get_by_id("PROJECT_EXT_7")
        assert feature.project_id == "Backend"
        assert feature.options.display_name == "Notifier"

    @respx.mock
    def test_list(self, client: TeamCityClient, mock_slack_feature: dict):
        respx.get(f"{FEATURES}/").mock(
            return_value=httpx.Response(200, json={
                "count": 2,
                "projectFeature": [
                    mock_slack_feature,
                    {"id": "PROJECT_EXT_9", "type": "ReportTab", "properties": {"count": 0}},
                ],
            })
        )
        features = client.project_features("Backend").list()
        assert [f.type for f in features] == ["OAuthProvider", "ReportTab"]

    @respx.mock
    def test_list_empty(self, client: TeamCityClient):
        respx.get(f"{FEATURES}/").mock(return_value=httpx.Response(200, json={"count": 0}))
        assert client.project_features("Backend").list() == []


class TestProjectFeatureUpdate:
    @respx.mock
    def test_unchanged_issues_no_write(self, client: TeamCityClient, mock_slack_feature: dict):
        respx.get(f"{FEATURES}/id:PROJECT_EXT_7").mock(
            return_value=httpx.Response(200, json=mock_slack_feature)
        )
        service = client.project_features("Backend")
        feature = service.get_by_id("PROJECT_EXT_7")
        service.update(feature)
        assert all(c.request.method == "GET" for c in respx.calls)

    @respx.mock
    def test_changed_property_written(self, client: TeamCityClient, mock_slack_feature: dict):
        respx.get(f"{FEATURES}/id:PROJECT_EXT_7").mock(
            return_value=httpx.Response(200, json=mock_slack_feature)
        )
        put = respx.put(f"{FEATURES}/id:PROJECT_EXT_7/properties").mock(
            return_value=httpx.Response(200, json={})
        )
        feature = _slack(client_id="abcd.1234", display_name="Alerts")
        feature.id = "PROJECT_EXT_7"
        client.project_features("Backend").update(feature)
        sent = json.loads(put.calls.last.request.content)
        assert {"name": "displayName", "value": "Alerts"} in sent["property"]

    @respx.mock
    def test_supplied_secret_forces_write(self, client: TeamCityClient, mock_slack_feature: dict):
        respx.get(f"{FEATURES}/id:PROJECT_EXT_7").mock(
            return_value=httpx.Response(200, json=mock_slack_feature)
        )
        put = respx.put(f"{FEATURES}/id:PROJECT_EXT_7/properties").mock(
            return_value=httpx.Response(200, json={})
        )
        feature = _slack(client_id="abcd.1234", display_name="Notifier", token="rotated")
        feature.id = "PROJECT_EXT_7"
        client.project_features("Backend").update(feature)
        assert put.call_count == 1

    def test_update_requires_id(self, client: TeamCityClient):
        with pytest.raises(ValidationError, match="no ID"):
            client.project_features("Backend").update(_slack(client_id="x"))


class TestProjectFeatureDelete:
    @respx.mock
    def test_delete_then_get_not_found(self, client: TeamCityClient):
        respx.delete(f"{FEATURES}/id:PROJECT_EXT_7").mock(return_value=httpx.Response(204))
        respx.get(f"{FEATURES}/id:PROJECT_EXT_7").mock(
            return_value=httpx.Response(404, text="No project feature")
        )
        service = client.project_features("Backend")
        service.delete("PROJECT_EXT_7")
        with pytest.raises(NotFoundError, match="project feature"):
            service.get_by_id("PROJECT_EXT_7")
