"""Project features: OAuth connections, versioned settings and others.

On the wire a project feature is ``{"id", "type", "properties"}``. The
variant is chosen from ``type`` and, for OAuth connections, the
``providerType`` property.
"""

from __future__ import annotations

from abc import abstractmethod
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from teamcity_client.models.common import PropertiesField
from teamcity_client.models.properties import Properties, properties_of

OAUTH_PROVIDER = "OAuthProvider"
SLACK_PROVIDER = "slackConnection"


class ProjectFeature(BaseModel):
    """Base class for project feature variants."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    feature_type: ClassVar[str] = ""

    id: str | None = None
    project_id: str | None = None

    @property
    def type(self) -> str:
        return self.feature_type

    @abstractmethod
    def properties(self) -> Properties:
        """Render the feature settings as a property collection."""

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type,
            "properties": self.properties().to_wire(),
        }
        if self.id:
            data["id"] = self.id
        return data

    @classmethod
    @abstractmethod
    def from_wire(cls, project_id: str, data: dict[str, Any]) -> ProjectFeature:
        """Build the variant from a server payload."""


class SlackConnectionOptions(BaseModel):
    """Settings of a Slack connection. Secrets are write-only."""

    client_id: str = ""
    client_secret: str = ""
    display_name: str = ""
    provider_type: str = ""
    token: str = ""


class ProjectFeatureSlackConnection(ProjectFeature):
    """Slack OAuth connection available to the project and its subprojects."""

    feature_type: ClassVar[str] = OAUTH_PROVIDER

    options: SlackConnectionOptions = Field(default_factory=SlackConnectionOptions)

    def properties(self) -> Properties:
        return properties_of([
            ("clientId", self.options.client_id),
            ("secure:clientSecret", self.options.client_secret),
            ("displayName", self.options.display_name),
            ("providerType", SLACK_PROVIDER),
            ("secure:token", self.options.token),
        ])

    @classmethod
    def from_wire(cls, project_id: str, data: dict[str, Any]) -> ProjectFeature:
        props = Properties.from_wire(data.get("properties"))
        return cls(
            id=data.get("id"),
            project_id=project_id,
            options=SlackConnectionOptions(
                client_id=props.get("clientId", ""),
                display_name=props.get("displayName", ""),
                provider_type=props.get("providerType", ""),
            ),
        )


class ProjectFeatureSlackNotifier(ProjectFeatureSlackConnection):
    """Slack connection registered for notifications.

    Shares the wire representation of :class:`ProjectFeatureSlackConnection`,
    so features read back from the server load as the connection class.
    """


class VersionedSettingsBuildSettings(str, Enum):
    ALWAYS_USE_CURRENT = "ALWAYS_USE_CURRENT"
    PREFER_CURRENT = "PREFER_CURRENT"
    PREFER_VCS = "PREFER_VCS"


class VersionedSettingsFormat(str, Enum):
    KOTLIN = "kotlin"
    XML = "xml"


class VersionedSettingsCredentialsStorage(str, Enum):
    SCRAMBLED_IN_VCS = "scrambledInVcs"
    CREDENTIALS_JSON = "credentialsJSON"


class VersionedSettingsOptions(BaseModel):
    """Settings for storing project settings in version control."""

    enabled: bool = True
    build_settings: VersionedSettingsBuildSettings = (
        VersionedSettingsBuildSettings.PREFER_VCS
    )
    vcs_root_id: str = ""
    show_changes: bool = False
    format: VersionedSettingsFormat = VersionedSettingsFormat.KOTLIN
    use_relative_ids: bool = True
    credentials_storage_type: VersionedSettingsCredentialsStorage = (
        VersionedSettingsCredentialsStorage.CREDENTIALS_JSON
    )


def _flag(value: bool) -> str:
    return "true" if value else "false"


class ProjectFeatureVersionedSettings(ProjectFeature):
    """Synchronizes project settings with a VCS root."""

    feature_type: ClassVar[str] = "versionedSettings"

    options: VersionedSettingsOptions = Field(default_factory=VersionedSettingsOptions)

    def properties(self) -> Properties:
        opts = self.options
        return properties_of([
            ("enabled", _flag(opts.enabled)),
            ("buildSettings", opts.build_settings.value),
            ("rootId", opts.vcs_root_id or None),
            ("showChanges", _flag(opts.show_changes)),
            ("format", opts.format.value),
            ("useRelativeIds", _flag(opts.use_relative_ids)),
            ("credentialsStorageType", opts.credentials_storage_type.value),
        ])

    @classmethod
    def from_wire(cls, project_id: str, data: dict[str, Any]) -> ProjectFeature:
        props = Properties.from_wire(data.get("properties"))
        defaults = VersionedSettingsOptions()
        return cls(
            id=data.get("id"),
            project_id=project_id,
            options=VersionedSettingsOptions(
                enabled=props.get("enabled", "true") == "true",
                build_settings=props.get("buildSettings", defaults.build_settings.value),
                vcs_root_id=props.get("rootId", ""),
                show_changes=props.get("showChanges") == "true",
                format=props.get("format", defaults.format.value),
                use_relative_ids=props.get("useRelativeIds", "true") == "true",
                credentials_storage_type=props.get(
                    "credentialsStorageType",
                    defaults.credentials_storage_type.value,
                ),
            ),
        )


class GenericProjectFeature(ProjectFeature):
    """Any project feature without a dedicated class; properties kept as-is."""

    type_name: str
    props: PropertiesField = Field(default_factory=Properties)

    @property
    def type(self) -> str:
        return self.type_name

    def properties(self) -> Properties:
        return Properties(*self.props)

    @classmethod
    def from_wire(cls, project_id: str, data: dict[str, Any]) -> ProjectFeature:
        return cls(
            id=data.get("id"),
            project_id=project_id,
            type_name=data.get("type", ""),
            props=Properties.from_wire(data.get("properties")),
        )


def load_project_feature(project_id: str, data: dict[str, Any]) -> ProjectFeature:
    feature_type = data.get("type", "")
    if feature_type == OAUTH_PROVIDER:
        props = Properties.from_wire(data.get("properties"))
        if props.get("providerType") == SLACK_PROVIDER:
            return ProjectFeatureSlackConnection.from_wire(project_id, data)
    elif feature_type == ProjectFeatureVersionedSettings.feature_type:
        return ProjectFeatureVersionedSettings.from_wire(project_id, data)
    return GenericProjectFeature.from_wire(project_id, data)
