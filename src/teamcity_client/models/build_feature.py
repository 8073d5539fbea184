"""Build features attached to build types.

Each variant knows its ``type`` key and how to render itself as a property
collection; :func:`load_build_feature` picks the variant for a payload
returned by the server.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from teamcity_client.models.common import PropertiesField
from teamcity_client.models.properties import Properties


class BuildFeature(BaseModel):
    """Base class for build feature variants."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    feature_type: ClassVar[str] = ""

    id: str | None = None
    build_type_id: str | None = None
    disabled: bool = False

    @property
    def type(self) -> str:
        return self.feature_type

    @abstractmethod
    def properties(self) -> Properties:
        """Render the feature settings as a property collection."""

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type,
            "disabled": self.disabled,
            "inherited": False,
            "properties": self.properties().to_wire(),
        }
        if self.id:
            data["id"] = self.id
        return data

    @classmethod
    def from_wire(cls, build_type_id: str, data: dict[str, Any]) -> BuildFeature:
        return cls(
            id=data.get("id"),
            build_type_id=build_type_id,
            disabled=bool(data.get("disabled", False)),
        )


class FeatureGolang(BuildFeature):
    """Go test reporting. Its only setting is fixed to JSON output."""

    feature_type: ClassVar[str] = "golang"

    def properties(self) -> Properties:
        props = Properties()
        props.add_or_replace_value("test.format", "json")
        return props


class GenericBuildFeature(BuildFeature):
    """Any build feature type without a dedicated class; properties kept as-is."""

    type_name: str
    props: PropertiesField = Field(default_factory=Properties)

    @property
    def type(self) -> str:
        return self.type_name

    def properties(self) -> Properties:
        return Properties(*self.props)

    @classmethod
    def from_wire(cls, build_type_id: str, data: dict[str, Any]) -> BuildFeature:
        return cls(
            id=data.get("id"),
            build_type_id=build_type_id,
            disabled=bool(data.get("disabled", False)),
            type_name=data.get("type", ""),
            props=Properties.from_wire(data.get("properties")),
        )


BUILD_FEATURE_TYPES: dict[str, type[BuildFeature]] = {
    FeatureGolang.feature_type: FeatureGolang,
}


def load_build_feature(build_type_id: str, data: dict[str, Any]) -> BuildFeature:
    cls = BUILD_FEATURE_TYPES.get(data.get("type", ""), GenericBuildFeature)
    return cls.from_wire(build_type_id, data)
