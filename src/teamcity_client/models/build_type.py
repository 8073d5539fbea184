"""Build configuration (build type) data models."""

from __future__ import annotations

from pydantic import Field

from teamcity_client.client.errors import ValidationError
from teamcity_client.models.common import ParametersField, TeamCityModel
from teamcity_client.models.locator import Locator
from teamcity_client.models.parameters import Parameters


class BuildTypeReference(TeamCityModel):
    """Short representation of a build type, as embedded in other resources."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    project_id: str | None = Field(default=None, alias="projectId")
    project_name: str | None = Field(default=None, alias="projectName")
    href: str | None = None
    web_url: str | None = Field(default=None, alias="webUrl")


class BuildTypeReferences(TeamCityModel):
    """``{"count": n, "buildType": [...]}`` wrapper."""

    count: int = 0
    items: list[BuildTypeReference] = Field(default_factory=list, alias="buildType")


class BuildType(TeamCityModel):
    """A build configuration (or template) inside a project."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    project_id: str | None = Field(default=None, alias="projectId")
    project_name: str | None = Field(default=None, alias="projectName")
    template_flag: bool | None = Field(default=None, alias="templateFlag")
    paused: bool | None = None
    href: str | None = None
    web_url: str | None = Field(default=None, alias="webUrl")
    uuid: str | None = None
    parameters: ParametersField = Field(default_factory=Parameters)

    @classmethod
    def new(
        cls,
        project_id: str,
        name: str,
        description: str = "",
        *,
        template: bool = False,
    ) -> BuildType:
        if not project_id:
            raise ValidationError("project_id is required")
        if not name:
            raise ValidationError("name is required")
        return cls(
            project_id=project_id,
            name=name,
            description=description,
            template_flag=True if template else None,
        )

    @property
    def locator(self) -> Locator:
        if self.uuid:
            return Locator.uuid(self.uuid)
        return Locator.id(self.id or "")

