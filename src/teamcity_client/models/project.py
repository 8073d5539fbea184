"""Project data models."""

from __future__ import annotations

from typing import Any

from pydantic import Field, PrivateAttr

from teamcity_client.client.errors import ValidationError
from teamcity_client.models.build_type import BuildTypeReferences
from teamcity_client.models.common import ParametersField, TeamCityModel
from teamcity_client.models.locator import Locator
from teamcity_client.models.parameters import Parameters


class ProjectReference(TeamCityModel):
    """Basic project information, used for relationships.

    TeamCity does not return the full representation when creating objects,
    so creation responses are read as references.
    """

    id: str | None = None
    name: str | None = None
    description: str | None = None
    href: str | None = None
    web_url: str | None = Field(default=None, alias="webUrl")


class Project(TeamCityModel):
    """A TeamCity project."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    archived: bool | None = None
    href: str | None = None
    web_url: str | None = Field(default=None, alias="webUrl")
    uuid: str | None = None
    parent_project_id: str | None = Field(default=None, alias="parentProjectId")
    parent_project: ProjectReference | None = Field(default=None, alias="parentProject")
    parameters: ParametersField = Field(default_factory=Parameters)
    build_types: BuildTypeReferences | None = Field(default=None, alias="buildTypes")

    # ID the project had when read or validated; locates it after an ID change
    _loaded_id: str | None = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        self._loaded_id = self.id

    @classmethod
    def new(
        cls,
        name: str,
        description: str = "",
        parent_project_id: str = "",
    ) -> Project:
        """Build a project for creation. Pass no parent for a top-level project."""
        if not name:
            raise ValidationError("name is required")
        project = cls(name=name, description=description or None)
        if parent_project_id:
            project.set_parent_project(parent_project_id)
        return project

    def set_parent_project(self, parent_id: str) -> None:
        self.parent_project_id = parent_id
        self.parent_project = ProjectReference(id=parent_id)

    @property
    def desired_parent_id(self) -> str | None:
        if self.parent_project_id:
            return self.parent_project_id
        if self.parent_project is not None:
            return self.parent_project.id
        return None

    @property
    def locator(self) -> Locator:
        """Where the project currently lives: its UUID, else the ID it was loaded with."""
        if self.uuid:
            return Locator.uuid(self.uuid)
        return Locator.id(self._loaded_id or self.id or "")

    def project_reference(self) -> ProjectReference:
        return ProjectReference(
            id=self.id,
            name=self.name,
            description=self.description,
            href=self.href,
            web_url=self.web_url,
        )
