"""Project operations.

TeamCity has no PUT for a whole project: each field is written separately.
Updates therefore read the current state first and only write the fields
that differ. Re-submitting an unchanged parent, for instance, makes the
server copy the project into the same parent under a new name
(``project`` becomes ``project (1)``).
"""

from __future__ import annotations

import logging

import httpx

from teamcity_client.client.errors import ValidationError
from teamcity_client.client.rest import RestHelper
from teamcity_client.models.locator import Locator
from teamcity_client.models.project import Project, ProjectReference

logger = logging.getLogger(__name__)

PROJECT_FIELDS = "$long,uuid"


class ProjectService:
    """Create, read, update and delete projects."""

    def __init__(self, http: httpx.Client) -> None:
        self.rest = RestHelper(http, "projects/")

    def create(self, project: Project) -> Project:
        """Create *project* and apply the fields the creation call ignores.

        Description and parameters are not persisted by the initial POST, so
        a reconciliation pass follows against the new project's ID.
        """
        if not project.name:
            raise ValidationError("name is required")
        created = self.rest.post("", project.to_wire(), "project", ProjectReference)
        desired = project.model_copy(update={"id": created.id})
        return self._reconcile(Locator.id(created.id or ""), desired, is_create=True)

    def get(self, locator: Locator) -> Project:
        """Fetch a project; inherited parameters are filtered out."""
        project: Project = self.rest.get_with_fields(
            str(locator), PROJECT_FIELDS, "project", Project,
        )
        project.parameters = project.parameters.non_inherited()
        return project

    def get_by_id(self, project_id: str) -> Project:
        return self.get(Locator.id(project_id))

    def get_by_name(self, name: str) -> Project:
        """Project names are unique server-wide."""
        return self.get(Locator.name(name))

    def get_by_uuid(self, uuid: str) -> Project:
        return self.get(Locator.uuid(uuid))

    def update(self, project: Project) -> Project:
        """Write the fields of *project* that differ from the server's state.

        The project is located by UUID, or by the ID it was read with, so
        ``project.id`` may carry a new ID. Use the returned project for
        further updates.

        Not atomic: if a write fails, earlier writes stay applied and the
        failing one is raised.
        """
        return self._reconcile(project.locator, project, is_create=False)

    def delete(self, project_id: str) -> None:
        self.delete_locator(Locator.id(project_id))

    def delete_locator(self, locator: Locator) -> None:
        self.rest.delete(str(locator), "project")

    def _update_field(self, locator: Locator, field: str, value: str) -> None:
        logger.debug("Updating project %s %s", locator, field)
        self.rest.put_text_plain(f"{locator}/{field}", value, f"project {field}")

    def _reconcile(self, locator: Locator, project: Project, *, is_create: bool) -> Project:
        current = self.get(locator)

        for field in ("name", "description", "id"):
            desired = getattr(project, field)
            if desired is not None and desired != (getattr(current, field) or ""):
                self._update_field(locator, field, desired)
                if field == "id" and locator.dimension == "id":
                    locator = Locator.id(desired)

        if not is_create:
            parent_id = project.desired_parent_id
            if parent_id and parent_id != current.parent_project_id:
                logger.debug("Moving project %s under %s", locator, parent_id)
                self.rest.put(
                    f"{locator}/parentProject",
                    ProjectReference(id=parent_id).to_wire(),
                    "parent project",
                )

        if project.parameters.differs_from(current.parameters):
            logger.debug("Replacing parameters of project %s", locator)
            self.rest.put(
                f"{locator}/parameters",
                project.parameters.to_wire(),
                "project parameters",
            )

        return self.get(locator)

