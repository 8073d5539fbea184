"""VCS root operations."""

from __future__ import annotations

import httpx

from teamcity_client.client.errors import ValidationError
from teamcity_client.client.rest import RestHelper
from teamcity_client.models.locator import Locator
from teamcity_client.models.project import ProjectReference
from teamcity_client.models.vcs_root import GitVcsRoot, VcsRoot, VcsRootReference


class VcsRootService:
    def __init__(self, http: httpx.Client) -> None:
        self.rest = RestHelper(http, "vcs-roots/")

    def create(self, project_id: str, vcs_root: VcsRoot | GitVcsRoot) -> VcsRootReference:
        """Create *vcs_root* in *project_id* and return its reference."""
        if isinstance(vcs_root, GitVcsRoot):
            vcs_root = vcs_root.to_vcs_root()
        if not vcs_root.name:
            raise ValidationError("name is required")
        root = vcs_root.model_copy(update={"project": ProjectReference(id=project_id)})
        return self.rest.post("", root.to_wire(), "VCS root", VcsRootReference)

    def get_by_id(self, vcs_root_id: str) -> VcsRoot:
        return self.rest.get(str(Locator.id(vcs_root_id)), "VCS root", VcsRoot)

    def delete(self, vcs_root_id: str) -> None:
        self.rest.delete(str(Locator.id(vcs_root_id)), "VCS root")
