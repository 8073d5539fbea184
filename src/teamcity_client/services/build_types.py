"""Build type (build configuration) operations."""

from __future__ import annotations

import logging

import httpx

from teamcity_client.client.errors import ValidationError
from teamcity_client.client.rest import RestHelper
from teamcity_client.models.build_type import BuildType, BuildTypeReference
from teamcity_client.models.locator import Locator
from teamcity_client.models.vcs_root import VcsRoot, VcsRootReference

logger = logging.getLogger(__name__)


class BuildTypeService:
    """Create, read, update and delete build types; attach VCS roots."""

    def __init__(self, http: httpx.Client) -> None:
        self.rest = RestHelper(http, "buildTypes/")

    def create(self, project_id: str, build_type: BuildType) -> BuildType:
        """Create *build_type* under *project_id*.

        Like projects, parameters are only stored by a follow-up write, so the
        new build type is reconciled right after the POST.
        """
        if not build_type.name:
            raise ValidationError("name is required")
        desired = build_type.model_copy(update={"project_id": project_id})
        payload = desired.to_wire()
        payload.pop("parameters", None)
        created = self.rest.post("", payload, "build type", BuildTypeReference)
        desired = desired.model_copy(update={"id": created.id})
        return self._reconcile(Locator.id(created.id or ""), desired)

    def get(self, locator: Locator) -> BuildType:
        build_type: BuildType = self.rest.get(str(locator), "build type", BuildType)
        build_type.parameters = build_type.parameters.non_inherited()
        return build_type

    def get_by_id(self, build_type_id: str) -> BuildType:
        return self.get(Locator.id(build_type_id))

    def get_by_name(self, name: str) -> BuildType:
        return self.get(Locator.name(name))

    def update(self, build_type: BuildType) -> BuildType:
        """Write only the fields of *build_type* that differ from the server's."""
        return self._reconcile(build_type.locator, build_type)

    def delete(self, build_type_id: str) -> None:
        self.rest.delete(str(Locator.id(build_type_id)), "build type")

    def attach_vcs_root(
        self,
        build_type_id: str,
        vcs_root: VcsRoot | VcsRootReference,
        checkout_rules: str = "",
    ) -> None:
        if isinstance(vcs_root, VcsRoot):
            vcs_root = vcs_root.reference()
        entry = {
            "id": vcs_root.id,
            "vcs-root": vcs_root.to_wire(),
            "checkout-rules": checkout_rules,
        }
        self.rest.post(
            f"{Locator.id(build_type_id)}/vcs-root-entries",
            entry,
            "VCS root entry",
        )

    def _update_field(self, locator: Locator, field: str, value: str) -> None:
        logger.debug("Updating build type %s %s", locator, field)
        self.rest.put_text_plain(f"{locator}/{field}", value, f"build type {field}")

    def _reconcile(self, locator: Locator, build_type: BuildType) -> BuildType:
        current = self.get(locator)

        for field in ("name", "description"):
            desired = getattr(build_type, field)
            if desired is not None and desired != (getattr(current, field) or ""):
                self._update_field(locator, field, desired)

        if build_type.paused is not None and build_type.paused != bool(current.paused):
            self._update_field(locator, "paused", "true" if build_type.paused else "false")

        if build_type.parameters.differs_from(current.parameters):
            logger.debug("Replacing parameters of build type %s", locator)
            self.rest.put(
                f"{locator}/parameters",
                build_type.parameters.to_wire(),
                "build type parameters",
            )

        return self.get(locator)

