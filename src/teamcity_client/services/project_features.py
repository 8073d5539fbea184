"""Project features of a single project."""

from __future__ import annotations

import logging

import httpx

from teamcity_client.client.errors import ValidationError
from teamcity_client.client.rest import RestHelper
from teamcity_client.models.locator import Locator
from teamcity_client.models.project_feature import ProjectFeature, load_project_feature

logger = logging.getLogger(__name__)


class ProjectFeatureService:
    """Operations on ``projects/<locator>/projectFeatures/``."""

    def __init__(self, http: httpx.Client, project_id: str) -> None:
        self.project_id = project_id
        self.rest = RestHelper(
            http, f"projects/{Locator.id(project_id)}/projectFeatures/",
        )

    def _check_owner(self, feature: ProjectFeature) -> None:
        if feature.project_id and feature.project_id != self.project_id:
            raise ValidationError(
                f"Feature belongs to project '{feature.project_id}',"
                f" not '{self.project_id}'"
            )

    def create(self, feature: ProjectFeature) -> ProjectFeature:
        self._check_owner(feature)
        data = self.rest.post("", feature.to_wire(), "project feature")
        return load_project_feature(self.project_id, data)

    def get_by_id(self, feature_id: str) -> ProjectFeature:
        data = self.rest.get(str(Locator.id(feature_id)), "project feature")
        return load_project_feature(self.project_id, data)

    def list(self) -> list[ProjectFeature]:
        data = self.rest.get("", "project features")
        return [
            load_project_feature(self.project_id, item)
            for item in data.get("projectFeature") or []
        ]

    def update(self, feature: ProjectFeature) -> ProjectFeature:
        """Replace the feature's properties when they differ from the server's.

        Secure values cannot be read back, so supplying any forces the write.
        """
        self._check_owner(feature)
        if not feature.id:
            raise ValidationError("Feature has no ID; create it first")
        locator = Locator.id(feature.id)
        current = self.get_by_id(feature.id)
        desired = feature.properties()
        if desired.secure_names() or desired.map() != current.properties().map():
            logger.debug("Replacing properties of project feature %s", feature.id)
            self.rest.put(
                f"{locator}/properties", desired.to_wire(), "project feature properties",
            )
        return self.get_by_id(feature.id)

    def delete(self, feature_id: str) -> None:
        self.rest.delete(str(Locator.id(feature_id)), "project feature")
