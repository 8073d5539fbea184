"""Build features of a single build type."""

from __future__ import annotations

import httpx

from teamcity_client.client.errors import ValidationError
from teamcity_client.client.rest import RestHelper
from teamcity_client.models.build_feature import BuildFeature, load_build_feature
from teamcity_client.models.locator import Locator


class BuildFeatureService:
    """Operations on ``buildTypes/<locator>/features/``."""

    def __init__(self, http: httpx.Client, build_type_id: str) -> None:
        self.build_type_id = build_type_id
        self.rest = RestHelper(http, f"buildTypes/{Locator.id(build_type_id)}/features/")

    def create(self, feature: BuildFeature) -> BuildFeature:
        if feature.build_type_id and feature.build_type_id != self.build_type_id:
            raise ValidationError(
                f"Feature belongs to build type '{feature.build_type_id}',"
                f" not '{self.build_type_id}'"
            )
        data = self.rest.post("", feature.to_wire(), "build feature")
        return load_build_feature(self.build_type_id, data)

    def get_by_id(self, feature_id: str) -> BuildFeature:
        data = self.rest.get(feature_id, "build feature")
        return load_build_feature(self.build_type_id, data)

    def list(self) -> list[BuildFeature]:
        data = self.rest.get("", "build features")
        return [
            load_build_feature(self.build_type_id, item)
            for item in data.get("feature") or []
        ]

    def delete(self, feature_id: str) -> None:
        self.rest.delete(feature_id, "build feature")
