"""Shared model base and field types."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer

from teamcity_client.models.parameters import Parameters
from teamcity_client.models.properties import Properties


def _to_parameters(value: Any) -> Any:
    if value is None:
        return Parameters()
    if isinstance(value, dict):
        return Parameters.from_wire(value)
    return value


def _to_properties(value: Any) -> Any:
    if value is None:
        return Properties()
    if isinstance(value, dict):
        return Properties.from_wire(value)
    return value


ParametersField = Annotated[
    Parameters,
    BeforeValidator(_to_parameters),
    PlainSerializer(lambda p: p.to_wire(), return_type=dict),
]

PropertiesField = Annotated[
    Properties,
    BeforeValidator(_to_properties),
    PlainSerializer(lambda p: p.to_wire(), return_type=dict),
]


class TeamCityModel(BaseModel):
    """Base for resource models; wire names are camelCase aliases."""

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Request payload: aliased names, unset fields dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)
