"""Locators identify a resource inside a REST path."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from teamcity_client.client.errors import ValidationError


@dataclass(frozen=True)
class Locator:
    """A ``<dimension>:<value>`` path segment, e.g. ``id:MyProject``.

    The value is percent-encoded, so names containing ``#``, ``?`` or ``/``
    stay inside the segment.
    """

    dimension: str
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValidationError(f"Locator '{self.dimension}' requires a value")

    def __str__(self) -> str:
        return f"{self.dimension}:{quote(self.value, safe='')}"

    @classmethod
    def id(cls, value: str) -> Locator:
        return cls("id", value)

    @classmethod
    def id_int(cls, value: int) -> Locator:
        return cls("id", str(value))

    @classmethod
    def name(cls, value: str) -> Locator:
        return cls("name", value)

    @classmethod
    def uuid(cls, value: str) -> Locator:
        return cls("uuid", value)
