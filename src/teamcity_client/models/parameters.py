"""Build/project parameters.

TeamCity distinguishes configuration parameters, system properties
(``system.`` prefix) and environment variables (``env.`` prefix). Password
parameters are secure: the server answers with an empty value for them.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ParameterType(str, Enum):
    CONFIGURATION = "configuration"
    SYSTEM = "system"
    ENVIRONMENT = "env"


_PREFIXES = {
    ParameterType.SYSTEM: "system.",
    ParameterType.ENVIRONMENT: "env.",
}


class ParameterSpec(BaseModel):
    """Type specification of a parameter, e.g. ``password display='hidden'``."""

    raw_value: str = Field(alias="rawValue")

    model_config = ConfigDict(populate_by_name=True)


class Parameter(BaseModel):
    """A single named parameter."""

    name: str
    value: str = ""
    inherited: bool = False
    type: ParameterSpec | None = None

    @classmethod
    def new(
        cls,
        param_type: ParameterType,
        name: str,
        value: str,
        *,
        password: bool = False,
    ) -> Parameter:
        prefix = _PREFIXES.get(param_type, "")
        if prefix and not name.startswith(prefix):
            name = prefix + name
        spec = ParameterSpec(raw_value="password") if password else None
        return cls(name=name, value=value, type=spec)

    @property
    def parameter_type(self) -> ParameterType:
        for ptype, prefix in _PREFIXES.items():
            if self.name.startswith(prefix):
                return ptype
        return ParameterType.CONFIGURATION

    @property
    def is_password(self) -> bool:
        return self.type is not None and self.type.raw_value.startswith("password")

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "value": self.value,
            "inherited": self.inherited,
        }
        if self.type is not None:
            data["type"] = {"rawValue": self.type.raw_value}
        return data


class Parameters:
    """Ordered collection of :class:`Parameter`, unique by name."""

    def __init__(self, *items: Parameter) -> None:
        self._items: list[Parameter] = []
        for item in items:
            self.add_or_replace(item)

    @classmethod
    def from_wire(cls, data: dict[str, Any] | None) -> Parameters:
        if not data:
            return cls()
        return cls(*(Parameter.model_validate(p) for p in data.get("property") or []))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._items)

    def __contains__(self, name: object) -> bool:
        return any(p.name == name for p in self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameters):
            return NotImplemented
        return self._comparable() == other._comparable()

    def __repr__(self) -> str:
        return f"Parameters({self.map()!r})"

    @property
    def count(self) -> int:
        return len(self._items)

    def add_or_replace(self, param: Parameter) -> None:
        for i, existing in enumerate(self._items):
            if existing.name == param.name:
                self._items[i] = param
                return
        self._items.append(param)

    def remove(self, name: str) -> None:
        self._items = [p for p in self._items if p.name != name]

    def get(self, name: str) -> Parameter | None:
        for p in self._items:
            if p.name == name:
                return p
        return None

    def non_inherited(self) -> Parameters:
        return Parameters(*(p for p in self._items if not p.inherited))

    def has_secure_values(self) -> bool:
        return any(p.is_password and p.value for p in self._items)

    def differs_from(self, current: Parameters) -> bool:
        """Whether writing this set over *current* would change anything.

        An empty set never triggers a write. Password values are never
        returned by the server, so a set carrying one always differs.
        """
        if not self._items:
            return False
        return self.has_secure_values() or self.non_inherited() != current

    def map(self) -> dict[str, str]:
        """Name/value view; password values are masked as empty strings."""
        return {p.name: "" if p.is_password else p.value for p in self._items}

    def to_wire(self) -> dict[str, Any]:
        return {
            "count": len(self._items),
            "property": [p.to_wire() for p in self._items],
        }

    def _comparable(self) -> set[tuple[str, str, str]]:
        return {
            (
                p.name,
                "" if p.is_password else p.value,
                p.type.raw_value if p.type else "",
            )
            for p in self._items
        }
