"""Property collections used by features, VCS roots and settings payloads.

On the wire a property collection looks like::

    {"count": 2, "property": [{"name": "clientId", "value": "abc"}, ...]}

Properties whose name starts with ``secure:`` hold secrets. The server never
returns their values, so the caller-facing :meth:`Properties.map` leaves them
out, while :meth:`Properties.to_wire` still sends whatever the caller set.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import BaseModel

SECURE_PREFIX = "secure:"


def is_secure(name: str) -> bool:
    return name.startswith(SECURE_PREFIX)


class Property(BaseModel):
    """A single name/value pair."""

    name: str
    value: str = ""
    inherited: bool | None = None


class Properties:
    """Ordered collection of :class:`Property`, unique by name."""

    def __init__(self, *items: Property) -> None:
        self._items: list[Property] = []
        for item in items:
            self.add_or_replace(item)

    @classmethod
    def from_dict(cls, values: dict[str, str]) -> Properties:
        return cls(*(Property(name=k, value=v) for k, v in values.items()))

    @classmethod
    def from_wire(cls, data: dict[str, Any] | None) -> Properties:
        if not data:
            return cls()
        return cls(*(Property.model_validate(p) for p in data.get("property") or []))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Property]:
        return iter(self._items)

    def __contains__(self, name: object) -> bool:
        return any(p.name == name for p in self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Properties):
            return NotImplemented
        return self.to_wire() == other.to_wire()

    def __repr__(self) -> str:
        return f"Properties({self.map()!r})"

    @property
    def count(self) -> int:
        return len(self._items)

    def add_or_replace(self, prop: Property) -> None:
        for i, existing in enumerate(self._items):
            if existing.name == prop.name:
                self._items[i] = prop
                return
        self._items.append(prop)

    def add_or_replace_value(self, name: str, value: str) -> None:
        self.add_or_replace(Property(name=name, value=value))

    def remove(self, name: str) -> None:
        self._items = [p for p in self._items if p.name != name]

    def get_ok(self, name: str) -> tuple[str, bool]:
        """Return ``(value, found)`` for *name*."""
        for p in self._items:
            if p.name == name:
                return p.value, True
        return "", False

    def get(self, name: str, default: str | None = None) -> str | None:
        value, ok = self.get_ok(name)
        return value if ok else default

    def map(self) -> dict[str, str]:
        """Caller-facing name/value view; secure properties are never included."""
        return {p.name: p.value for p in self._items if not is_secure(p.name)}

    def secure_names(self) -> list[str]:
        """Names of secure properties that carry a value to send."""
        return [p.name for p in self._items if is_secure(p.name) and p.value]

    def to_wire(self) -> dict[str, Any]:
        return {
            "count": len(self._items),
            "property": [
                {"name": p.name, "value": p.value} for p in self._items
            ],
        }


def properties_of(pairs: Iterable[tuple[str, str | None]]) -> Properties:
    """Build :class:`Properties` from pairs, dropping ``None`` and empty secure values."""
    props = Properties()
    for name, value in pairs:
        if value is None:
            continue
        if is_secure(name) and not value:
            continue
        props.add_or_replace_value(name, value)
    return props
