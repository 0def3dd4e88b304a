"""Attribute accessors for declared internal keys."""

from __future__ import annotations

from typing import Any, Self, overload


class MappedAttribute:
    """Data descriptor reading and writing one key of an instance attribute set.

    Values live in the instance's ``_attributes`` dict, so the descriptor can
    be replaced or reinstalled without affecting existing instances.
    """

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> Self: ...

    @overload
    def __get__(self, instance: object, owner: type | None = None) -> Any: ...

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return attribute_set(instance).get(self.name)

    def __set__(self, instance: object, value: Any) -> None:
        attribute_set(instance)[self.name] = value

    def __delete__(self, instance: object) -> None:
        _ = attribute_set(instance).pop(self.name, None)

    def __repr__(self) -> str:
        return f"MappedAttribute({self.name!r})"


def attribute_set(instance: object) -> dict[str, Any]:
    """Return the attribute set of instance, creating it when missing."""
    try:
        return instance.__dict__["_attributes"]
    except KeyError:
        attributes: dict[str, Any] = {}
        instance.__dict__["_attributes"] = attributes
        return attributes


def install_accessor(owner: type, name: str) -> MappedAttribute:
    """Install a :class:`MappedAttribute` for name on owner unless already there."""
    existing = owner.__dict__.get(name)
    if isinstance(existing, MappedAttribute) and existing.name == name:
        return existing
    accessor = MappedAttribute(name)
    setattr(owner, name, accessor)
    return accessor
