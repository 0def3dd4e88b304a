"""Declarative base class for types mapped to external records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Self

from transmap.errors import InvalidMappingError
from transmap.key_mapping import MappingEngine, MappingRegistry, attribute_set, install_accessor
from transmap.notifications import FROM_RECORD_EVENT, EventLogger, Notifier, default_notifier


if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Mapping

    from transmap.key_mapping.registry import TransformMapping, TransformRef


_REGISTRY_ATTR = "_mapping_registry"


class Mapper:
    """Base class giving subclasses record serialization and deserialization.

    Example::

        class Window(Mapper):
            @staticmethod
            def epoch_to_datetime(milliseconds): ...

            @staticmethod
            def datetime_to_epoch(value): ...

        Window.simple_map(id="windowId", is_exclusive="exclusive")
        Window.transform_map("start_on", "epochStart", to="datetime_to_epoch", from_="epoch_to_datetime")

        window = Window.from_record({"windowId": 1, "epochStart": 1516499650000})
        window.to_record()
    """

    notifier: ClassVar[Notifier] = default_notifier

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _ = cls.notifier.subscribe(FROM_RECORD_EVENT, EventLogger())

    def __init__(self, attributes: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        super().__init__()
        attribute_set(self).update({**(attributes or {}), **kwargs})

    @classmethod
    def declared_registry(cls) -> MappingRegistry:
        """Return the registry holding the mappings declared on this class itself."""
        registry = cls.__dict__.get(_REGISTRY_ATTR)
        if registry is None:
            def on_declare(internal_key: str) -> None:
                _ = install_accessor(cls, internal_key)

            registry = MappingRegistry(on_declare)
            setattr(cls, _REGISTRY_ATTR, registry)
        return registry

    @classmethod
    def mapping_registry(cls) -> MappingRegistry:
        """Return the mappings of this class merged over those of its bases.

        The merge happens on every call, so mappings declared on a base after a
        subclass was first used still apply to the subclass. Declarations on
        the subclass replace base entries of the same kind and internal key.
        """
        merged = MappingRegistry()
        for base in reversed(cls.__mro__):
            registry = vars(base).get(_REGISTRY_ATTR)
            if registry is not None:
                merged.update(registry)
        return merged

    @classmethod
    def engine(cls) -> MappingEngine:
        """Build an engine bound to this class, its registry and notifier."""
        return MappingEngine(cls.mapping_registry(), owner=cls, notifier=cls.notifier)

    @classmethod
    def simple_map(cls, mappings: Mapping[str, Hashable] | None = None, /, **kwargs: Hashable) -> dict[str, Hashable]:
        """Declare plain renames between internal and external keys."""
        declared = {**(mappings or {}), **kwargs}
        _check_reserved(declared)
        _ = cls.declared_registry().simple_map(declared)
        return cls.simple_mappings()

    @classmethod
    def transform_map(
        cls,
        internal_key: str,
        source: Hashable,
        *,
        to: TransformRef,
        from_: TransformRef,
    ) -> dict[str, TransformMapping]:
        """Declare a mapping converted by ``to`` on output and ``from_`` on input.

        String references name static or class methods of this class and are
        looked up each time the mapping is applied.
        """
        _check_reserved([internal_key])
        _ = cls.declared_registry().transform_map(internal_key, source, to=to, from_=from_)
        return cls.transform_mappings()

    @classmethod
    def simple_mappings(cls) -> dict[str, Hashable]:
        return cls.mapping_registry().simple_mappings()

    @classmethod
    def transform_mappings(cls) -> dict[str, TransformMapping]:
        return cls.mapping_registry().transform_mappings()

    @classmethod
    def from_record(cls, record: Mapping[Hashable, Any]) -> Self:
        """Build an instance from an external record."""
        return cls.engine().from_record(record)

    def to_record(self) -> dict[Hashable, Any]:
        """Render the instance as an external record."""
        return type(self).engine().serialize(attribute_set(self))

    @property
    def attributes(self) -> dict[str, Any]:
        """Copy of the instance attribute set."""
        return dict(attribute_set(self))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return attribute_set(self) == attribute_set(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in attribute_set(self).items())
        return f"{type(self).__name__}({fields})"


def _check_reserved(internal_keys: Iterable[str]) -> None:
    reserved = {*vars(Mapper), "_attributes", _REGISTRY_ATTR}
    for internal_key in internal_keys:
        if internal_key in reserved or (isinstance(internal_key, str) and internal_key.startswith("__")):
            msg = f"internal key shadows a Mapper attribute: {internal_key!r}"
            raise InvalidMappingError(msg)
