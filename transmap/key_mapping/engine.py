"""Bidirectional translation between attribute sets and external records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from transmap.errors import UnresolvedTransformFunctionError
from transmap.notifications import FROM_RECORD_EVENT, Notifier, default_notifier


if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Mapping

    from .registry import MappingRegistry, TransformRef


class MappingEngine:
    """Serialize and deserialize records using one registry.

    ``owner`` resolves transform functions declared by name and, for
    :meth:`from_record`, is called with the deserialized attributes to build
    the instance. Every :meth:`from_record` call is instrumented through
    ``notifier``.
    """

    def __init__(
        self,
        registry: MappingRegistry,
        owner: Any = None,
        notifier: Notifier | None = None,
    ) -> None:
        super().__init__()
        self.registry = registry
        self.owner = owner
        self.notifier = notifier if notifier is not None else default_notifier

    def resolve(self, ref: TransformRef, internal_key: str) -> Callable[[Any], Any]:
        """Return the callable behind a transform reference."""
        if not isinstance(ref, str):
            return ref
        function = getattr(self.owner, ref, None) if self.owner is not None else None
        if not callable(function):
            raise UnresolvedTransformFunctionError(self.owner, ref, internal_key)
        return function

    def deserialize(self, record: Mapping[Hashable, Any]) -> dict[str, Any]:
        """Return the attribute set described by record.

        External keys matching no mapping are ignored. A transform whose
        source also backs a simple mapping is applied in addition to the plain
        copy and wins when both target the same internal key.
        """
        inverted_simple = {
            external_key: internal_key for internal_key, external_key in self.registry.simple_mappings().items()
        }
        inverted_transform = {
            mapping.source: (internal_key, mapping.from_)
            for internal_key, mapping in self.registry.transform_mappings().items()
        }

        attributes: dict[str, Any] = {}
        for external_key, value in record.items():
            internal_key = inverted_simple.get(external_key)
            if internal_key is not None:
                attributes[internal_key] = value

            transformation = inverted_transform.get(external_key)
            if transformation is not None:
                transform_key, from_ref = transformation
                attributes[transform_key] = self.resolve(from_ref, transform_key)(value)
        return attributes

    def serialize(self, attributes: Mapping[str, Any]) -> dict[Hashable, Any]:
        """Return the record for an attribute set, without ``None`` values.

        Transform results overwrite simple values sharing an external key.
        """
        simple = {
            external_key: attributes.get(internal_key)
            for internal_key, external_key in self.registry.simple_mappings().items()
        }
        transformed = {
            mapping.source: self.resolve(mapping.to, internal_key)(attributes.get(internal_key))
            for internal_key, mapping in self.registry.transform_mappings().items()
        }
        return {key: value for key, value in (simple | transformed).items() if value is not None}

    def from_record(self, record: Mapping[Hashable, Any]) -> Any:
        """Deserialize record and build an owner instance from the attributes."""
        if not callable(self.owner):
            msg = "from_record requires a callable owner"
            raise TypeError(msg)
        with self.notifier.instrument(FROM_RECORD_EVENT, record):
            return self.owner(self.deserialize(record))
