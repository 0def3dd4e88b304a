"""Per-type declarations of simple and transform key mappings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from transmap.errors import InvalidMappingError


if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Mapping

    type TransformRef = str | Callable[[Any], Any]


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TransformMapping:
    """External key plus the pair of conversion functions for one internal key.

    ``to`` converts an internal value for serialization and ``from_`` converts
    an external value during deserialization. Each is a callable or the name of
    an attribute looked up on the owning type when the mapping is applied.
    """

    source: Hashable
    to: TransformRef
    from_: TransformRef


def _check_internal_key(internal_key: str) -> None:
    if not isinstance(internal_key, str) or not internal_key.isidentifier():
        msg = f"internal key must be a valid identifier: {internal_key!r}"
        raise InvalidMappingError(msg)


def _check_transform_ref(ref: object, role: str) -> None:
    if isinstance(ref, str):
        if not ref:
            msg = f"{role} function name must not be empty"
            raise InvalidMappingError(msg)
        return
    if not callable(ref):
        msg = f"{role} must be a function name or a callable, got {type(ref).__name__}"
        raise InvalidMappingError(msg)


class MappingRegistry:
    """Simple and transform mapping tables for one type.

    Tables only grow: declaring an internal key again replaces its entry of the
    same kind. ``on_declare`` is called with every declared internal key, which
    is how owning types install their accessors.
    """

    def __init__(self, on_declare: Callable[[str], None] | None = None) -> None:
        super().__init__()
        self._simple: dict[str, Hashable] = {}
        self._transform: dict[str, TransformMapping] = {}
        self.on_declare = on_declare

    def simple_map(self, mappings: Mapping[str, Hashable] | None = None, /, **kwargs: Hashable) -> dict[str, Hashable]:
        """Declare ``internal_key -> external_key`` pairs and return the simple table."""
        declared = {**(mappings or {}), **kwargs}
        for internal_key in declared:
            _check_internal_key(internal_key)
        self._simple.update(declared)
        for internal_key in declared:
            self._declared(internal_key)
        logger.debug("simple mappings declared: %s", declared)
        return self.simple_mappings()

    def transform_map(
        self,
        internal_key: str,
        source: Hashable,
        *,
        to: TransformRef,
        from_: TransformRef,
    ) -> dict[str, TransformMapping]:
        """Declare a transform mapping and return the transform table."""
        _check_internal_key(internal_key)
        _check_transform_ref(to, "to")
        _check_transform_ref(from_, "from_")
        self._transform[internal_key] = TransformMapping(source=source, to=to, from_=from_)
        self._declared(internal_key)
        logger.debug("transform mapping declared: %s <-> %r", internal_key, source)
        return self.transform_mappings()

    def simple_mappings(self) -> dict[str, Hashable]:
        """Return a copy of the simple table."""
        return dict(self._simple)

    def transform_mappings(self) -> dict[str, TransformMapping]:
        """Return a copy of the transform table."""
        return dict(self._transform)

    def internal_keys(self) -> list[str]:
        """Return every declared internal key, simple ones first."""
        return list(dict.fromkeys([*self._simple, *self._transform]))

    def update(self, other: MappingRegistry) -> None:
        """Merge the entries of other, replacing same-kind entries with the same internal key.

        ``on_declare`` is not called: the keys were declared on other.
        """
        self._simple.update(other._simple)
        self._transform.update(other._transform)

    def _declared(self, internal_key: str) -> None:
        if self.on_declare is not None:
            self.on_declare(internal_key)

    def __len__(self) -> int:
        return len(self._simple) + len(self._transform)

    def __repr__(self) -> str:
        return f"MappingRegistry(simple={self._simple!r}, transform={self._transform!r})"
