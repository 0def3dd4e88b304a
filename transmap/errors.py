"""Exception hierarchy."""

from __future__ import annotations

from typing import Any


class TransmapError(Exception):
    """Base class for every error raised by transmap."""


class InvalidMappingError(TransmapError, ValueError):
    """A mapping declaration is malformed."""


class UnresolvedTransformFunctionError(TransmapError, AttributeError):
    """A transform reference does not resolve to a callable on its owner."""

    def __init__(self, owner: Any, name: str, internal_key: str) -> None:
        owner_name = getattr(owner, "__qualname__", repr(owner))
        msg = f"{owner_name} has no callable {name!r} for transform mapping {internal_key!r}"
        super().__init__(msg)
        self.owner = owner
        self.name = name
        self.internal_key = internal_key
