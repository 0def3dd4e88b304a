"""Default observer printing events with their payload."""

from __future__ import annotations

from typing import TYPE_CHECKING

from transmap.config import get_logger


if TYPE_CHECKING:
    from .protocol import Event


class EventLogger:
    """Log every received event as ``<name> -> <payload>`` at debug level."""

    def __call__(self, event: Event) -> None:
        get_logger().debug("%s -> %r", event.name, event.payload)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EventLogger)

    def __hash__(self) -> int:
        return hash(EventLogger)

    def __repr__(self) -> str:
        return "EventLogger()"
