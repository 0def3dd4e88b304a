"""Instrumentation interface definitions."""

from __future__ import annotations

import time
import uuid
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    type Listener = Callable[[Event], None]


@dataclass(frozen=True, slots=True)
class Event:
    """A published instrumentation event."""

    name: str
    payload: Any
    started: float
    finished: float
    transaction_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    error: BaseException | None = None

    @property
    def duration(self) -> float:
        """Seconds spent inside the instrumented block."""
        return self.finished - self.started


@dataclass(frozen=True, slots=True)
class Subscription:
    """Handle returned by :meth:`Notifier.subscribe`."""

    name: str
    listener: Listener


class Notifier(ABC):
    """Synchronous publish/subscribe interface."""

    @abstractmethod
    def subscribe(self, name: str, listener: Listener) -> Subscription:
        """Register listener for events published under name."""

    @abstractmethod
    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""

    @abstractmethod
    def listeners_for(self, name: str) -> list[Listener]:
        """Return listeners subscribed to name in subscription order."""

    @abstractmethod
    def publish_event(self, event: Event) -> None:
        """Deliver an already built event to its listeners."""

    def publish(self, name: str, payload: Any) -> Event:
        """Publish an instantaneous event and return it."""
        now = time.monotonic()
        event = Event(name=name, payload=payload, started=now, finished=now)
        self.publish_event(event)
        return event

    @contextmanager
    def instrument(self, name: str, payload: Any) -> Iterator[None]:
        """Time the wrapped block and publish one event when it exits.

        The event is published whether the block returns or raises; in the
        latter case ``Event.error`` holds the exception, which is re-raised.
        """
        started = time.monotonic()
        error: BaseException | None = None
        try:
            yield
        except BaseException as exc:
            error = exc
            raise
        finally:
            self.publish_event(
                Event(name=name, payload=payload, started=started, finished=time.monotonic(), error=error)
            )
