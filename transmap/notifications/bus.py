"""In-process notifier implementation."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, override

from .protocol import Notifier, Subscription


if TYPE_CHECKING:
    from .protocol import Event, Listener


logger = logging.getLogger(__name__)


class NotificationBus(Notifier):
    """Exact-name publish/subscribe bus delivering events synchronously."""

    def __init__(self) -> None:
        super().__init__()
        self._subscriptions: dict[str, list[Subscription]] = {}
        self._lock = threading.Lock()

    @override
    def subscribe(self, name: str, listener: Listener) -> Subscription:
        """Register listener for name; subscribing twice returns the first subscription."""
        if not name:
            msg = "event name must not be empty"
            raise ValueError(msg)
        with self._lock:
            subscriptions = self._subscriptions.setdefault(name, [])
            for existing in subscriptions:
                if existing.listener == listener:
                    return existing
            subscription = Subscription(name=name, listener=listener)
            subscriptions.append(subscription)
        logger.debug("subscribed %r to %s", listener, name)
        return subscription

    @override
    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""
        with self._lock:
            subscriptions = self._subscriptions.get(subscription.name, [])
            if subscription in subscriptions:
                subscriptions.remove(subscription)
            if not subscriptions:
                _ = self._subscriptions.pop(subscription.name, None)

    @override
    def listeners_for(self, name: str) -> list[Listener]:
        """Return listeners subscribed to name in subscription order."""
        with self._lock:
            return [subscription.listener for subscription in self._subscriptions.get(name, [])]

    @override
    def publish_event(self, event: Event) -> None:
        """Call every listener of ``event.name`` outside the lock."""
        for listener in self.listeners_for(event.name):
            listener(event)
