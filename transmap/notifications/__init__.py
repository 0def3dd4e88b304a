"""Instrumentation: publish/subscribe notifier and default observers."""

from .bus import NotificationBus
from .event_logger import EventLogger
from .protocol import Event, Notifier, Subscription


FROM_RECORD_EVENT = "from_record.mappers.transmap"

default_notifier: Notifier = NotificationBus()


__all__ = [
    "FROM_RECORD_EVENT",
    "Event",
    "EventLogger",
    "NotificationBus",
    "Notifier",
    "Subscription",
    "default_notifier",
]
