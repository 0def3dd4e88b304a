"""transmap - declarative key mapping between typed objects and flat records"""

from ._version import version as __version__
from .config import Configuration, configuration, configure, get_logger
from .errors import InvalidMappingError, TransmapError, UnresolvedTransformFunctionError
from .key_mapping import MappedAttribute, MappingEngine, MappingRegistry, TransformMapping
from .mappers import Mapper
from .notifications import FROM_RECORD_EVENT, Event, EventLogger, NotificationBus, Notifier, default_notifier


__all__ = [
    "FROM_RECORD_EVENT",
    "Configuration",
    "Event",
    "EventLogger",
    "InvalidMappingError",
    "MappedAttribute",
    "Mapper",
    "MappingEngine",
    "MappingRegistry",
    "NotificationBus",
    "Notifier",
    "TransformMapping",
    "TransmapError",
    "UnresolvedTransformFunctionError",
    "__version__",
    "configuration",
    "configure",
    "default_notifier",
    "get_logger",
]
