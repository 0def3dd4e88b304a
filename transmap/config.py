"""Process-wide configuration."""

from __future__ import annotations

import dataclasses
import logging
import sys
from dataclasses import dataclass, field
from typing import Any


# Not an ancestor of the module loggers, so the default handler and propagate
# flag only apply to instrumentation lines.
LOGGER_NAME = "transmap.events"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _default_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger


@dataclass
class Configuration:
    """Configuration container.

    ``logger`` receives the instrumentation log lines. It defaults to a stdout
    logger at DEBUG level.
    """

    logger: logging.Logger = field(default_factory=_default_logger)


_configuration: Configuration | None = None


def configuration() -> Configuration:
    """Return the process-wide configuration, creating it on first use."""
    global _configuration  # noqa: PLW0603
    if _configuration is None:
        _configuration = Configuration()
    return _configuration


def configure(**changes: Any) -> Configuration:
    """Update configuration fields in place.

    Fields passed here are never built from their defaults, so supplying a
    logger leaves the default console logger untouched.

    Example::

        transmap.configure(logger=logging.getLogger("myapp.transmap"))
    """
    global _configuration  # noqa: PLW0603
    known = {f.name for f in dataclasses.fields(Configuration)}
    unknown = sorted(set(changes) - known)
    if unknown:
        msg = f"unknown configuration fields: {', '.join(unknown)}"
        raise TypeError(msg)
    if _configuration is None:
        _configuration = Configuration(**changes)
        return _configuration
    for name, value in changes.items():
        setattr(_configuration, name, value)
    return _configuration


def get_logger() -> logging.Logger:
    """Return the currently configured logger."""
    return configuration().logger


def reset() -> Configuration:
    """Restore the default configuration."""
    global _configuration  # noqa: PLW0603
    _configuration = Configuration()
    return _configuration
