"""Key mapping registry, engine and accessors."""

from .accessors import MappedAttribute, attribute_set, install_accessor
from .engine import MappingEngine
from .registry import MappingRegistry, TransformMapping


__all__ = [
    "MappedAttribute",
    "MappingEngine",
    "MappingRegistry",
    "TransformMapping",
    "attribute_set",
    "install_accessor",
]
