from fieldcheck.accessors.attribute import AttributeAccessor
from fieldcheck.accessors.auto import AutoAccessor
from fieldcheck.accessors.base import BaseFieldAccessor, normalize_value
from fieldcheck.accessors.factory import AccessorFactory
from fieldcheck.accessors.mapping import MappingAccessor
from fieldcheck.accessors.registry import RegisteredAccessor

__all__ = [
    "AccessorFactory",
    "AttributeAccessor",
    "AutoAccessor",
    "BaseFieldAccessor",
    "MappingAccessor",
    "RegisteredAccessor",
    "normalize_value",
]
