from __future__ import annotations

import inspect
from typing import Any

from fieldcheck.accessors.base import BaseFieldAccessor
from fieldcheck.core.errors import FieldNotFoundError

_MISSING = object()


class AttributeAccessor(BaseFieldAccessor):
    """Reads fields as attributes of the target.

    Works for plain objects, dataclasses, Pydantic models, named tuples
    and properties. Methods and dunder names are not data fields and
    resolve as not found, as does a None target.
    """

    @property
    def name(self) -> str:
        return "attribute"

    def _resolve(self, target: Any, field: str) -> Any:
        if target is None:
            raise FieldNotFoundError(field, "target is None")
        if not isinstance(field, str) or not field.isidentifier():
            raise FieldNotFoundError(str(field), "not a valid field name")
        if field.startswith("__") and field.endswith("__"):
            raise FieldNotFoundError(field, "special attributes are not fields")

        value = getattr(target, field, _MISSING)
        if value is _MISSING:
            raise FieldNotFoundError(field)
        if inspect.isroutine(value):
            raise FieldNotFoundError(field, "attribute is a method")
        return value
