from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fieldcheck.accessors.base import BaseFieldAccessor
from fieldcheck.core.errors import FieldNotFoundError


class MappingAccessor(BaseFieldAccessor):
    """Reads fields as keys of a mapping target (dicts, request payloads, rows)."""

    @property
    def name(self) -> str:
        return "mapping"

    def _resolve(self, target: Any, field: str) -> Any:
        if not isinstance(target, Mapping):
            raise FieldNotFoundError(field, f"{type(target).__name__} is not a mapping")
        if field not in target:
            raise FieldNotFoundError(field)
        return target[field]
