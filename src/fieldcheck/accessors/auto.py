from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fieldcheck.accessors.attribute import AttributeAccessor
from fieldcheck.accessors.base import BaseFieldAccessor
from fieldcheck.accessors.mapping import MappingAccessor


class AutoAccessor(BaseFieldAccessor):
    """Picks the lookup strategy from the target: keys for mappings, attributes otherwise."""

    def __init__(self) -> None:
        super().__init__()
        self._mapping = MappingAccessor()
        self._attribute = AttributeAccessor()

    @property
    def name(self) -> str:
        return "auto"

    def _resolve(self, target: Any, field: str) -> Any:
        if isinstance(target, Mapping):
            return self._mapping._resolve(target, field)
        return self._attribute._resolve(target, field)
