from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from fieldcheck.core.errors import FieldNotFoundError

logger = logging.getLogger(__name__)


def normalize_value(value: Any) -> str:
    """Normalize a field value to its comparable string form.

    - None (an unset optional) becomes the empty string
    - Enum members are replaced by their value, recursively
    - str is returned unchanged
    - int becomes its decimal representation
    - anything else goes through str()

    Args:
        value: Raw field value.

    Returns:
        String form of the value.
    """
    while isinstance(value, Enum):
        value = value.value
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(int(value))
    return str(value)


class BaseFieldAccessor(ABC):
    """Abstract base class for field accessors.

    Provides value normalization, logging of failed lookups and lookup
    statistics. Subclasses must implement the _resolve method.
    """

    def __init__(self) -> None:
        """Initialize the accessor."""
        self._lookup_count = 0
        self._miss_count = 0

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this accessor implementation."""
        ...

    @abstractmethod
    def _resolve(self, target: Any, field: str) -> Any:
        """Internal implementation of the field lookup.

        Args:
            target: Object to read from.
            field: Name of the field.

        Returns:
            The raw, un-normalized field value.

        Raises:
            FieldNotFoundError: If the field cannot be resolved.
        """
        ...

    def get_value(self, target: Any, field: str) -> str:
        """Get the normalized value of a field.

        Args:
            target: Object to read from. Never modified.
            field: Name of the field.

        Returns:
            The field's value normalized to a string.

        Raises:
            FieldNotFoundError: If the field cannot be resolved.
        """
        self._lookup_count += 1

        try:
            raw = self._resolve(target, field)
        except FieldNotFoundError as e:
            self._miss_count += 1
            logger.debug(
                "Field %r not found on %s (%s): %s",
                field,
                type(target).__name__,
                self.name,
                e.reason,
            )
            raise

        return normalize_value(raw)

    @property
    def stats(self) -> dict[str, int]:
        """Get lookup statistics.

        Returns:
            Dict with lookup_count and miss_count.
        """
        return {
            "lookup_count": self._lookup_count,
            "miss_count": self._miss_count,
        }

    def reset_stats(self) -> None:
        """Reset lookup statistics."""
        self._lookup_count = 0
        self._miss_count = 0
