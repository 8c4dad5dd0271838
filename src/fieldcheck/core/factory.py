"""Named plugin registry.

Maps short names to implementation classes so a field accessor can be
picked from configuration. Built-in implementations are registered
lazily and come back after a caller unregisters them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


class PluginFactory(ABC, Generic[T]):
    """Registry of implementation classes keyed by name.

    Subclasses own a class-level ``_registry``, name a ``_default_type``
    and an ``_entity_name`` for error messages, and fill in their
    built-ins from ``_ensure_defaults_registered``.
    """

    _registry: ClassVar[dict[str, type[Any]]]
    _default_type: ClassVar[str]
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Add any missing built-in implementations to the registry."""
        ...

    @classmethod
    def register(cls, name: str, impl_class: type[T]) -> None:
        """Register ``impl_class`` under ``name``, replacing any previous one."""
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a registration. Unknown names are ignored."""
        cls._registry.pop(name, None)

    @classmethod
    def lookup(cls, name: str | None = None) -> type[T]:
        """Return the class registered under ``name`` (or the default).

        Raises:
            ValueError: If nothing is registered under the name.
        """
        cls._ensure_defaults_registered()
        key = cls._default_type if name is None else name
        try:
            return cls._registry[key]
        except KeyError:
            known = ", ".join(cls.available_types())
            raise ValueError(
                f"Unknown {cls._entity_name} type: {key}. Available types: {known}"
            ) from None

    @classmethod
    def create(cls, name: str | None = None, **kwargs: Any) -> T:
        """Instantiate the named implementation with ``kwargs``."""
        return cls.lookup(name)(**kwargs)

    @classmethod
    def available_types(cls) -> list[str]:
        cls._ensure_defaults_registered()
        return sorted(cls._registry)
