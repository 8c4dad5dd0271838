from __future__ import annotations

from typing import Any, ClassVar

from fieldcheck.core.factory import PluginFactory
from fieldcheck.protocols import FieldAccessorProtocol


class AccessorFactory(PluginFactory[FieldAccessorProtocol]):
    """Factory for creating field accessor instances.

    Supports registration of custom accessor types and creation
    of accessors by type name.

    Example:
        >>> accessor = AccessorFactory.create("mapping")

        # Register custom accessor
        >>> AccessorFactory.register("orm", OrmRowAccessor)
        >>> accessor = AccessorFactory.create("orm")
    """

    _registry: ClassVar[dict[str, type[FieldAccessorProtocol]]] = {}
    _default_type: ClassVar[str] = "auto"
    _entity_name: ClassVar[str] = "accessor"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure the built-in accessors are registered."""
        from fieldcheck.accessors.attribute import AttributeAccessor
        from fieldcheck.accessors.auto import AutoAccessor
        from fieldcheck.accessors.mapping import MappingAccessor
        from fieldcheck.accessors.registry import RegisteredAccessor

        cls._registry.setdefault("auto", AutoAccessor)
        cls._registry.setdefault("attribute", AttributeAccessor)
        cls._registry.setdefault("mapping", MappingAccessor)
        cls._registry.setdefault("registry", RegisteredAccessor)

    @classmethod
    def create(  # type: ignore[override]
        cls,
        accessor_type: str | None = None,
        **kwargs: Any,
    ) -> FieldAccessorProtocol:
        """Create an accessor instance.

        Args:
            accessor_type: Type of accessor to create. Defaults to "auto".
            **kwargs: Arguments to pass to the accessor constructor.

        Returns:
            Accessor instance.

        Raises:
            ValueError: If the accessor type is not registered.
        """
        return super().create(accessor_type, **kwargs)
