from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from fieldcheck.accessors.base import BaseFieldAccessor
from fieldcheck.core.errors import FieldNotFoundError

Extractor = Callable[[Any], Any]


class RegisteredAccessor(BaseFieldAccessor):
    """Reads fields through explicitly registered extractor functions.

    Nothing is looked up by introspection: each target type registers
    the fields it exposes and a function that reads each one. Lookups
    walk the target type's MRO, so registrations on a base class apply
    to its subclasses. Exceptions raised by extractors propagate.

    Example:
        accessor = RegisteredAccessor()
        accessor.register(User, {"email": lambda u: u.email, "age": lambda u: u.age})
        accessor.get_value(user, "age")  # "42"
    """

    def __init__(
        self,
        registrations: Mapping[type, Mapping[str, Extractor]] | None = None,
    ) -> None:
        """Initialize the accessor.

        Args:
            registrations: Initial mapping of target type to its field extractors.
        """
        super().__init__()
        self._extractors: dict[type, dict[str, Extractor]] = {}
        for target_type, extractors in (registrations or {}).items():
            self.register(target_type, extractors)

    @property
    def name(self) -> str:
        return "registry"

    def register(self, target_type: type, extractors: Mapping[str, Extractor]) -> None:
        """Register field extractors for a type, merging with earlier registrations.

        Args:
            target_type: Type the extractors apply to.
            extractors: Mapping of field name to a function reading that field.
        """
        self._extractors.setdefault(target_type, {}).update(extractors)

    def unregister(self, target_type: type) -> None:
        """Drop every extractor registered for ``target_type``."""
        self._extractors.pop(target_type, None)

    def fields_for(self, target_type: type) -> list[str]:
        """Sorted names of the fields readable on ``target_type``."""
        names: set[str] = set()
        for klass in target_type.__mro__:
            names.update(self._extractors.get(klass, {}))
        return sorted(names)

    def _resolve(self, target: Any, field: str) -> Any:
        for klass in type(target).__mro__:
            extractor = self._extractors.get(klass, {}).get(field)
            if extractor is not None:
                return extractor(target)
        if not any(klass in self._extractors for klass in type(target).__mro__):
            raise FieldNotFoundError(field, f"no fields registered for {type(target).__name__}")
        raise FieldNotFoundError(field)
