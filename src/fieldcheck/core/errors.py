"""Error classes with package identification.

Errors raised by fieldcheck are Pydantic custom errors, so they can be
raised from inside Pydantic validators and still carry the package name in
their context.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "fieldcheck"


class FieldcheckError(PydanticCustomError):
    """Generic Pydantic error with package identification.

    Args:
        error_type: Type/category of the error.
        message_template: Error message (can include {placeholders}).
        context: Additional context dict merged into error context.
    """

    def __new__(
        cls,
        error_type: str,
        message_template: str,
        context: dict[str, Any] | None = None,
    ) -> FieldcheckError:
        ctx = {"package": PACKAGE_NAME, **(context or {})}
        return super().__new__(cls, error_type, message_template, ctx)

    @classmethod
    def from_pydantic_error(cls, error: PydanticCustomError) -> FieldcheckError:
        """Wrap a PydanticCustomError with package identification."""
        return FieldcheckError(error.type, error.message_template, error.context)


class FieldNotFoundError(FieldcheckError):
    """Raised by field accessors when a named field cannot be resolved.

    Covers both a missing member and a member that cannot be read as a data
    field (methods, dunder names, unsupported targets). Callers are not
    expected to tell those cases apart; ``reason`` is informational only.
    """

    def __new__(cls, field: str, reason: str = "no such field") -> FieldNotFoundError:
        return super().__new__(
            cls,
            "field_not_found",
            "could not find field '{field}'",
            {"field": field, "reason": reason},
        )

    @property
    def field(self) -> str:
        """Name of the field that could not be resolved."""
        return str((self.context or {}).get("field", ""))

    @property
    def reason(self) -> str:
        """Why the field could not be resolved."""
        return str((self.context or {}).get("reason", ""))
