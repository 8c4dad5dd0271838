from __future__ import annotations

from collections.abc import Callable, Collection
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fieldcheck.core.violations import Violations


@runtime_checkable
class FieldAccessorProtocol(Protocol):
    """Protocol for reading a named field from an arbitrary target.

    Implementations resolve the field and return its string-normalized
    value, raising FieldNotFoundError when the field cannot be resolved.
    """

    def get_value(self, target: Any, field: str) -> str:
        """Get the normalized value of a field.

        Args:
            target: Object to read from. Never modified.
            field: Name of the field.

        Returns:
            The field's value normalized to a string.

        Raises:
            FieldNotFoundError: If the field does not exist on the target.
        """
        ...


@runtime_checkable
class ValidatorProtocol(Protocol):
    """Protocol for the validator handed to Validatable objects.

    Every validate_* method returns True when the field passes and
    otherwise records a message under the field name and returns False.
    """

    def clear_violations(self) -> None:
        """Start a fresh, empty violation store."""
        ...

    def violations(self) -> Violations:
        """Violations recorded since the last clear."""
        ...

    def validate_present(self, target: Any, field: str) -> bool:
        """Check that the field is not empty."""
        ...

    def validate_email(self, target: Any, field: str, allow_empty: bool = False) -> bool:
        """Check that the field holds an email address."""
        ...

    def validate_inclusion(
        self,
        target: Any,
        field: str,
        collection: Collection[Any],
        allow_empty: bool = False,
    ) -> bool:
        """Check that the field's value is one of ``collection``."""
        ...

    def validate_with_function(
        self,
        target: Any,
        field: str,
        function: Callable[[str], bool],
        allow_empty: bool = False,
        message: str | None = None,
    ) -> bool:
        """Check the field with a caller-supplied predicate."""
        ...

    def validate_with_message_function(
        self,
        target: Any,
        field: str,
        function: Callable[[str], tuple[bool, str]],
        allow_empty: bool = False,
    ) -> bool:
        """Check the field with a predicate that also returns its own message."""
        ...


@runtime_checkable
class Validatable(Protocol):
    """Protocol for domain objects that know how to validate themselves.

    The object decides which fields and rules to check, calls the
    validator once per check, and returns the validator's violations.

    Example:
        class SignupForm:
            def __init__(self, email: str, plan: str) -> None:
                self.email = email
                self.plan = plan

            def validate(self, validator: ValidatorProtocol) -> Violations:
                validator.validate_email(self, "email")
                validator.validate_inclusion(self, "plan", ["free", "pro"])
                return validator.violations()
    """

    def validate(self, validator: ValidatorProtocol) -> Violations:
        """Run this object's checks against ``validator``."""
        ...
