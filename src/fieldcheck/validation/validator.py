"""Validator facade.

BasicValidator reads a named field through a field accessor, applies one
rule and records a message under the field name when the rule fails.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection
from typing import Any

from fieldcheck import rules
from fieldcheck.accessors.factory import AccessorFactory
from fieldcheck.config import ValidatorConfig
from fieldcheck.core.errors import FieldNotFoundError
from fieldcheck.core.violations import Violations
from fieldcheck.protocols import FieldAccessorProtocol

logger = logging.getLogger(__name__)

FIELD_NOT_FOUND_MESSAGE = "could not find field '{field}'"
PRESENT_MESSAGE = "expected {field} to be present"
EMAIL_MESSAGE = "expected '{value}' to be an email address"
INCLUSION_MESSAGE = "expected {collection} to include '{value}'"
FUNCTION_MESSAGE = (
    "expected provided function to evaluate to true when applied to input '{value}'"
)


class BasicValidator:
    """Stateful validator that accumulates violations per field.

    Each validate_* call resolves the field, applies its rule and, on
    failure, records a message under the field name and returns False.
    A field that cannot be resolved records a single "could not find
    field" message and the rule is not evaluated. No validate_* call
    raises for a missing field or a failing rule.

    Violations accumulate until clear_violations() is called. An instance
    is not safe to share between threads; use one per validation pass.

    Example:
        validator = BasicValidator()
        validator.validate_present(user, "name")
        validator.validate_email(user, "email", allow_empty=True)
        validator.validate_inclusion(user, "role", ["admin", "member"])
        if validator.violations():
            print(validator.violations().as_dict())
    """

    def __init__(
        self,
        accessor: FieldAccessorProtocol | None = None,
        config: ValidatorConfig | None = None,
    ) -> None:
        """Initialize the validator.

        Args:
            accessor: Field accessor to use. Overrides ``config.accessor``.
            config: Validator settings. Defaults to ValidatorConfig().
        """
        self._config = config or ValidatorConfig()
        self._accessor = accessor or AccessorFactory.create(self._config.accessor)
        self._violations = Violations()

    @property
    def config(self) -> ValidatorConfig:
        """Settings this validator was created with."""
        return self._config

    @property
    def accessor(self) -> FieldAccessorProtocol:
        """Field accessor used to read target fields."""
        return self._accessor

    def clear_violations(self) -> None:
        """Start a new, empty violation store.

        A store previously returned by violations() keeps its contents.
        """
        self._violations = Violations()

    def violations(self) -> Violations:
        """Violations recorded since the last clear.

        Returns the validator's own store, not a copy: later calls keep
        appending to it until clear_violations() swaps in a new one.
        """
        return self._violations

    def validate_present(self, target: Any, field: str) -> bool:
        """Check that the field is not empty.

        Args:
            target: Object holding the field.
            field: Name of the field.

        Returns:
            True if the field exists and its value is not empty.
        """
        value = self._get_value(target, field)
        if value is None:
            return False

        if not rules.must_be_present(value):
            self._append_violation(field, PRESENT_MESSAGE.format(field=field))
            return False
        return True

    def validate_email(self, target: Any, field: str, allow_empty: bool = False) -> bool:
        """Check that the field holds an email address.

        Args:
            target: Object holding the field.
            field: Name of the field.
            allow_empty: If True, an empty value passes.

        Returns:
            True if the value is an email address (or empty and allowed).
        """
        value = self._get_value(target, field)
        if value is None:
            return False

        if not rules.must_be_email(value, allow_empty):
            self._append_violation(field, EMAIL_MESSAGE.format(value=value))
            return False
        return True

    def validate_inclusion(
        self,
        target: Any,
        field: str,
        collection: Collection[Any],
        allow_empty: bool = False,
    ) -> bool:
        """Check that the field's value is one of ``collection``.

        Args:
            target: Object holding the field.
            field: Name of the field.
            collection: Allowed values, all strings or all integers.
            allow_empty: If True, an empty value passes.

        Returns:
            True if the value is included (or empty and allowed).
        """
        value = self._get_value(target, field)
        if value is None:
            return False

        if not rules.must_be_in(value, collection, allow_empty):
            if rules.classify_collection(collection) is rules.CollectionKind.UNSUPPORTED:
                logger.debug(
                    "Inclusion check on %r against unsupported collection type %s",
                    field,
                    type(next(iter(collection))).__name__,
                )
            self._append_violation(
                field,
                INCLUSION_MESSAGE.format(collection=list(collection), value=value),
            )
            return False
        return True

    def validate_with_function(
        self,
        target: Any,
        field: str,
        function: Callable[[str], bool],
        allow_empty: bool = False,
        message: str | None = None,
    ) -> bool:
        """Check the field with a caller-supplied predicate.

        Args:
            target: Object holding the field.
            field: Name of the field.
            function: Predicate called with the normalized value.
            allow_empty: If True, an empty value passes without calling ``function``.
            message: Message to record on failure instead of the default one.

        Returns:
            The predicate's result (True when short-circuited by ``allow_empty``).
        """
        value = self._get_value(target, field)
        if value is None:
            return False

        if not rules.validate_with_function(value, allow_empty, function):
            self._append_violation(field, message or FUNCTION_MESSAGE.format(value=value))
            return False
        return True

    def validate_with_message_function(
        self,
        target: Any,
        field: str,
        function: Callable[[str], tuple[bool, str]],
        allow_empty: bool = False,
    ) -> bool:
        """Check the field with a predicate that explains its own failures.

        Args:
            target: Object holding the field.
            field: Name of the field.
            function: Called with the normalized value; returns ``(ok, message)``.
            allow_empty: If True, an empty value passes without calling ``function``.

        Returns:
            The ``ok`` part of the function's result.
        """
        value = self._get_value(target, field)
        if value is None:
            return False

        ok, message = rules.validate_with_message_function(value, allow_empty, function)
        if not ok:
            if not message or message.isspace():
                message = FUNCTION_MESSAGE.format(value=value)
            self._append_violation(field, message)
            return False
        return True

    def _get_value(self, target: Any, field: str) -> str | None:
        """Resolve a field, recording a violation and returning None if it is missing."""
        try:
            return self._accessor.get_value(target, field)
        except FieldNotFoundError:
            self._append_violation(field, FIELD_NOT_FOUND_MESSAGE.format(field=field))
            return None

    def _append_violation(self, field: str, message: str) -> None:
        self._violations.record(field, message)
        if self._config.log_violations:
            logger.debug("Violation on %r: %s", field, message)
