"""Pipeline integration for Validatable objects.

Wraps the Validatable capability in an abstract_validation_base validator
so that field checks compose with other validators and report through
ValidationResult.
"""

from __future__ import annotations

import logging

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from fieldcheck.config import ValidatorConfig
from fieldcheck.protocols import FieldAccessorProtocol, Validatable
from fieldcheck.validation.validator import BasicValidator

logger = logging.getLogger(__name__)


class ValidatableValidator(BaseValidator[Validatable]):
    """Runs an object's own validate() method as a pipeline validator.

    Every call to validate() gets a fresh BasicValidator, so one
    ValidatableValidator can be reused across items and pipelines.
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        accessor: FieldAccessorProtocol | None = None,
        name: str = "validatable",
    ) -> None:
        """Initialize the adapter.

        Args:
            config: Settings for the BasicValidator created per item.
            accessor: Field accessor shared by every BasicValidator created.
            name: Name reported for this validator.
        """
        self._config = config or ValidatorConfig()
        self._accessor = accessor
        self._name = name

    @property
    def name(self) -> str:
        """Name of this validator."""
        return self._name

    def validate(self, item: Validatable) -> ValidationResult:
        """Validate an item through its own validate() method.

        Args:
            item: Object implementing the Validatable protocol.

        Returns:
            ValidationResult with one error per recorded violation message.
        """
        validator = BasicValidator(accessor=self._accessor, config=self._config)
        violations = item.validate(validator)
        logger.debug(
            "%s: %d violation(s) on %s",
            self._name,
            violations.count(),
            type(item).__name__,
        )
        return violations.to_validation_result()


def create_validation_pipeline(
    *validators: BaseValidator[Validatable],
    config: ValidatorConfig | None = None,
    name: str = "field_validation",
) -> CompositeValidator[Validatable]:
    """Create a pipeline running an object's own checks, then any extra validators.

    Args:
        *validators: Additional validators appended after the Validatable check.
        config: Settings for the Validatable check.
        name: Name of the pipeline.

    Returns:
        CompositeValidator with the Validatable check first.
    """
    builder: ValidatorPipelineBuilder[Validatable] = ValidatorPipelineBuilder(name)
    builder.add(ValidatableValidator(config=config))
    for validator in validators:
        builder.add(validator)
    return builder.build()
