"""fieldcheck: field-by-field validation of arbitrary objects.

Domain objects implement a ``validate(validator)`` method and call the
validator once per field and rule. Failed checks are collected as
human-readable messages keyed by field name.

Quick Start:
    >>> from fieldcheck import BasicValidator
    >>> class Signup:
    ...     def __init__(self, email, plan):
    ...         self.email = email
    ...         self.plan = plan
    ...
    ...     def validate(self, validator):
    ...         validator.validate_present(self, "email")
    ...         validator.validate_email(self, "email")
    ...         validator.validate_inclusion(self, "plan", ["free", "pro"])
    ...         return validator.violations()
    >>> violations = Signup("someone@example.com", "gold").validate(BasicValidator())
    >>> violations.as_dict()
    {'plan': ["expected ['free', 'pro'] to include 'gold'"]}

    # Dicts work too, and so do explicitly registered accessors
    >>> from fieldcheck import RegisteredAccessor
    >>> validator = BasicValidator(accessor=RegisteredAccessor({Signup: {"plan": lambda s: s.plan}}))

    # Plug Validatable objects into a validator pipeline
    >>> from fieldcheck import create_validation_pipeline
    >>> pipeline = create_validation_pipeline()
    >>> pipeline.validate(Signup("someone@example.com", "pro")).is_valid
    True
"""

from __future__ import annotations

from abstract_validation_base import ValidationError, ValidationResult

from fieldcheck.accessors import (
    AccessorFactory,
    AttributeAccessor,
    AutoAccessor,
    BaseFieldAccessor,
    MappingAccessor,
    RegisteredAccessor,
    normalize_value,
)
from fieldcheck.config import ValidatorConfig
from fieldcheck.core import (
    PACKAGE_NAME,
    FieldcheckError,
    FieldNotFoundError,
    PluginFactory,
    Violations,
)
from fieldcheck.protocols import FieldAccessorProtocol, Validatable, ValidatorProtocol
from fieldcheck.rules import (
    EMAIL_PATTERN,
    CollectionKind,
    classify_collection,
    must_be_email,
    must_be_in,
    must_be_present,
    validate_with_function,
    validate_with_message_function,
)
from fieldcheck.validation import (
    BasicValidator,
    ValidatableValidator,
    create_validation_pipeline,
)

__version__ = "0.1.0"

__all__ = [
    # Validator
    "BasicValidator",
    "ValidatorConfig",
    "Violations",
    # Protocols
    "FieldAccessorProtocol",
    "Validatable",
    "ValidatorProtocol",
    # Accessors
    "AccessorFactory",
    "AttributeAccessor",
    "AutoAccessor",
    "BaseFieldAccessor",
    "MappingAccessor",
    "RegisteredAccessor",
    "normalize_value",
    # Rules
    "EMAIL_PATTERN",
    "CollectionKind",
    "classify_collection",
    "must_be_email",
    "must_be_in",
    "must_be_present",
    "validate_with_function",
    "validate_with_message_function",
    # Pipelines
    "ValidatableValidator",
    "create_validation_pipeline",
    "ValidationError",
    "ValidationResult",
    # Errors
    "PACKAGE_NAME",
    "FieldcheckError",
    "FieldNotFoundError",
    "PluginFactory",
]
