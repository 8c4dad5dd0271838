"""Field validation.

BasicValidator is the entry point used by Validatable objects; the
adapter module plugs those objects into validator pipelines.
"""

from fieldcheck.validation.adapter import ValidatableValidator, create_validation_pipeline
from fieldcheck.validation.validator import (
    EMAIL_MESSAGE,
    FIELD_NOT_FOUND_MESSAGE,
    FUNCTION_MESSAGE,
    INCLUSION_MESSAGE,
    PRESENT_MESSAGE,
    BasicValidator,
)

__all__ = [
    "BasicValidator",
    "ValidatableValidator",
    "create_validation_pipeline",
    "EMAIL_MESSAGE",
    "FIELD_NOT_FOUND_MESSAGE",
    "FUNCTION_MESSAGE",
    "INCLUSION_MESSAGE",
    "PRESENT_MESSAGE",
]
