"""Validator configuration."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

ACCESSOR_ENV = "FIELDCHECK_ACCESSOR"
LOG_VIOLATIONS_ENV = "FIELDCHECK_LOG_VIOLATIONS"

_FALSE_FLAGS = {"0", "false", "no"}


class ValidatorConfig(BaseModel):
    """Settings for BasicValidator.

    Example:
        config = ValidatorConfig(accessor="mapping")
        validator = BasicValidator(config=config)

        # Or from FIELDCHECK_ACCESSOR / FIELDCHECK_LOG_VIOLATIONS
        validator = BasicValidator(config=ValidatorConfig.from_env())
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    accessor: str = Field(
        default="auto",
        min_length=1,
        description="Name of the AccessorFactory type used to read fields.",
    )
    log_violations: bool = Field(
        default=True,
        description="Log every recorded violation at DEBUG level.",
    )

    @classmethod
    def from_env(cls) -> ValidatorConfig:
        """Build a config from environment variables, falling back to defaults."""
        accessor = os.getenv(ACCESSOR_ENV, "").strip() or "auto"
        flag = os.getenv(LOG_VIOLATIONS_ENV, "1").strip().lower()
        return cls(accessor=accessor, log_violations=flag not in _FALSE_FLAGS)
