"""fieldcheck core - errors, plugin registry and the violation store.

Usage:
    from fieldcheck.core import (
        FieldcheckError,
        FieldNotFoundError,
        PluginFactory,
        Violations,
    )
"""

from __future__ import annotations

from fieldcheck.core.errors import PACKAGE_NAME, FieldcheckError, FieldNotFoundError
from fieldcheck.core.factory import PluginFactory
from fieldcheck.core.violations import Violations

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "FieldcheckError",
    "FieldNotFoundError",
    # Factory
    "PluginFactory",
    # Violation store
    "Violations",
]
