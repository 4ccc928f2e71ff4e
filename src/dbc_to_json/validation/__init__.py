"""Validation module for DBC models."""

from dbc_to_json.validation.errors import (
    ErrorCodes,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)
from dbc_to_json.validation.validator import (
    ModelValidationError,
    ModelValidator,
)

__all__ = [
    "ErrorCodes",
    "ModelValidationError",
    "ModelValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
]
