"""Main validator combining all validation rules."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from dbc_to_json.transform.serializer import ALLOWED_ATTRIBUTES
from dbc_to_json.validation.base import BaseValidator
from dbc_to_json.validation.errors import ValidationResult
from dbc_to_json.validation.model_validators import (
    AllowedAttributeValidator,
    EmptyMessageValidator,
    UniqueMessageIdValidator,
    UniqueSignalNameValidator,
)

if TYPE_CHECKING:
    from dbc_to_json.ir.database import Database


class ModelValidator:
    """Main validator for DBC models."""

    def __init__(
        self,
        warnings_as_errors: bool = False,
        allowed_attributes: Iterable[str] = ALLOWED_ATTRIBUTES,
    ) -> None:
        """Initialize validator.

        Args:
        ----
            warnings_as_errors: Raise from validate_and_raise on warnings too.
            allowed_attributes: Attribute names the serializer emits.

        """
        self.warnings_as_errors = warnings_as_errors
        self.validators: list[BaseValidator] = [
            UniqueMessageIdValidator(),
            UniqueSignalNameValidator(),
            AllowedAttributeValidator(allowed_attributes),
            EmptyMessageValidator(),
        ]

    def validate(self, db: Database) -> ValidationResult:
        """Validate a database.

        Args:
        ----
            db: The database to validate.

        Returns:
        -------
            ValidationResult with all issues found.

        """
        result = ValidationResult()
        for validator in self.validators:
            validator.validate(db, result)
        return result

    def validate_and_raise(self, db: Database) -> ValidationResult:
        """Validate and raise exception if invalid.

        Args:
        ----
            db: The database to validate.

        Returns:
        -------
            The ValidationResult, if it passed.

        Raises:
        ------
            ModelValidationError: If validation fails.

        """
        result = self.validate(db)

        if not result.is_valid:
            raise ModelValidationError(result)

        if self.warnings_as_errors and result.warnings:
            raise ModelValidationError(result)

        return result


class ModelValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, result: ValidationResult) -> None:
        """Initialize with validation result.

        Args:
        ----
            result: The validation result containing issues.

        """
        self.result = result
        error_count = len(result.errors)
        warning_count = len(result.warnings)

        parts = []
        if error_count:
            parts.append(f"{error_count} error(s)")
        if warning_count:
            parts.append(f"{warning_count} warning(s)")

        message = f"Validation failed: {', '.join(parts)}"
        super().__init__(message)
