"""Base validator class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dbc_to_json.ir.database import Database
    from dbc_to_json.validation.errors import ValidationResult


class BaseValidator(ABC):
    """Base class for validators."""

    @abstractmethod
    def validate(
        self,
        db: Database,
        result: ValidationResult,
    ) -> None:
        """Validate the database and add issues to result.

        Args:
        ----
            db: The database to validate.
            result: The result object to add issues to.

        """
        ...
