"""Validation issue types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    """A problem found in a DBC model."""

    code: str
    message: str
    severity: ValidationSeverity
    path: str
    """Document path of the affected entry (e.g. 'messages.100.signals.RPM')."""
    suggestion: str | None = None

    def __str__(self) -> str:
        """Format issue as string."""
        text = f"[{self.code}] {self.severity.value.upper()} {self.message} at {self.path}"
        if self.suggestion:
            text += f" (hint: {self.suggestion})"
        return text


@dataclass
class ValidationResult:
    """Issues collected by one validation run."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get only error-level issues."""
        return [i for i in self.issues if i.severity is ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get only warning-level issues."""
        return [i for i in self.issues if i.severity is ValidationSeverity.WARNING]

    @property
    def is_valid(self) -> bool:
        """Check if there are no errors (warnings are OK)."""
        return not self.errors

    def add_error(self, code: str, message: str, path: str, suggestion: str | None = None) -> None:
        """Record an error at a document path."""
        self.issues.append(
            ValidationIssue(code, message, ValidationSeverity.ERROR, path, suggestion)
        )

    def add_warning(
        self, code: str, message: str, path: str, suggestion: str | None = None
    ) -> None:
        """Record a warning at a document path."""
        self.issues.append(
            ValidationIssue(code, message, ValidationSeverity.WARNING, path, suggestion)
        )


class ErrorCodes:
    """Validation codes for DBC models."""

    # E1xx - entries the serializer would overwrite
    E100_DUPLICATE_MESSAGE_ID = "E100"
    E101_DUPLICATE_SIGNAL_NAME = "E101"

    # W0xx - entries that are dropped or look incomplete
    W001_DUPLICATE_ATTRIBUTE = "W001"
    W002_UNFORMATTABLE_ATTRIBUTE = "W002"
    W003_MESSAGE_WITHOUT_SIGNALS = "W003"
