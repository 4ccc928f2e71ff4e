"""Validators for input invariants the serializer relies on.

The serializer keys messages by frame id and signals by name, so
duplicates silently overwrite earlier entries. These checks make such
inputs visible before conversion.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import TYPE_CHECKING

from dbc_to_json.transform.serializer import ALLOWED_ATTRIBUTES
from dbc_to_json.transform.value_formatter import format_value
from dbc_to_json.validation.base import BaseValidator
from dbc_to_json.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from dbc_to_json.ir.database import Database


class UniqueMessageIdValidator(BaseValidator):
    """Validates that frame ids are unique across the database."""

    def validate(self, db: Database, result: ValidationResult) -> None:
        """Check for repeated frame ids."""
        counts = Counter(message.frame_id for message in db.messages)

        for frame_id, count in counts.items():
            if count > 1:
                names = [m.name for m in db.messages if m.frame_id == frame_id]
                result.add_error(
                    code=ErrorCodes.E100_DUPLICATE_MESSAGE_ID,
                    message=(
                        f"Frame id {frame_id} is used by {count} messages: {', '.join(names)}"
                    ),
                    path=f"messages.{frame_id}",
                    suggestion="Only the last message with this id appears in the output",
                )


class UniqueSignalNameValidator(BaseValidator):
    """Validates that signal names are unique within each message."""

    def validate(self, db: Database, result: ValidationResult) -> None:
        """Check for repeated signal names."""
        for message in db.messages:
            counts = Counter(signal.name for signal in message.signals)
            for name, count in counts.items():
                if count > 1:
                    result.add_error(
                        code=ErrorCodes.E101_DUPLICATE_SIGNAL_NAME,
                        message=(
                            f"Signal '{name}' appears {count} times in message "
                            f"'{message.name}'"
                        ),
                        path=f"messages.{message.frame_id}.signals.{name}",
                    )


class AllowedAttributeValidator(BaseValidator):
    """Validates the attributes that will be copied into the document."""

    def __init__(self, allowed_attributes: Iterable[str] = ALLOWED_ATTRIBUTES) -> None:
        """Initialize validator.

        Args:
        ----
            allowed_attributes: Attribute names the serializer emits.

        """
        self.allowed_attributes = frozenset(allowed_attributes)

    def validate(self, db: Database, result: ValidationResult) -> None:
        """Check for repeated or unformattable allowed attributes."""
        for message in db.messages:
            seen: set[str] = set()
            for attribute in message.attributes:
                if attribute.name not in self.allowed_attributes:
                    continue

                path = f"messages.{message.frame_id}.attributes.{attribute.name}"

                if attribute.name in seen:
                    result.add_warning(
                        code=ErrorCodes.W001_DUPLICATE_ATTRIBUTE,
                        message=(
                            f"Attribute '{attribute.name}' is set more than once on "
                            f"message '{message.name}'"
                        ),
                        path=path,
                        suggestion="The last value is used",
                    )
                seen.add(attribute.name)

                if format_value(attribute.value) is None:
                    result.add_warning(
                        code=ErrorCodes.W002_UNFORMATTABLE_ATTRIBUTE,
                        message=(
                            f"Attribute '{attribute.name}' on message '{message.name}' "
                            f"has an unrecognized value kind and will be omitted"
                        ),
                        path=path,
                        suggestion=f"Value {attribute.value!r} has no text form",
                    )


class EmptyMessageValidator(BaseValidator):
    """Reports messages that define no signals."""

    def validate(self, db: Database, result: ValidationResult) -> None:
        """Check for messages without signals."""
        for message in db.messages:
            if not message.signals:
                result.add_warning(
                    code=ErrorCodes.W003_MESSAGE_WITHOUT_SIGNALS,
                    message=f"Message '{message.name}' has no signals",
                    path=f"messages.{message.frame_id}",
                )
