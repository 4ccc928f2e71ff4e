"""Serialize a DBC model into a nested document.

The document is a plain dict tree ready for JSON/YAML output::

    {
        "filename": ...,
        "version": ...,
        "messages": {
            "<frame id>": {
                "name": ...,
                "length": ...,
                "attributes": {"GenMsgSendType": ...},
                "signals": {"<signal name>": {...}, ...},
            },
            ...
        },
    }

Dict insertion order follows message and signal order in the database.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from dbc_to_json.ir.database import Database, Message, Signal
from dbc_to_json.transform.value_formatter import format_value

logger = logging.getLogger(__name__)

# Only these message attributes are copied into the document.
ALLOWED_ATTRIBUTES: frozenset[str] = frozenset({"GenMsgSendType"})

Document = dict[str, Any]


@dataclass(frozen=True)
class SerializationResult:
    """Result of serializing one database.

    Attributes
    ----------
        document: The nested document.
        message_count: Number of messages visited.
        signal_count: Number of signals visited across all messages.
        total_signal_bit_length: Sum of the bit lengths of all visited signals.

    """

    document: Document
    message_count: int
    signal_count: int
    total_signal_bit_length: int


@dataclass
class _WalkCounters:
    messages: int = 0
    signals: int = 0
    signal_bits: int = 0


class DocumentSerializer:
    """Walk a Database and build its document.

    Counters are kept per call to ``serialize``, so one instance can be
    reused and shared between threads.

    Usage:
        serializer = DocumentSerializer()
        result = serializer.serialize(database)
    """

    def __init__(self, allowed_attributes: Iterable[str] = ALLOWED_ATTRIBUTES) -> None:
        """Initialize the serializer.

        Args:
        ----
            allowed_attributes: Names of message attributes to emit. Matching
                is exact and case-sensitive.

        """
        self._allowed_attributes = frozenset(allowed_attributes)

    @property
    def allowed_attributes(self) -> frozenset[str]:
        """Attribute names copied into the document."""
        return self._allowed_attributes

    def serialize(self, database: Database) -> SerializationResult:
        """Serialize a database.

        Args:
        ----
            database: The DBC model to serialize.

        Returns:
        -------
            SerializationResult with the document and walk counters.

        """
        counters = _WalkCounters()

        messages: Document = {}
        for message in database.messages:
            messages[str(message.frame_id)] = self._serialize_message(message, counters)
            counters.messages += 1

        document: Document = {
            "filename": database.filename,
            "version": database.version,
            "messages": messages,
        }

        logger.debug(
            "Serialized %s: %d messages, %d signals, %d signal bits",
            database.filename,
            counters.messages,
            counters.signals,
            counters.signal_bits,
        )

        return SerializationResult(
            document=document,
            message_count=counters.messages,
            signal_count=counters.signals,
            total_signal_bit_length=counters.signal_bits,
        )

    def _serialize_message(self, message: Message, counters: _WalkCounters) -> Document:
        """Serialize one message and its signals."""
        return {
            "name": message.name,
            "length": message.length,
            "attributes": self._serialize_attributes(message),
            "signals": self._serialize_signals(message.signals, counters),
        }

    def _serialize_attributes(self, message: Message) -> dict[str, str]:
        """Serialize allowed attributes; a repeated name keeps the last value."""
        result: dict[str, str] = {}

        for attribute in message.attributes:
            if attribute.name not in self._allowed_attributes:
                continue

            text = format_value(attribute.value)
            if text is None:
                logger.warning(
                    "Message %s (%d): attribute %s has an unrecognized value kind, omitted",
                    message.name,
                    message.frame_id,
                    attribute.name,
                )
                continue

            result[attribute.name] = text

        return result

    def _serialize_signals(
        self, signals: Iterable[Signal], counters: _WalkCounters
    ) -> dict[str, Document]:
        """Serialize signals keyed by name and update the counters."""
        result: dict[str, Document] = {}

        for signal in signals:
            result[signal.name] = self._serialize_signal(signal)
            counters.signals += 1
            counters.signal_bits += signal.bit_length

        return result

    @staticmethod
    def _serialize_signal(signal: Signal) -> Document:
        """Serialize a single signal."""
        data: Document = {
            "bit_start": int(signal.bit_start),
            "length": int(signal.bit_length),
            "factor": float(signal.factor),
            "offset": float(signal.offset),
            "min": float(signal.minimum),
            "max": float(signal.maximum),
        }
        if signal.unit is not None:
            data["unit"] = signal.unit
        return data


def serialize(
    database: Database,
    allowed_attributes: Iterable[str] = ALLOWED_ATTRIBUTES,
) -> SerializationResult:
    """Serialize a database with a fresh DocumentSerializer.

    Args:
    ----
        database: The DBC model to serialize.
        allowed_attributes: Names of message attributes to emit.

    Returns:
    -------
        SerializationResult with the document and walk counters.

    """
    return DocumentSerializer(allowed_attributes).serialize(database)
