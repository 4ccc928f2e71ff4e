"""In-memory model of a CAN database.

The reader builds these objects once from a DBC file; the serializer and
validators only read them. All sequences are tuples in source order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dbc_to_json.ir.values import AttributeValue


@dataclass(frozen=True)
class Attribute:
    """A named, typed metadata value attached to a message."""

    name: str
    value: AttributeValue


@dataclass(frozen=True)
class Signal:
    """A named bit field within a message payload.

    Attributes
    ----------
        name: Signal name, unique within its message.
        bit_start: Start bit position as written in the DBC.
        bit_length: Number of bits.
        factor: The 'a' coefficient in physical = a * raw + b.
        offset: The 'b' coefficient in physical = a * raw + b.
        minimum: Minimum physical value.
        maximum: Maximum physical value.
        unit: Physical unit (e.g. "rpm"), None if the signal has none.

    """

    name: str
    bit_start: int
    bit_length: int
    factor: float = 1.0
    offset: float = 0.0
    minimum: float = 0.0
    maximum: float = 0.0
    unit: str | None = None


@dataclass(frozen=True)
class Message:
    """A CAN frame definition."""

    frame_id: int
    name: str
    length: int  # bytes
    attributes: tuple[Attribute, ...] = ()
    signals: tuple[Signal, ...] = ()

    def get_signal(self, name: str) -> Signal | None:
        """Get a signal by name.

        Args:
        ----
            name: The signal name.

        Returns:
        -------
            The first signal with that name, None otherwise.

        """
        for signal in self.signals:
            if signal.name == name:
                return signal
        return None


@dataclass(frozen=True)
class Database:
    """Complete CAN database as read from one DBC file.

    Attributes
    ----------
        filename: Path of the source file, as given to the reader.
        version: Content of the DBC ``VERSION`` statement.
        messages: Message definitions in file order.

    """

    filename: str
    version: str
    messages: tuple[Message, ...] = ()

    @property
    def message_count(self) -> int:
        """Number of messages in the database."""
        return len(self.messages)

    @property
    def signal_count(self) -> int:
        """Number of signals across all messages."""
        return sum(len(message.signals) for message in self.messages)

    def get_message(self, frame_id: int) -> Message | None:
        """Get a message by frame identifier.

        Args:
        ----
            frame_id: The numeric CAN identifier.

        Returns:
        -------
            The first message with that identifier, None otherwise.

        """
        for message in self.messages:
            if message.frame_id == frame_id:
                return message
        return None
