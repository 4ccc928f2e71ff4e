"""Read DBC files into the in-memory model.

Parsing is done by cantools; this module maps the cantools database onto
the immutable ``dbc_to_json.ir`` model.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import cantools
from cantools.database import UnsupportedDatabaseFormatError
from cantools.database.errors import Error as CantoolsError

from dbc_to_json.ir.database import Attribute, Database, Message, Signal
from dbc_to_json.ir.values import (
    AttributeValue,
    EnumValue,
    FloatValue,
    HexValue,
    IntValue,
    StringValue,
    UnknownValue,
)

logger = logging.getLogger(__name__)

EXTENDED_FRAME_FLAG = 0x80000000


class ModelUnavailable(Exception):
    """The DBC file could not be turned into a Database."""

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        encoding_problem: bool = False,
    ) -> None:
        """Initialize ModelUnavailable.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the file that caused the error.
            encoding_problem: True if the file text could not be decoded.

        """
        self.path = path
        self.encoding_problem = encoding_problem
        super().__init__(f"{path}: {message}" if path else message)


def read_database(
    path: Path | str,
    encoding: str | None = None,
    strict: bool = True,
) -> Database:
    """Read a DBC file.

    Args:
    ----
        path: Path to the DBC file.
        encoding: Text encoding of the file. None uses the cantools default.
        strict: Reject databases with overlapping or oversized signals.

    Returns:
    -------
        The database with messages and signals in file order.

    Raises:
    ------
        ModelUnavailable: If the file cannot be read or parsed.

    """
    file_path = Path(path)

    if not file_path.exists():
        raise ModelUnavailable("File not found", path)

    if not file_path.is_file():
        raise ModelUnavailable("Not a file", path)

    try:
        db = cantools.database.load_file(
            str(file_path),
            database_format="dbc",
            encoding=encoding,
            strict=strict,
            sort_signals=None,
        )
    except (UnicodeError, LookupError) as e:
        raise ModelUnavailable(f"Cannot decode file: {e}", path, encoding_problem=True) from e
    except OSError as e:
        raise ModelUnavailable(f"File read error: {e}", path) from e
    except (UnsupportedDatabaseFormatError, CantoolsError) as e:
        raise ModelUnavailable(f"DBC parsing error: {e}", path) from e

    database = Database(
        filename=str(path),
        version=db.version or "",
        messages=tuple(_convert_message(message) for message in db.messages),
    )

    logger.info(
        "Read %s: %d messages, %d signals",
        database.filename,
        database.message_count,
        database.signal_count,
    )
    return database


def _convert_message(message: Any) -> Message:
    """Convert a cantools message."""
    return Message(
        frame_id=_dbc_frame_id(message),
        name=message.name,
        length=message.length,
        attributes=_convert_attributes(message),
        signals=tuple(_convert_signal(signal) for signal in message.signals),
    )


def _dbc_frame_id(message: Any) -> int:
    """Return the identifier as written in the BO_ line.

    cantools strips bit 31, the extended-frame flag, from ``frame_id``.
    Putting it back keeps a standard and an extended frame with the same
    numeric id apart.
    """
    if message.is_extended_frame:
        return message.frame_id | EXTENDED_FRAME_FLAG
    return message.frame_id


def _convert_signal(signal: Any) -> Signal:
    """Convert a cantools signal.

    cantools reports an unspecified range ``[0|0]`` as None.
    """
    return Signal(
        name=signal.name,
        bit_start=signal.start,
        bit_length=signal.length,
        factor=float(signal.scale),
        offset=float(signal.offset),
        minimum=float(signal.minimum) if signal.minimum is not None else 0.0,
        maximum=float(signal.maximum) if signal.maximum is not None else 0.0,
        unit=signal.unit or None,
    )


def _convert_attributes(message: Any) -> tuple[Attribute, ...]:
    """Convert the explicit BA_ assignments of a message."""
    if message.dbc is None:
        return ()

    return tuple(
        Attribute(name=name, value=convert_attribute_value(attribute))
        for name, attribute in message.dbc.attributes.items()
    )


def convert_attribute_value(attribute: Any) -> AttributeValue:
    """Convert a cantools attribute to a typed value.

    The kind is taken from the attribute definition type
    (INT, HEX, FLOAT, STRING or ENUM). ENUM values are resolved to their
    label through the definition choices.

    Args:
    ----
        attribute: A cantools ``Attribute``.

    Returns:
    -------
        The typed value. UnknownValue for unrecognized types or values
        that do not fit their declared type.

    """
    definition = attribute.definition
    type_name = definition.type_name
    raw = attribute.value

    try:
        if type_name == "INT":
            return IntValue(int(raw))
        if type_name == "HEX":
            return HexValue(int(raw))
        if type_name == "FLOAT":
            return FloatValue(float(raw))
        if type_name == "STRING":
            return StringValue(str(raw))
        if type_name == "ENUM":
            return EnumValue(_enum_label(raw, definition.choices))
    except (TypeError, ValueError, IndexError) as e:
        logger.debug(
            "Attribute %s: %s value %r not convertible: %s", attribute.name, type_name, raw, e
        )

    return UnknownValue(type_name=str(type_name), value=raw)


def _enum_label(raw: Any, choices: list[str] | None) -> str:
    """Resolve an ENUM attribute value to its label."""
    if isinstance(raw, str) and not raw.lstrip("-").isdigit():
        return raw
    if not choices:
        raise ValueError("ENUM definition has no choices")
    index = int(raw)
    if index < 0:
        raise IndexError(f"ENUM index {index} out of range")
    return choices[index]
