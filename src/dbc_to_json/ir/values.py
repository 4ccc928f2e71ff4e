"""Typed attribute values.

An attribute carries exactly one value of one of five kinds. Each kind is
its own frozen dataclass so that code dispatching on the kind can use
``isinstance`` checks, and type checkers can verify the union is handled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class IntValue:
    """Signed integer attribute value (DBC ``INT``)."""

    value: int


@dataclass(frozen=True)
class FloatValue:
    """Double-precision attribute value (DBC ``FLOAT``)."""

    value: float


@dataclass(frozen=True)
class StringValue:
    """Free text attribute value (DBC ``STRING``)."""

    value: str


@dataclass(frozen=True)
class EnumValue:
    """Enumeration attribute value, stored as its resolved label (DBC ``ENUM``)."""

    value: str


@dataclass(frozen=True)
class HexValue:
    """Unsigned integer attribute value declared as ``HEX`` in the DBC."""

    value: int

    def __post_init__(self) -> None:
        """Reject negative values."""
        if self.value < 0:
            raise ValueError(f"HEX attribute value must be unsigned, got {self.value}")


@dataclass(frozen=True)
class UnknownValue:
    """Attribute value of a kind the converter does not recognize.

    Attributes
    ----------
        type_name: The source type name (e.g. the DBC attribute definition type).
        value: The raw value as delivered by the reader.

    """

    type_name: str
    value: Any = None


AttributeValue = Union[IntValue, FloatValue, StringValue, EnumValue, HexValue, UnknownValue]
