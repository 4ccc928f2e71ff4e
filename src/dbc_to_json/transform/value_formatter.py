"""Convert typed attribute values to their text form."""

from __future__ import annotations

import logging

from dbc_to_json.ir.values import (
    AttributeValue,
    EnumValue,
    FloatValue,
    HexValue,
    IntValue,
    StringValue,
)

logger = logging.getLogger(__name__)


def format_float(value: float) -> str:
    """Format a float as the shortest text that reads back to the same value.

    Uses general notation, so integral values carry no decimal point.

    Examples:
    --------
        >>> format_float(2.5)
        '2.5'
        >>> format_float(10.0)
        '10'
        >>> format_float(1e16)
        '1e+16'

    """
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_value(value: AttributeValue) -> str | None:
    """Convert an attribute value to text.

    HEX values are rendered in decimal, not with a ``0x`` prefix.

    Args:
    ----
        value: The attribute value.

    Returns:
    -------
        The text form, or None if the value kind is not recognized.

    """
    if isinstance(value, IntValue):
        return str(value.value)
    if isinstance(value, FloatValue):
        return format_float(value.value)
    if isinstance(value, (StringValue, EnumValue)):
        return value.value
    if isinstance(value, HexValue):
        return str(value.value)

    logger.debug("No text form for attribute value %r", value)
    return None
