"""In-memory DBC model.

The model sits between the DBC reader and the document serializer:

1. Uses frozen dataclasses, so a database cannot change during a walk
2. Keeps messages, signals and attributes as tuples in source order
3. Represents attribute values as one dataclass per value kind
"""

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

__all__ = [
    # Model
    "Database",
    "Message",
    "Signal",
    "Attribute",
    # Values
    "AttributeValue",
    "IntValue",
    "FloatValue",
    "StringValue",
    "EnumValue",
    "HexValue",
    "UnknownValue",
]
