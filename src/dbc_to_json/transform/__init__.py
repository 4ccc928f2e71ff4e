"""DBC model to document transformation.

This package handles the serialization stage of the pipeline:
walking the in-memory DBC model and building the output document.

Primary Classes:
    DocumentSerializer: Walks a Database and builds its document
    SerializationResult: Document plus message/signal/bit counters

Functions:
    serialize: Serialize a database with default settings
    format_value: Convert one attribute value to text
"""

from dbc_to_json.transform.serializer import (
    ALLOWED_ATTRIBUTES,
    Document,
    DocumentSerializer,
    SerializationResult,
    serialize,
)
from dbc_to_json.transform.value_formatter import format_float, format_value

__all__ = [
    "ALLOWED_ATTRIBUTES",
    "Document",
    "DocumentSerializer",
    "SerializationResult",
    "format_float",
    "format_value",
    "serialize",
]
