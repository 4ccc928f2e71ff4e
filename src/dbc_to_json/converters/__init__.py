"""Converters for writing serialized documents.

Output Formats:
    - "json": Pretty-printed JSON, 4-space indentation by default
    - "yaml": Block-style YAML with the same key order

Example:
-------
    >>> from dbc_to_json.converters import DocumentWriter
    >>> from dbc_to_json.transform import serialize
    >>>
    >>> result = serialize(db)
    >>> DocumentWriter().write(result.document, "output.json")
    >>>
    >>> # YAML output
    >>> DocumentWriter(output_format="yaml").write(result.document, "output.yaml")

"""

from dbc_to_json.converters.document_writer import (
    OUTPUT_FORMATS,
    DocumentWriter,
    WriteFailure,
)

__all__ = [
    "OUTPUT_FORMATS",
    "DocumentWriter",
    "WriteFailure",
]
