"""dbc-to-json: Converter from CAN DBC databases to structured JSON/YAML documents.

This package provides tools for:
- Reading DBC files into an in-memory model (via cantools)
- Serializing the model into a canonical nested document
- Writing the document as pretty-printed JSON or YAML

Quick Start:
    >>> from dbc_to_json.dbc import read_database
    >>> from dbc_to_json.transform import serialize
    >>> from dbc_to_json.converters import DocumentWriter
    >>>
    >>> db = read_database("vehicle.dbc")
    >>> result = serialize(db)
    >>> DocumentWriter().write(result.document, "vehicle.json")

Modules:
    ir: Immutable in-memory DBC model (database, messages, signals, attributes)
    dbc: DBC file reader
    transform: Value formatting and document serialization
    converters: Document writer
    models: Pydantic models for converter configuration
    validation: Semantic checks on the input model
    cli: Command-line interface
"""

__version__ = "0.1.0"
