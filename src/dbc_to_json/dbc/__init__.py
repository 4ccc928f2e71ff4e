"""DBC file reading."""

from dbc_to_json.dbc.reader import ModelUnavailable, convert_attribute_value, read_database

__all__ = [
    "ModelUnavailable",
    "convert_attribute_value",
    "read_database",
]
