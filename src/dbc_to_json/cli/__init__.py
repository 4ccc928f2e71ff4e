"""CLI helpers for dbc-to-json.

The typer application itself lives in ``dbc_to_json.cli_main``.
"""

from dbc_to_json.cli.error_formatter import ErrorTable
from dbc_to_json.cli.exception_handler import handle_exceptions

__all__ = [
    "ErrorTable",
    "handle_exceptions",
]
