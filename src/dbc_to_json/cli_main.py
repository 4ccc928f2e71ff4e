"""Command-line interface for dbc-to-json converter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from dbc_to_json import __version__
from dbc_to_json.cli.error_formatter import ErrorTable
from dbc_to_json.cli.exception_handler import handle_exceptions
from dbc_to_json.converters import DocumentWriter
from dbc_to_json.dbc import read_database
from dbc_to_json.models import ConverterConfig, load_config
from dbc_to_json.transform import SerializationResult, serialize
from dbc_to_json.validation import ModelValidator

# Create Typer app
app = typer.Typer(
    name="dbc-to-json",
    help="Convert CAN DBC databases to JSON or YAML documents.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True, style="bold red")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"dbc-to-json version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert CAN DBC databases to JSON or YAML documents.

    Messages are keyed by frame id, signals by name. Only the
    GenMsgSendType message attribute is exported unless configured
    otherwise.
    """


def _resolve_config(
    config_file: Path | None,
    **overrides: Any,
) -> ConverterConfig:
    """Load the config file (if any) and apply command-line overrides."""
    config = load_config(config_file) if config_file else ConverterConfig()
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return config
    return ConverterConfig.model_validate({**config.model_dump(), **updates})


@app.command()
@handle_exceptions
def convert(
    source: Annotated[
        Path,
        typer.Argument(
            help="Input DBC file.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    destination: Annotated[
        Path,
        typer.Argument(
            help="Output JSON/YAML file.",
        ),
    ],
    encoding: Annotated[
        str | None,
        typer.Option(
            "--encoding",
            "-e",
            help="Text encoding of the DBC file (e.g. cp1252, iso-8859-2).",
        ),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--no-strict",
            help="Reject DBC files with overlapping or oversized signals.",
        ),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format: json or yaml.",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML/JSON converter configuration file.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    check: Annotated[
        bool,
        typer.Option(
            "--check",
            help="Validate the DBC model before converting; abort on errors.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show detailed conversion progress.",
        ),
    ] = False,
) -> None:
    """Convert a DBC file to a JSON or YAML document.

    Examples
    --------
        dbc-to-json convert vehicle.dbc vehicle.json
        dbc-to-json convert vehicle.dbc vehicle.yaml --format yaml
        dbc-to-json convert legacy.dbc legacy.json --encoding iso-8859-2
        dbc-to-json convert vehicle.dbc vehicle.json --check

    """
    _configure_logging(verbose)

    config = _resolve_config(
        config_file,
        encoding=encoding,
        strict=strict,
        output_format=output_format,
    )

    console.print(f"Read input file {source}")
    db = read_database(source, encoding=config.encoding, strict=config.strict)

    if check:
        validation = ModelValidator(allowed_attributes=config.allowed_attributes)
        result = validation.validate_and_raise(db)
        if result.warnings:
            ErrorTable(error_console).print_result(result)

    serialized = serialize(db, allowed_attributes=config.allowed_attributes)

    console.print(f"Write {config.output_format.upper()} output to {destination}")
    writer = DocumentWriter(
        indent=config.indent,
        output_format=config.output_format,
        ensure_ascii=config.ensure_ascii,
    )
    writer.write(serialized.document, destination)
    console.print("[bold green]✓ Done.[/bold green]\n")

    _print_counters(serialized)


def _print_counters(result: SerializationResult) -> None:
    """Print the message, signal and bit totals of one conversion."""
    console.print(f"Number of messages: {result.message_count}")
    console.print(f"Number of signals: {result.signal_count}")
    console.print(f"Total length of signal bits: {result.total_signal_bit_length}")


@app.command()
@handle_exceptions
def validate(
    source: Annotated[
        Path,
        typer.Argument(
            help="Input DBC file to validate.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    encoding: Annotated[
        str | None,
        typer.Option(
            "--encoding",
            "-e",
            help="Text encoding of the DBC file.",
        ),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--no-strict",
            help="Reject DBC files with overlapping or oversized signals.",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML/JSON converter configuration file.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    warnings_as_errors: Annotated[
        bool,
        typer.Option(
            "--warnings-as-errors",
            help="Fail when any warning is reported.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show verbose output.",
        ),
    ] = False,
) -> None:
    """Check a DBC file for duplicate ids, duplicate names and dropped attributes.

    Examples
    --------
        dbc-to-json validate vehicle.dbc
        dbc-to-json validate vehicle.dbc --warnings-as-errors
        dbc-to-json validate legacy.dbc --no-strict --config converter.yaml

    """
    _configure_logging(verbose)

    config = _resolve_config(config_file, encoding=encoding, strict=strict)

    db = read_database(source, encoding=config.encoding, strict=config.strict)
    result = ModelValidator(allowed_attributes=config.allowed_attributes).validate(db)

    if result.issues:
        table = ErrorTable(error_console)
        table.print_result(result)
        table.print_counts(result)

    failed = not result.is_valid or (warnings_as_errors and bool(result.warnings))
    if failed:
        raise typer.Exit(code=1)

    if result.warnings:
        console.print(f"\n[bold yellow]⚠ {source.name} is valid with warnings[/bold yellow]\n")
    else:
        console.print(f"\n[bold green]✓ {source.name} is valid[/bold green]\n")


@app.command()
@handle_exceptions
def info(
    source: Annotated[
        Path,
        typer.Argument(
            help="Input DBC file to inspect.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    encoding: Annotated[
        str | None,
        typer.Option(
            "--encoding",
            "-e",
            help="Text encoding of the DBC file.",
        ),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--no-strict",
            help="Reject DBC files with overlapping or oversized signals.",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML/JSON converter configuration file.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show verbose output.",
        ),
    ] = False,
) -> None:
    """Display a summary of a DBC file without writing anything.

    Examples
    --------
        dbc-to-json info vehicle.dbc
        dbc-to-json info legacy.dbc --no-strict

    """
    _configure_logging(verbose)

    config = _resolve_config(config_file, encoding=encoding, strict=strict)

    db = read_database(source, encoding=config.encoding, strict=config.strict)
    result = serialize(db, allowed_attributes=config.allowed_attributes)

    console.print(
        Panel.fit(
            f"[bold]DBC Database[/bold]\nFile: {db.filename}",
            title="File Info",
        )
    )

    table = Table(title="Database Summary", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Version", db.version or "-")
    table.add_row("Messages", str(result.message_count))
    table.add_row("Signals", str(result.signal_count))
    table.add_row("Signal bits", str(result.total_signal_bit_length))

    console.print(table)


if __name__ == "__main__":
    app()
