"""CLI exception handling."""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.panel import Panel

from dbc_to_json.converters.document_writer import WriteFailure
from dbc_to_json.dbc.reader import ModelUnavailable
from dbc_to_json.models.loader import ConfigError
from dbc_to_json.validation.validator import ModelValidationError

T = TypeVar("T")

console = Console(stderr=True)


def handle_exceptions(func: Callable[..., T]) -> Callable[..., T]:
    """Handle exceptions in CLI commands with formatted output.

    A ``verbose`` keyword argument of the wrapped command enables full
    tracebacks for unexpected errors.

    Args:
    ----
        func: The command function.

    Returns:
    -------
        Wrapped command that exits with status 1 on failure.

    """

    @wraps(func)
    def wrapper(*args: object, **kwargs: object) -> T:
        verbose = bool(kwargs.get("verbose", False))
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except ModelUnavailable as e:
            _handle_model_unavailable(e)
            raise typer.Exit(1) from None
        except WriteFailure as e:
            _handle_write_failure(e)
            raise typer.Exit(1) from None
        except ModelValidationError as e:
            _handle_validation_error(e)
            raise typer.Exit(1) from None
        except ConfigError as e:
            _handle_config_error(e)
            raise typer.Exit(1) from None
        except PydanticValidationError as e:
            _handle_pydantic_error(e)
            raise typer.Exit(1) from None
        except Exception as e:
            _handle_generic_error(e, verbose)
            raise typer.Exit(1) from None

    return wrapper


def _handle_model_unavailable(error: ModelUnavailable) -> None:
    """Handle DBC read failures."""
    text = f"[red]Cannot read DBC file: {error}[/red]"
    if error.encoding_problem:
        text += (
            "\n\nIf your input file is not UTF-8 or CP1252 encoded, "
            "pass its encoding, e.g. --encoding iso-8859-2"
        )
    console.print(Panel(text, title="Error", border_style="red"))


def _handle_write_failure(error: WriteFailure) -> None:
    """Handle output write failures."""
    console.print(
        Panel(
            f"[red]Unable to generate file: {error}[/red]\n\n"
            "Check the output path and permissions and try again.",
            title="Error",
            border_style="red",
        )
    )


def _handle_validation_error(error: ModelValidationError) -> None:
    """Handle input model validation failures."""
    from dbc_to_json.cli.error_formatter import ErrorTable

    console.print(f"[red bold]{error}[/red bold]")
    ErrorTable(console).print_result(error.result)


def _handle_config_error(error: ConfigError) -> None:
    """Handle configuration file load failures."""
    console.print(
        Panel(f"[red]Invalid configuration: {error}[/red]", title="Error", border_style="red")
    )


def _handle_pydantic_error(error: PydanticValidationError) -> None:
    """Handle configuration schema errors."""
    console.print("[red bold]Configuration Validation Failed[/red bold]")
    console.print()

    for err in error.errors():
        location = ".".join(str(x) for x in err["loc"]) or "(root)"
        console.print(f"[red]✗[/red] {location}")
        console.print(f"  {err['msg']}")
        console.print(f"  [dim]({err['type']})[/dim]")
        console.print()


def _handle_generic_error(error: Exception, verbose: bool) -> None:
    """Handle unexpected errors."""
    console.print(
        Panel(
            f"[red]An unexpected error occurred:[/red]\n{error}",
            title="Error",
            border_style="red",
        )
    )

    if verbose:
        console.print("\n[dim]Traceback:[/dim]")
        console.print(traceback.format_exc())
    else:
        console.print("\n[dim]Use --verbose for full traceback[/dim]")
