"""
kafkaerr Typer CLI Application

Command-line access to the error code table and the legacy bridge:
- describe: show the name and description of a code
- list: print the code table
- legacy: run an error value through the (code, buffer) bridge
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from kafkaerr.config import get_config
from kafkaerr.shared.constants import Application, CLIDefaults
from kafkaerr.shared.error_codes import Code, parse_code
from kafkaerr.shared.error_messages import describe, get_error_descriptions, name
from kafkaerr.shared.errors import KafkaErrorFault, new
from kafkaerr.shared.legacy import legacy_errstr, new_errstr_buffer, to_legacy
from kafkaerr.shared.logging import log_fault, setup_from_settings

logger = logging.getLogger(__name__)

console = Console()


class LogLevel(str, Enum):
    """Log levels accepted on the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class CodeRange(str, Enum):
    """Subset of the code table to list."""

    ALL = "all"
    LOCAL = "local"
    BROKER = "broker"


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(f"{Application.NAME} {Application.VERSION}")
        raise typer.Exit


def _parse_code_or_exit(token: str) -> Code:
    try:
        return parse_code(token)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(CLIDefaults.EXIT_USAGE) from e


app = typer.Typer(
    name=Application.NAME,
    help="Inspect Kafka client error codes and the legacy error bridge.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Annotated[
        LogLevel,
        typer.Option("--log-level", help="Logging level", case_sensitive=False),
    ] = LogLevel.WARNING,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Configure logging before any command runs."""
    try:
        settings = get_config()
    except KafkaErrorFault as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(CLIDefaults.EXIT_ERROR) from e

    logging_settings = settings.logging.model_copy(update={"level": log_level.value})
    setup_from_settings(logging_settings)


@app.command("describe")
def describe_command(
    code: Annotated[str, typer.Argument(help="Numeric code or symbolic name")],
) -> None:
    """
    Show the symbolic name and default description of an error code.

    Examples:
        kafkaerr describe -- -185
        kafkaerr describe _TIMED_OUT
        kafkaerr describe ERR_UNKNOWN_TOPIC_OR_PART
    """
    parsed = _parse_code_or_exit(code)
    typer.echo(f"{int(parsed)}\t{name(parsed)}\t{describe(parsed)}")


@app.command("list")
def list_command(
    code_range: Annotated[
        CodeRange,
        typer.Option("--range", help="Which codes to list", case_sensitive=False),
    ] = CodeRange.ALL,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output results in JSON format")
    ] = False,
) -> None:
    """List known error codes with their names and descriptions."""
    rows = [
        row
        for row in get_error_descriptions()
        if code_range is CodeRange.ALL
        or (code_range is CodeRange.LOCAL) == row.code.is_local
    ]

    if json_output:
        payload = [
            {"code": int(row.code), "name": row.name, "desc": row.desc} for row in rows
        ]
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(title="Kafka error codes")
    table.add_column("Code", justify="right")
    table.add_column("Name")
    table.add_column("Description")
    for row in rows:
        table.add_row(str(int(row.code)), row.name, row.desc)
    console.print(table)


@app.command("legacy")
def legacy_command(
    code: Annotated[str, typer.Argument(help="Numeric code or symbolic name")],
    message: Annotated[
        Optional[str],
        typer.Option("--message", "-m", help="Detail message (printf-style)"),
    ] = None,
    size: Annotated[
        Optional[int],
        typer.Option("--size", "-s", min=0, help="Legacy buffer size in bytes"),
    ] = None,
) -> None:
    """
    Convert an error value to the legacy (code, buffer) form.

    Builds an error value from CODE and --message, writes it into a buffer of
    --size bytes (default from settings) and prints the returned code and the
    buffer contents.

    Examples:
        kafkaerr legacy _TIMED_OUT --message "retry 2 of 5" --size 8
    """
    parsed = _parse_code_or_exit(code)
    legacy_settings = get_config().legacy
    buffer = new_errstr_buffer(
        size if size is not None else legacy_settings.default_errstr_size
    )

    try:
        error = new(parsed, message)
    except (TypeError, ValueError) as e:
        typer.echo(f"Error: invalid message template: {e}", err=True)
        raise typer.Exit(CLIDefaults.EXIT_USAGE) from e

    try:
        returned = to_legacy(
            error,
            buffer,
            encoding=legacy_settings.encoding,
            errors=legacy_settings.errors,
        )
    except KafkaErrorFault as e:
        log_fault(logger, e, operation="legacy")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(CLIDefaults.EXIT_ERROR) from e

    text = legacy_errstr(
        buffer, encoding=legacy_settings.encoding, errors=legacy_settings.errors
    )
    typer.echo(f"{int(returned)}\t{name(returned)}\t{text}")


__all__ = ["app"]
