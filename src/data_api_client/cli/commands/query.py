from __future__ import annotations

import asyncio
import sys
from typing import Annotated, Any

import typer

from data_api_client.cli.commands._shared import get_client, output_result, parse_param_args
from data_api_client.core.exceptions import InputError
from data_api_client.core.exit_codes import ExitCode
from data_api_client.core.query_source import resolve_query_source


def query_command(
    ctx: typer.Context,
    file: Annotated[
        str | None,
        typer.Argument(help="SQL file to execute"),
    ] = None,
    execute: Annotated[
        str | None,
        typer.Option("--execute", "-e", help="Execute inline SQL query"),
    ] = None,
    param: Annotated[
        list[str] | None,
        typer.Option("--param", "-p", help="Named parameter as name=value (repeatable)"),
    ] = None,
    no_hydrate: Annotated[
        bool,
        typer.Option("--no-hydrate", help="Return positional rows instead of labelled records"),
    ] = False,
    include_metadata: Annotated[
        bool,
        typer.Option("--include-metadata", help="Request column metadata in the result"),
    ] = False,
    transaction_id: Annotated[
        str | None,
        typer.Option("--transaction-id", help="Run inside an open transaction"),
    ] = None,
) -> None:
    """Execute a SQL query from file, inline (-e), or stdin."""
    try:
        is_tty = sys.stdin.isatty()
    except (ValueError, AttributeError):
        is_tty = False
    if execute is None and file is None and is_tty:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    try:
        sql = resolve_query_source(inline=execute, file_path=file)
        params = parse_param_args(param)
    except InputError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(ExitCode.INPUT_ERROR) from exc

    options: dict[str, Any] = {}
    if no_hydrate:
        options["hydrate_column_names"] = False
    if include_metadata:
        options["include_result_metadata"] = True
    if transaction_id is not None:
        options["transaction_id"] = transaction_id

    client = get_client(ctx)
    result = asyncio.run(client.query(sql, params or None, **options))

    output_result(ctx, result)
