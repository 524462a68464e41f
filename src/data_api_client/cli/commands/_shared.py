"""Shared CLI plumbing for command modules.

Client creation from the global options, result output, and --param parsing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from data_api_client.cli.output import get_formatter, write_output
from data_api_client.core.client import DataApiClient
from data_api_client.core.config import load_config, resolve_config
from data_api_client.core.exceptions import InputError

if TYPE_CHECKING:
    import typer

    from data_api_client.core.models import QueryResult


def get_client(ctx: typer.Context) -> DataApiClient:
    obj = ctx.ensure_object(dict)
    config = load_config(obj.get("config_file"))

    cli_overrides: dict[str, Any] = {}
    for key in ("secret_arn", "resource_arn", "database", "region"):
        val = obj.get(key)
        if val is not None:
            cli_overrides[key] = val

    resolved = resolve_config(
        config,
        profile_name=obj.get("profile"),
        **cli_overrides,
    )

    return DataApiClient(resolved)


def format_options(ctx: typer.Context) -> dict[str, Any]:
    obj = ctx.ensure_object(dict)
    return {
        "format_flag": obj.get("format"),
        "compact": obj.get("compact", False),
        "width": obj.get("width", 40),
        "no_header": obj.get("no_header", False),
    }


def output_result(ctx: typer.Context, result: QueryResult) -> None:
    opts = format_options(ctx)
    formatter = get_formatter(**opts)
    write_output(formatter, result)


def parse_param_args(raw_params: list[str] | None) -> dict[str, Any]:
    """Parse repeated ``name=value`` flags into a parameter mapping.

    Values are read as JSON scalars when possible (``42``, ``true``,
    ``null``, ``"quoted"``), otherwise kept as the raw string.
    """
    params: dict[str, Any] = {}
    for raw in raw_params or []:
        name, sep, value = raw.partition("=")
        if not sep or not name:
            msg = f"Invalid parameter: '{raw}'. Expected name=value"
            raise InputError(msg)
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            parsed = value
        if isinstance(parsed, (list, dict)):
            parsed = value
        params[name] = parsed
    return params
