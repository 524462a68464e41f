"""Output format selection and writers for query results and raw responses."""

from __future__ import annotations

import json
import sys
from enum import StrEnum
from typing import TYPE_CHECKING, Any, TextIO

from data_api_client.formatters import registry

if TYPE_CHECKING:
    from data_api_client.core.models import QueryResult
    from data_api_client.formatters.base import Formatter


class OutputFormat(StrEnum):
    TABLE = "table"
    JSON = "json"
    CSV = "csv"


# Which of the global output flags each formatter understands.
_FORMAT_OPTIONS: dict[str, tuple[str, ...]] = {
    OutputFormat.TABLE: ("width",),
    OutputFormat.JSON: ("compact",),
    OutputFormat.CSV: ("no_header",),
}


def detect_tty() -> bool:
    return sys.stdout.isatty()


def resolve_format(format_flag: str | None) -> str:
    """Pick the output format: table on a terminal, csv when piped.

    An explicit --format always wins.
    """
    if format_flag is not None:
        return format_flag
    return OutputFormat.TABLE if detect_tty() else OutputFormat.CSV


def get_formatter(format_flag: str | None = None, **flags: Any) -> Formatter:
    """Build the formatter for ``format_flag``, passing only the flags it accepts."""
    fmt_name = resolve_format(format_flag)
    accepted = _FORMAT_OPTIONS.get(fmt_name, ())
    kwargs = {key: flags[key] for key in accepted if key in flags}
    return registry.get(fmt_name, **kwargs)


def write_output(formatter: Formatter, result: QueryResult, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    for line in formatter.format(result):
        out.write(line + "\n")


def write_response(response: dict[str, Any], stream: TextIO | None = None) -> None:
    """Write a pass-through Data API response as JSON.

    boto3's ``ResponseMetadata`` (request id, HTTP headers, retries) is dropped.
    """
    out = stream or sys.stdout
    body = {k: v for k, v in response.items() if k != "ResponseMetadata"}
    out.write(json.dumps(body, indent=2, default=str) + "\n")
