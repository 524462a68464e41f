"""CSV formatter for QueryResult output (RFC 4180 compliant).

Write statements have no columns; they are reported as a one-column
``records_updated`` table so that piped output is never silently empty.
"""

from __future__ import annotations

import csv
from io import StringIO
from typing import TYPE_CHECKING

from data_api_client.formatters.base import display_value, registry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from data_api_client.core.models import QueryResult

UPDATE_COLUMN = "records_updated"


def _write_row(values: list[str]) -> str:
    buf = StringIO()
    csv.writer(buf).writerow(values)
    return buf.getvalue().rstrip("\r\n")


class CSVFormatter:
    def __init__(self, no_header: bool = False) -> None:
        self.no_header = no_header

    def format(self, result: QueryResult) -> Iterator[str]:
        columns = result.column_names
        if not columns:
            if result.number_of_records_updated or result.update_results:
                if not self.no_header:
                    yield UPDATE_COLUMN
                yield str(result.number_of_records_updated)
            return

        if not self.no_header:
            yield _write_row(columns)
        for row in result.rows:
            yield _write_row([display_value(v) for v in row])


registry.register("csv", CSVFormatter)
