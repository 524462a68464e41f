"""JSON formatter for QueryResult output."""

from __future__ import annotations

import base64
import json
from typing import TYPE_CHECKING, Any

from data_api_client.formatters.base import registry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from data_api_client.core.models import QueryResult


def _serialize_value(val: Any) -> Any:
    if isinstance(val, (int, float, str, bool, type(None))):
        return val
    if isinstance(val, bytes):
        return base64.b64encode(val).decode("ascii")
    if isinstance(val, (list, dict)):
        return val
    return str(val)


class JSONFormatter:
    def __init__(self, compact: bool = False) -> None:
        self.compact = compact

    def format(self, result: QueryResult) -> Iterator[str]:
        if result.records and isinstance(result.records[0], dict):
            records: list[Any] = [
                {key: _serialize_value(val) for key, val in rec.items()}
                for rec in result.records
            ]
        else:
            records = [[_serialize_value(val) for val in row] for row in result.rows]

        if self.compact:
            yield json.dumps(records, default=str)
        else:
            yield json.dumps(records, indent=2, default=str)


registry.register("json", JSONFormatter)
