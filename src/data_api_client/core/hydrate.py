"""Result hydration for Data API responses.

Records come back as lists of tagged ``Field`` unions, e.g.
``[{"longValue": 1}, {"isNull": True}]``. Hydration turns them into
plain values, keyed by column label when column metadata is available.
"""

from __future__ import annotations

from typing import Any

from data_api_client.core.models import QueryResult
from data_api_client.core.parameters import TypeTag


def _discover_tag(field: dict[str, Any]) -> str | None:
    for key, value in field.items():
        if key != TypeTag.NULL.value and value is not None:
            return key
    return None


def format_records(
    records: list[list[dict[str, Any]]] | None,
    columns: list[dict[str, Any]] | None = None,
) -> list[dict[str, Any] | list[Any]]:
    """Convert tagged records to label-keyed dicts or positional lists.

    The active tag of each column is discovered from its first non-null
    field and cached for the rest of the pass. A field that is not null
    but carries no discoverable value comes back as None.
    """
    if not records:
        return []

    field_map: list[dict[str, Any]] = [
        {"label": columns[i]["label"]} if columns else {}
        for i in range(len(records[0]))
    ]

    result: list[dict[str, Any] | list[Any]] = []
    for record in records:
        values: list[Any] = []
        for i, field in enumerate(record):
            entry = field_map[i]
            if field.get(TypeTag.NULL.value) is True:
                values.append(None)
                continue
            if "field" not in entry:
                tag = _discover_tag(field)
                if tag is None:
                    values.append(None)
                    continue
                entry["field"] = tag
            values.append(field.get(entry["field"]))

        if columns:
            result.append(
                {field_map[i]["label"]: value for i, value in enumerate(values)}
            )
        else:
            result.append(values)
    return result


def format_results(
    response: dict[str, Any],
    hydrate: bool,
    include_meta: bool,
) -> QueryResult:
    """Shape a raw execute/batch-execute response into a QueryResult."""
    column_metadata = response.get("columnMetadata")
    columns = column_metadata if hydrate and column_metadata else None
    return QueryResult(
        column_metadata=column_metadata if include_meta else None,
        number_of_records_updated=response.get("numberOfRecordsUpdated", 0),
        records=format_records(response.get("records"), columns),
        update_results=response.get("updateResults"),
        generated_fields=response.get("generatedFields"),
    )
