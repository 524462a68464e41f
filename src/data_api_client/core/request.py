"""Request assembly for DataApiClient.query().

A query call arrives either as SQL text plus keyword options or as a
single options mapping using the Data API's camelCase keys. Both shapes
are normalized into one mapping and resolved against the client
configuration with the same precedence rules.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic.alias_generators import to_camel

from data_api_client.core.exceptions import InputError
from data_api_client.core.models import ClientConfig
from data_api_client.core.parameters import annotate_params, is_batch

# Keys only meaningful to this client, never forwarded to the Data API.
_CLIENT_ONLY_KEYS = frozenset({"hydrateColumnNames"})


@dataclass(frozen=True)
class PreparedQuery:
    """Outbound payload plus the flags that steer execution and hydration."""

    payload: dict[str, Any]
    is_batch: bool
    hydrate: bool
    include_meta: bool


def normalize_options(
    sql: str | Mapping[str, Any],
    options: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge the two call shapes into one camelCase options mapping.

    Snake_case keyword options are converted to camelCase. Keys already
    present in an options mapping win over keyword options.
    """
    merged: dict[str, Any] = {}
    for key, value in (options or {}).items():
        merged[to_camel(key)] = value
    if isinstance(sql, Mapping):
        merged.update(sql)
    elif sql is not None:
        merged["sql"] = sql
    return merged


def parse_sql(sql: str | Mapping[str, Any] | None) -> str:
    if isinstance(sql, str):
        return sql
    if isinstance(sql, Mapping) and isinstance(sql.get("sql"), str):
        return sql["sql"]
    raise InputError("No 'sql' statement provided.")


def _is_param_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def parse_params(options: Mapping[str, Any], parameters: Any = None) -> list[Any]:
    """Pick the raw parameter list, options mapping first."""
    from_options = options.get("parameters")
    if _is_param_list(from_options):
        return list(from_options)
    if isinstance(from_options, Mapping):
        return [from_options]
    if _is_param_list(parameters):
        return list(parameters)
    if isinstance(parameters, Mapping):
        return [parameters]
    if from_options:
        raise InputError("'parameters' must be an object or array")
    if parameters:
        raise InputError("Parameters must be an object or array")
    return []


def parse_database(config: ClientConfig, options: Mapping[str, Any]) -> str:
    database = options.get("database")
    if isinstance(database, str):
        return database
    if database:
        raise InputError("'database' must be a string.")
    if config.database:
        return config.database
    raise InputError("No 'database' provided.")


def parse_hydrate(config: ClientConfig, options: Mapping[str, Any]) -> bool:
    hydrate = options.get("hydrateColumnNames")
    if isinstance(hydrate, bool):
        return hydrate
    if hydrate:
        raise InputError("'hydrateColumnNames' must be a boolean.")
    return config.hydrate_column_names


def prepare_query(
    config: ClientConfig,
    sql: str | Mapping[str, Any],
    parameters: Any = None,
    options: Mapping[str, Any] | None = None,
) -> PreparedQuery:
    """Validate a query call and build its Data API request payload.

    Hydration needs column labels, so result metadata is requested for
    every hydrated single-statement call. Batch calls return no records
    and never ask for it.
    """
    merged = normalize_options(sql, options)
    statement = parse_sql(merged)
    hydrate = parse_hydrate(config, merged)
    annotated = annotate_params(parse_params(merged, parameters))
    batch = is_batch(annotated)

    payload: dict[str, Any] = {
        "secretArn": config.secret_arn,
        "resourceArn": config.resource_arn,
    }
    payload.update(
        (key, value)
        for key, value in merged.items()
        if key not in _CLIENT_ONLY_KEYS and key != "parameters"
    )
    payload["database"] = parse_database(config, merged)
    payload["sql"] = statement
    if annotated:
        payload["parameterSets" if batch else "parameters"] = annotated
    if hydrate and not batch:
        payload["includeResultMetadata"] = True

    return PreparedQuery(
        payload=payload,
        is_batch=batch,
        hydrate=hydrate,
        include_meta=merged.get("includeResultMetadata") is True,
    )
