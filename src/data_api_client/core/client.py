"""RDS Data API client for data-api-client.

Wraps a boto3 ``rds-data`` client with parameter annotation, request
assembly and result hydration. boto3 calls are blocking, so every remote
call runs in a worker thread and is awaited; botocore errors propagate
unchanged.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Mapping
from typing import Any

import boto3
import sentry_sdk

from data_api_client.core.config import parse_client_config
from data_api_client.core.hydrate import format_results
from data_api_client.core.logging import get_logger
from data_api_client.core.models import ClientConfig, QueryResult
from data_api_client.core.request import prepare_query


class DataApiClient:
    """Asynchronous query interface over the RDS Data API."""

    def __init__(self, config: ClientConfig, rds: Any | None = None) -> None:
        self.config = config
        self._rds = rds if rds is not None else boto3.client("rds-data", **config.options)

    async def _call(self, method: str, **kwargs: Any) -> dict[str, Any]:
        return await asyncio.to_thread(getattr(self._rds, method), **kwargs)

    async def query(
        self,
        sql: str | Mapping[str, Any],
        parameters: Any = None,
        **options: Any,
    ) -> QueryResult:
        """Run one statement, or one batch when parameters is a list of lists.

        ``sql`` is either the statement text or a mapping of Data API
        request fields that includes ``sql``. Keyword options such as
        ``database``, ``hydrate_column_names``, ``include_result_metadata``
        or ``transaction_id`` override the client defaults.
        """
        log = get_logger(__name__)
        prepared = prepare_query(self.config, sql, parameters, options)
        method = "batch_execute_statement" if prepared.is_batch else "execute_statement"

        sql_normalized = " ".join(prepared.payload["sql"].split())
        log.debug(
            "executing statement",
            sql=sql_normalized,
            batch=prepared.is_batch,
            parameter_count=len(
                prepared.payload.get("parameterSets")
                or prepared.payload.get("parameters")
                or []
            ),
        )
        with sentry_sdk.start_span(op="db.query", description=sql_normalized[:100]) as span:
            start_time = time.monotonic()
            response = await self._call(method, **prepared.payload)
            duration_ms = (time.monotonic() - start_time) * 1000
            span.set_data("duration_ms", duration_ms)

        result = format_results(response, prepared.hydrate, prepared.include_meta)
        log.debug(
            "statement complete",
            duration_ms=f"{duration_ms:.1f}",
            record_count=len(result.records),
            records_updated=result.number_of_records_updated,
        )
        return result

    async def execute_statement(self, **kwargs: Any) -> dict[str, Any]:
        return await self._call("execute_statement", **kwargs)

    async def batch_execute_statement(self, **kwargs: Any) -> dict[str, Any]:
        return await self._call("batch_execute_statement", **kwargs)

    async def begin_transaction(self, **kwargs: Any) -> dict[str, Any]:
        return await self._call("begin_transaction", **kwargs)

    async def commit_transaction(self, **kwargs: Any) -> dict[str, Any]:
        return await self._call("commit_transaction", **kwargs)

    async def rollback_transaction(self, **kwargs: Any) -> dict[str, Any]:
        return await self._call("rollback_transaction", **kwargs)


def create_client(rds: Any | None = None, **params: Any) -> DataApiClient:
    """Validate construction parameters and build a DataApiClient.

    Accepts secret_arn, resource_arn, database, hydrate_column_names and
    options (keyword arguments for ``boto3.client``). Raises ConfigError
    before any boto3 client is created.
    """
    return DataApiClient(parse_client_config(params), rds=rds)
