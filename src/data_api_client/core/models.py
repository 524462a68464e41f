"""Configuration and result models for data-api-client.

Pydantic models for the immutable client configuration and for the
hydrated result returned by DataApiClient.query().
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ClientConfig(BaseModel):
    """Immutable configuration shared by every call of one client."""

    model_config = ConfigDict(frozen=True)

    secret_arn: str
    resource_arn: str
    database: str | None = None
    hydrate_column_names: bool = True
    options: dict[str, Any] = Field(default_factory=dict)


class QueryResult(BaseModel):
    """Result of DataApiClient.query().

    Dumping with ``by_alias=True`` gives the Data API's camelCase keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    column_metadata: list[dict[str, Any]] | None = None
    number_of_records_updated: int = 0
    records: list[dict[str, Any] | list[Any]] = Field(default_factory=list)
    update_results: list[dict[str, Any]] | None = None
    generated_fields: list[dict[str, Any]] | None = None

    @property
    def column_names(self) -> list[str]:
        """Column labels, falling back to positional names for unhydrated rows."""
        if self.records and isinstance(self.records[0], dict):
            return list(self.records[0])
        if self.column_metadata:
            return [col.get("label") or col.get("name", "") for col in self.column_metadata]
        if self.records:
            return [str(i) for i in range(len(self.records[0]))]
        return []

    @property
    def rows(self) -> list[list[Any]]:
        """Records as positional lists, whatever their hydration mode."""
        return [
            list(rec.values()) if isinstance(rec, dict) else list(rec)
            for rec in self.records
        ]
