"""Ergonomic client for the RDS Data API."""

from data_api_client.__about__ import __version__
from data_api_client.core.client import DataApiClient, create_client
from data_api_client.core.escape import ident, literal
from data_api_client.core.exceptions import ConfigError, DataApiError, InputError
from data_api_client.core.models import ClientConfig, QueryResult

__all__ = [
    "ClientConfig",
    "ConfigError",
    "DataApiClient",
    "DataApiError",
    "InputError",
    "QueryResult",
    "__version__",
    "create_client",
    "ident",
    "literal",
]
