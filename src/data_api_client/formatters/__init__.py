"""Output formatters for the data-api CLI."""

from data_api_client.formatters.base import Formatter, FormatterRegistry, registry
from data_api_client.formatters.csv import CSVFormatter
from data_api_client.formatters.json import JSONFormatter
from data_api_client.formatters.table import TableFormatter

__all__ = [
    "CSVFormatter",
    "Formatter",
    "FormatterRegistry",
    "JSONFormatter",
    "TableFormatter",
    "registry",
]
