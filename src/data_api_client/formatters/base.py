"""Formatter protocol and registry for output formatting."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from data_api_client.core.models import QueryResult


@runtime_checkable
class Formatter(Protocol):
    """Protocol for output formatters.

    Each formatter transforms a QueryResult into lines of formatted text.
    """

    def format(self, result: QueryResult) -> Iterator[str]:
        """Transform a QueryResult into formatted output lines."""
        ...


class FormatterRegistry:
    """Registry for looking up formatters by name."""

    def __init__(self) -> None:
        self._formatters: dict[str, type[Formatter]] = {}

    def register(self, name: str, formatter_class: type[Formatter]) -> None:
        self._formatters[name] = formatter_class

    def get(self, name: str, **kwargs: object) -> Formatter:
        """Return a formatter instance by name.

        Raises KeyError if the format name is not registered.
        """
        if name not in self._formatters:
            available = ", ".join(sorted(self._formatters))
            msg = f"Unknown format {name!r}. Available: {available}"
            raise KeyError(msg)
        return self._formatters[name](**kwargs)

    @property
    def available(self) -> list[str]:
        return sorted(self._formatters)


def display_value(val: Any) -> str:
    """Render a hydrated value as text; blobs are base64, NULL is empty."""
    if val is None:
        return ""
    if isinstance(val, bytes):
        return base64.b64encode(val).decode("ascii")
    if isinstance(val, bool):
        return "true" if val else "false"
    return str(val)


# Global registry instance populated by formatter modules.
registry = FormatterRegistry()
