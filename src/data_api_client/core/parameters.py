"""Parameter annotation for the Data API.

The Data API takes parameters as a list of ``{"name": ..., "value": {tag: v}}``
entries where the tag names the wire type. This module infers the tag from
plain Python values and builds flat parameter lists for single statements
or nested lists for batch execution.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any

from data_api_client.core.exceptions import InputError


class TypeTag(StrEnum):
    """Wire type tags of the Data API ``Field`` and ``SqlParameter`` unions."""

    STRING = "stringValue"
    BOOLEAN = "booleanValue"
    LONG = "longValue"
    DOUBLE = "doubleValue"
    NULL = "isNull"
    BLOB = "blobValue"


NamedParameter = dict[str, Any]

_BINARY_TYPES = (bytes, bytearray, memoryview)


def infer_type_tag(value: Any) -> TypeTag | None:
    """Return the wire tag for a plain value, or None if it has none.

    Precedence: string, boolean, integer, double, null, binary. bool is
    checked before int because it subclasses int.
    """
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, int):
        return TypeTag.LONG
    if isinstance(value, float) and math.isfinite(value):
        return TypeTag.DOUBLE
    if value is None:
        return TypeTag.NULL
    if isinstance(value, _BINARY_TYPES):
        return TypeTag.BLOB
    return None


def format_parameter(name: str, value: Any) -> NamedParameter:
    """Build one named parameter, raising InputError for unsupported values."""
    tag = infer_type_tag(value)
    if tag is None:
        raise InputError(f"'{name}' is an invalid type")
    if tag is TypeTag.NULL:
        return {"name": name, "value": {tag.value: True}}
    if tag is TypeTag.BLOB:
        value = bytes(value)
    return {"name": name, "value": {tag.value: value}}


def is_annotated(param: Mapping[str, Any]) -> bool:
    """True for a mapping already shaped as ``{"name": ..., "value": ...}``.

    Both entries must be truthy and no other keys may be present.
    """
    return (
        len(param) == 2
        and bool(param.get("name"))
        and bool(param.get("value"))
    )


def _is_param_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, *_BINARY_TYPES))


def annotate_params(params: Sequence[Any]) -> list[Any]:
    """Annotate a list of parameter mappings.

    Nested sequences are annotated recursively and kept nested, which is
    how batch parameter sets are represented. Pre-annotated entries pass
    through untouched, every other mapping contributes one named
    parameter per key.
    """
    annotated: list[Any] = []
    for param in params:
        if _is_param_sequence(param):
            annotated.append(annotate_params(param))
        elif isinstance(param, Mapping):
            if is_annotated(param):
                annotated.append(dict(param))
            else:
                annotated.extend(
                    format_parameter(name, value) for name, value in param.items()
                )
        else:
            raise InputError("Parameters must be an object or array")
    return annotated


def is_batch(params: Sequence[Any]) -> bool:
    """True when the first annotated entry is itself a parameter list."""
    return len(params) > 0 and isinstance(params[0], list)
