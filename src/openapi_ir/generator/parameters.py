"""Enum parameter generator."""

from collections.abc import Iterable, Mapping
from typing import Any

from openapi_ir.ir.base import coerce
from openapi_ir.ir.enum_parameter import EnumParameterInfo


def _enum_schema(param: EnumParameterInfo) -> dict[str, Any]:
    return {"type": param.type, "enum": list(param.values)}


def enum_parameter_to_openapi(param: EnumParameterInfo | Mapping[str, Any]) -> dict[str, Any]:
    """Convert an enum parameter to an OpenAPI ``parameters`` entry."""
    param = coerce(EnumParameterInfo, param)
    entry: dict[str, Any] = {
        "name": param.name,
        "in": param.location,
        "required": param.required,
        "schema": _enum_schema(param),
    }
    if param.description:
        entry["description"] = param.description
    return entry


def merge_enum_parameters(
    parameters: list[dict[str, Any]],
    enum_parameters: Iterable[EnumParameterInfo | Mapping[str, Any]],
) -> list[dict[str, Any]]:
    """Attach enum schemas to route parameters.

    A route parameter with the same name gets the enum schema; any other
    enum parameter is appended as a query parameter. ``parameters`` is not
    modified.
    """
    result = [dict(p) for p in parameters]

    for enum_param in enum_parameters:
        enum_param = coerce(EnumParameterInfo, enum_param)
        match = next((p for p in result if p.get("name") == enum_param.name), None)

        if match is None:
            match = {
                "name": enum_param.name,
                "in": "query",
                "required": enum_param.required,
            }
            result.append(match)

        match["schema"] = _enum_schema(enum_param)
        if enum_param.description:
            match["description"] = enum_param.description

    return result
