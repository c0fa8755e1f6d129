"""Callback generator.

Converts CallbackInfo values into the OpenAPI callbacks structure:
``{name: {expression: {method: operation}}}``.
"""

from collections.abc import Iterable
from typing import Any

from openapi_ir.ir.base import keyed_copy
from openapi_ir.ir.callback import CallbackInfo

COMPONENT_CALLBACK_PREFIX = "#/components/callbacks/"

DEFAULT_CALLBACK_DESCRIPTION = "Callback received successfully"


def generate_callbacks(callbacks: Iterable[CallbackInfo]) -> dict[str, Any] | None:
    """Generate the operation-level ``callbacks`` object, or None if there are none."""
    result: dict[str, Any] = {}

    for callback in callbacks:
        if callback.has_ref():
            result[callback.name] = {"$ref": COMPONENT_CALLBACK_PREFIX + callback.ref}
            continue
        result[callback.name] = _build_path_item(callback)

    return result or None


def generate_component_callbacks(callbacks: Iterable[CallbackInfo]) -> dict[str, Any]:
    """Generate the ``components.callbacks`` section."""
    return {callback.name: _build_path_item(callback) for callback in callbacks}


def _build_path_item(callback: CallbackInfo) -> dict[str, Any]:
    return {callback.expression: {callback.method: _build_operation(callback)}}


def _build_operation(callback: CallbackInfo) -> dict[str, Any]:
    operation: dict[str, Any] = {}

    if callback.summary is not None:
        operation["summary"] = callback.summary

    if callback.description is not None:
        operation["description"] = callback.description

    if callback.has_request_body():
        operation["requestBody"] = {
            "content": {"application/json": {"schema": keyed_copy(callback.request_body)}},
        }

    if callback.has_responses():
        operation["responses"] = keyed_copy(callback.responses)
    else:
        operation["responses"] = {"200": {"description": DEFAULT_CALLBACK_DESCRIPTION}}

    return operation
