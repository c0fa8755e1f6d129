"""Out-of-band (webhook style) callback descriptor."""

from collections.abc import Mapping
from typing import Any

from pydantic import Field, model_validator

from .base import KeyedModel, keyed_copy


class CallbackInfo(KeyedModel):
    """An OpenAPI callback declared on an operation.

    ``request_body`` and ``responses`` are opaque schema fragments passed
    through unparsed. Every optional field is None when not specified,
    which is distinct from being specified as empty.
    """

    name: str  # e.g. onOrderStatusChange
    expression: str  # runtime expression, e.g. {$request.body#/callbackUrl}
    method: str = "post"
    request_body: dict[str, Any] | list[Any] | None = Field(default=None, alias="requestBody")
    responses: dict[str, Any] | list[Any] | None = None
    description: str | None = None
    summary: str | None = None
    ref: str | None = None  # name under components/callbacks

    @model_validator(mode="before")
    @classmethod
    def unwrap_fragments(cls, data: Any) -> Any:
        # Typed nodes anywhere in a fragment (e.g. a TypeInfo request body)
        # are stored in keyed form.
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        for key in ("requestBody", "request_body", "responses"):
            if data.get(key) is not None:
                data[key] = keyed_copy(data[key])
        return data

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "expression": self.expression,
            "method": self.method,
            "requestBody": keyed_copy(self.request_body),
            "responses": keyed_copy(self.responses),
            "description": self.description,
            "summary": self.summary,
            "ref": self.ref,
        }

    def has_ref(self) -> bool:
        return self.ref is not None

    def has_request_body(self) -> bool:
        return self.request_body is not None

    def has_responses(self) -> bool:
        return self.responses is not None
