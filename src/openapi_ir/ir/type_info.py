"""Recursive schema node.

A TypeInfo is a scalar, an array, or an object with named children.
Children are present exactly when the node is an object; an object with
an empty children map ("object, no known properties yet") is distinct
from an object whose children are unknown (``properties is None``).
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import model_validator

from .base import KeyedModel

logger = logging.getLogger(__name__)

SCALAR_TYPES = ("string", "integer", "number", "boolean")


class TypeInfo(KeyedModel):
    """OpenAPI-compatible schema node."""

    type: str = "string"  # string / integer / number / boolean / array / object / null
    properties: dict[str, "TypeInfo"] | None = None
    format: str | None = None  # date-time / email / uri / uuid ...

    @model_validator(mode="before")
    @classmethod
    def normalize_properties(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        properties = data.get("properties")
        if properties is None:
            return data

        if not isinstance(properties, Mapping):
            logger.debug("Ignoring non-mapping properties of type %s", type(properties).__name__)
            data.pop("properties")
            return data

        if data.get("type", "string") != "object":
            logger.debug("Dropping properties of non-object type %r", data.get("type"))
            data.pop("properties")
            return data

        # YAML reads unquoted numeric keys such as 200: as ints
        data["properties"] = {
            str(name): child
            for name, child in properties.items()
            if isinstance(child, (TypeInfo, Mapping))
        }
        return data

    @classmethod
    def string(cls) -> "TypeInfo":
        return cls(type="string")

    @classmethod
    def string_with_format(cls, format: str) -> "TypeInfo":
        """Create a string node carrying a format such as ``email`` or ``uuid``."""
        return cls(type="string", format=format)

    @classmethod
    def integer(cls) -> "TypeInfo":
        return cls(type="integer")

    @classmethod
    def number(cls) -> "TypeInfo":
        return cls(type="number")

    @classmethod
    def boolean(cls) -> "TypeInfo":
        return cls(type="boolean")

    @classmethod
    def array(cls) -> "TypeInfo":
        return cls(type="array")

    @classmethod
    def null(cls) -> "TypeInfo":
        return cls(type="null")

    @classmethod
    def object(cls, properties: Mapping[str, "TypeInfo"] | None = None) -> "TypeInfo":
        """Create an object node; without ``properties`` it has an empty children map."""
        return cls(type="object", properties=dict(properties or {}))

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": self.type}

        if self.properties is not None:
            result["properties"] = {
                name: child.to_dict() for name, child in self.properties.items()
            }

        if self.format is not None:
            result["format"] = self.format

        return result

    def is_object(self) -> bool:
        return self.type == "object"

    def is_array(self) -> bool:
        return self.type == "array"

    def is_scalar(self) -> bool:
        """True for string, integer, number and boolean."""
        return self.type in SCALAR_TYPES

    def has_format(self) -> bool:
        return self.format is not None

    def has_properties(self) -> bool:
        """True when the node has at least one named child."""
        return bool(self.properties)
