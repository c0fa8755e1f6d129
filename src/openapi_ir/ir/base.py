"""Shared building blocks for the IR value types.

Every IR node is a frozen pydantic model that can be built either from
already-typed nodes (handed over by the analyzer) or from generic keyed
data (recovered from a cache file). ``from_dict`` accepts both shapes,
``to_dict`` produces the keyed form consumed by the document generator.
"""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Self, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator


class InvalidLiteralError(ValueError):
    """Raised by a strict enum lookup for a literal outside the closed set."""

    def __init__(self, enum_name: str, value: object):
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"{value!r} is not a valid {enum_name}")


class KeyedEnum(StrEnum):
    """String enum with a lenient and a strict lookup by wire tag."""

    @classmethod
    def try_parse(cls, value: object) -> Self | None:
        """Return the member whose wire tag is ``value``, or None."""
        for member in cls:
            if member.value == value:
                return member
        return None

    @classmethod
    def parse(cls, value: object) -> Self:
        """Return the member whose wire tag is ``value``.

        Raises InvalidLiteralError for anything outside the closed set.
        """
        member = cls.try_parse(value)
        if member is None:
            raise InvalidLiteralError(cls.__name__, value)
        return member


class KeyedModel(BaseModel):
    """Immutable IR node with a keyed (dict) representation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # An explicit null in keyed data means the same as a missing key.
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | Self) -> Self:
        """Build a node from keyed data, passing an existing node through."""
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the keyed representation."""
        return self.model_dump(by_alias=True)


M = TypeVar("M", bound=KeyedModel)


def coerce(model: type[M], value: M | Mapping[str, Any]) -> M:
    """Resolve an already-typed node or a keyed fragment into a ``model``."""
    if isinstance(value, model):
        return value
    return model.from_dict(value)


def keyed_copy(value: Any) -> Any:
    """Copy nested dicts and lists, converting any IR node to its keyed form.

    Mapping keys become strings, so YAML status codes such as ``200:`` survive.
    """
    if isinstance(value, KeyedModel):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {str(key): keyed_copy(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [keyed_copy(item) for item in value]
    return value
