"""Enumerated request parameter detected from a controller signature."""

from pydantic import Field, StrictInt, StrictStr

from .base import KeyedModel
from .enums import EnumBackingType


class EnumParameterInfo(KeyedModel):
    """A path or query parameter restricted to a list of literal values.

    ``values`` keeps the literal order and may hold strings or integers
    (booleans are rejected rather than read as 0 or 1);
    matching them against the declared type is left to the analyzer.
    """

    name: str
    type: str = "string"  # OpenAPI type: string / integer
    values: list[StrictStr | StrictInt] = Field(default_factory=list, alias="enum")
    required: bool = True
    description: str = ""
    location: str = Field(default="path", alias="in")  # path / query
    enum_class: str = Field(default="", alias="enumClass")

    def backing_type(self) -> EnumBackingType | None:
        if self.type == "integer":
            return EnumBackingType.INTEGER
        return EnumBackingType.try_parse(self.type)

    def is_path_parameter(self) -> bool:
        return self.location == "path"

    def is_query_parameter(self) -> bool:
        return self.location == "query"

    def is_string_backed(self) -> bool:
        return self.type == "string"

    def is_integer_backed(self) -> bool:
        return self.type == "integer"
