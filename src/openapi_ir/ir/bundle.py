"""Aggregate of every IR section, as cached between documentation runs."""

from typing import Any

from pydantic import Field

from .auth import AuthenticationResult
from .base import KeyedModel
from .callback import CallbackInfo
from .document import OpenApiInfo, TagGroup
from .enum_parameter import EnumParameterInfo
from .type_info import TypeInfo


class IrBundle(KeyedModel):
    """All IR produced by one analysis run. Every section is optional."""

    info: OpenApiInfo | None = None
    types: dict[str, TypeInfo] = Field(default_factory=dict)
    enum_parameters: list[EnumParameterInfo] = Field(default_factory=list, alias="enumParameters")
    authentication: AuthenticationResult = Field(default_factory=AuthenticationResult.empty)
    callbacks: list[CallbackInfo] = Field(default_factory=list)
    tag_groups: list[TagGroup] = Field(default_factory=list, alias="tagGroups")

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.info is not None:
            result["info"] = self.info.to_dict()
        result["types"] = {name: node.to_dict() for name, node in self.types.items()}
        result["enumParameters"] = [param.to_dict() for param in self.enum_parameters]
        result["authentication"] = self.authentication.to_dict()
        result["callbacks"] = [callback.to_dict() for callback in self.callbacks]
        result["tagGroups"] = [group.to_dict() for group in self.tag_groups]
        return result

    def used_tags(self) -> list[str]:
        """Tags named by any tag group, first occurrence order."""
        tags: list[str] = []
        for group in self.tag_groups:
            for tag in group.tags:
                if tag not in tags:
                    tags.append(tag)
        return tags
