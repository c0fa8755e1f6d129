"""Document-level metadata: the info object and tag groups."""

from typing import Any

from pydantic import Field

from .base import KeyedModel, keyed_copy


class OpenApiInfo(KeyedModel):
    """The OpenAPI ``info`` object.

    ``title``, ``version`` and ``description`` default to an empty string;
    ``terms_of_service``, ``contact`` and ``license`` default to None and
    are left out of the keyed form when absent.
    """

    title: str = ""
    version: str = ""
    description: str = ""
    terms_of_service: str | None = Field(default=None, alias="termsOfService")
    contact: dict[str, Any] | None = None  # name / url / email, x- extensions
    license: dict[str, Any] | None = None  # name / url / identifier, x- extensions

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "title": self.title,
            "version": self.version,
        }

        if self.description != "":
            result["description"] = self.description

        if self.terms_of_service is not None:
            result["termsOfService"] = self.terms_of_service

        if self.contact is not None:
            result["contact"] = keyed_copy(self.contact)

        if self.license is not None:
            result["license"] = keyed_copy(self.license)

        return result

    def has_contact(self) -> bool:
        return self.contact is not None

    def has_license(self) -> bool:
        return self.license is not None

    def has_terms_of_service(self) -> bool:
        return self.terms_of_service is not None


class TagGroup(KeyedModel):
    """A named cluster of tags, emitted under ``x-tagGroups``."""

    name: str
    tags: list[str] = Field(default_factory=list)

    def has_tags(self) -> bool:
        return bool(self.tags)

    def get_tag_count(self) -> int:
        return len(self.tags)

    def contains_tag(self, tag: str) -> bool:
        """Exact, case-sensitive membership test."""
        return tag in self.tags
