"""Authentication schemes and their per-route bindings."""

import logging
from collections.abc import Mapping
from typing import Any, Self

from pydantic import Field, NonNegativeInt, model_validator

from .base import KeyedModel, keyed_copy
from .enums import AuthenticationType

logger = logging.getLogger(__name__)


class AuthenticationScheme(KeyedModel):
    """A named security scheme (bearer token, basic auth, API key, OAuth2...)."""

    type: AuthenticationType = AuthenticationType.HTTP
    name: str = ""
    scheme: str | None = None  # bearer / basic, http only
    bearer_format: str | None = Field(default=None, alias="bearerFormat")
    location: str | None = Field(default=None, alias="in")  # header / query / cookie, apiKey only
    header_name: str | None = Field(default=None, alias="headerName")
    flows: dict[str, dict[str, Any]] | None = None  # oauth2 only
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def parse_type(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        raw = data.get("type")
        if raw is None or isinstance(raw, AuthenticationType):
            return data

        auth_type = AuthenticationType.try_parse(raw)
        if auth_type is None:
            logger.debug("Unknown authentication type %r, falling back to http", raw)
            auth_type = AuthenticationType.HTTP
        data["type"] = auth_type
        return data

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "type": self.type.value,
            "name": self.name,
        }
        optional = {
            "scheme": self.scheme,
            "bearerFormat": self.bearer_format,
            "in": self.location,
            "headerName": self.header_name,
            "flows": keyed_copy(self.flows),
            "description": self.description,
        }
        result.update({key: value for key, value in optional.items() if value is not None})
        return result

    def to_openapi_security_scheme(self) -> dict[str, Any]:
        """Convert to an entry of ``components.securitySchemes``."""
        result: dict[str, Any] = {"type": self.type.value}

        if self.type.is_http():
            if self.scheme is not None:
                result["scheme"] = self.scheme
            if self.bearer_format is not None:
                result["bearerFormat"] = self.bearer_format

        if self.type.is_api_key():
            if self.location is not None:
                result["in"] = self.location
            # OpenAPI calls the header/query/cookie name "name"
            if self.header_name is not None:
                result["name"] = self.header_name

        if self.type.is_oauth2() and self.flows is not None:
            result["flows"] = keyed_copy(self.flows)

        if self.description is not None:
            result["description"] = self.description

        return result

    def is_bearer(self) -> bool:
        return self.type.is_http() and self.scheme == "bearer"

    def is_basic(self) -> bool:
        return self.type.is_http() and self.scheme == "basic"

    def is_api_key(self) -> bool:
        return self.type.is_api_key()

    def is_oauth2(self) -> bool:
        return self.type.is_oauth2()

    def is_http(self) -> bool:
        return self.type.is_http()


class RouteAuthentication(KeyedModel):
    """Authentication applied to a single route.

    The scheme is held by reference; several routes may share one instance.
    """

    scheme: AuthenticationScheme
    middleware: list[str] = Field(default_factory=list)
    required: bool = True
    scopes: list[str] = Field(default_factory=list)  # oauth2 scopes

    @model_validator(mode="before")
    @classmethod
    def default_scheme(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and data.get("scheme") is None:
            return {**data, "scheme": {}}
        return data

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "scheme": self.scheme.to_dict(),
            "middleware": list(self.middleware),
            "required": self.required,
        }
        if self.scopes:
            result["scopes"] = list(self.scopes)
        return result

    def is_required(self) -> bool:
        return self.required

    def get_scheme_name(self) -> str:
        return self.scheme.name

    def has_middleware(self, middleware: str) -> bool:
        return middleware in self.middleware


class AuthenticationResult(KeyedModel):
    """Authentication analysis across all routes.

    ``schemes`` maps scheme names to the canonical scheme instances,
    ``routes`` maps route indices to their bindings. Indices need not be
    contiguous; every entry in ``routes`` is an authenticated route.
    """

    schemes: dict[str, AuthenticationScheme] = Field(default_factory=dict)
    routes: dict[NonNegativeInt, RouteAuthentication] = Field(default_factory=dict)

    @model_validator(mode="after")
    def share_schemes(self) -> Self:
        # Routes rebuilt from keyed data get their own scheme copies; point
        # them back at the canonical instance when the two are equal.
        for index, route in self.routes.items():
            canonical = self.schemes.get(route.scheme.name)
            if canonical is not None and canonical is not route.scheme and canonical == route.scheme:
                self.routes[index] = route.model_copy(update={"scheme": canonical})
        return self

    @classmethod
    def empty(cls) -> Self:
        return cls(schemes={}, routes={})

    def to_dict(self) -> dict[str, Any]:
        return {
            "schemes": {name: scheme.to_dict() for name, scheme in self.schemes.items()},
            "routes": {index: route.to_dict() for index, route in self.routes.items()},
        }

    def is_empty(self) -> bool:
        return not self.schemes and not self.routes

    def has_schemes(self) -> bool:
        return bool(self.schemes)

    def get_scheme(self, name: str) -> AuthenticationScheme | None:
        return self.schemes.get(name)

    def get_route_authentication(self, index: int) -> RouteAuthentication | None:
        return self.routes.get(index)

    def has_route_authentication(self, index: int) -> bool:
        return index in self.routes

    def count_schemes(self) -> int:
        return len(self.schemes)

    def count_authenticated_routes(self) -> int:
        return len(self.routes)

    def get_scheme_names(self) -> list[str]:
        return list(self.schemes)
