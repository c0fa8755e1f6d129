"""Closed enumerations used across the IR."""

from .base import KeyedEnum


class EnumBackingType(KeyedEnum):
    """Scalar kind an enumerated parameter is backed by."""

    STRING = "string"
    INTEGER = "int"  # wire tag is "int", not "integer"

    def to_openapi_type(self) -> str:
        """Return the OpenAPI primitive type name for this backing type."""
        if self is EnumBackingType.INTEGER:
            return "integer"
        return "string"


class AuthenticationType(KeyedEnum):
    """Authentication mechanism of a security scheme."""

    HTTP = "http"
    API_KEY = "apiKey"
    OAUTH2 = "oauth2"
    OPENID_CONNECT = "openIdConnect"

    def is_http(self) -> bool:
        return self is AuthenticationType.HTTP

    def is_api_key(self) -> bool:
        return self is AuthenticationType.API_KEY

    def is_oauth2(self) -> bool:
        return self is AuthenticationType.OAUTH2

    def is_openid_connect(self) -> bool:
        return self is AuthenticationType.OPENID_CONNECT
