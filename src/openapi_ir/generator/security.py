"""Security scheme generator.

Builds ``components.securitySchemes`` and per-operation ``security``
requirements from authentication IR.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from openapi_ir.ir.auth import AuthenticationScheme, RouteAuthentication
from openapi_ir.ir.base import coerce


def generate_security_schemes(
    schemes: Mapping[str, AuthenticationScheme | Mapping[str, Any]],
) -> dict[str, dict[str, Any]]:
    """Generate the ``components.securitySchemes`` section."""
    return {
        name: coerce(AuthenticationScheme, scheme).to_openapi_security_scheme()
        for name, scheme in schemes.items()
    }


def generate_endpoint_security(
    route: RouteAuthentication | Mapping[str, Any] | None,
) -> list[dict[str, list[str]]]:
    """Generate the ``security`` requirement list for one operation.

    Empty when the route has no authentication or it is optional.
    """
    if not route:
        return []

    route = coerce(RouteAuthentication, route)
    if not route.is_required():
        return []

    if route.scheme.is_oauth2():
        return [{route.get_scheme_name(): list(route.scopes)}]

    return [{route.get_scheme_name(): []}]


def generate_multiple_auth_security(
    routes: Iterable[RouteAuthentication | Mapping[str, Any]],
) -> list[dict[str, list[str]]]:
    """Generate alternative requirements for a route accepting several schemes."""
    security = []
    for route in routes:
        security.extend(generate_endpoint_security(route))
    return security


def merge_authentications(
    global_auth: RouteAuthentication | None,
    local_auth: RouteAuthentication | None,
) -> RouteAuthentication | None:
    """Route-level authentication wins over the global default."""
    if local_auth is not None:
        return local_auth
    return global_auth
