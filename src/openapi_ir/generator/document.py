"""Folds an IR bundle into an OpenAPI 3.x document fragment."""

from typing import Any

from openapi_ir.config import IrConfig
from openapi_ir.generator.callbacks import generate_component_callbacks
from openapi_ir.generator.parameters import enum_parameter_to_openapi
from openapi_ir.generator.security import generate_security_schemes
from openapi_ir.generator.tag_groups import generate_tag_definitions, generate_tag_groups
from openapi_ir.ir.bundle import IrBundle
from openapi_ir.ir.document import OpenApiInfo


def generate_document(bundle: IrBundle, config: IrConfig | None = None) -> dict[str, Any]:
    """Generate the document-level sections for ``bundle``. Empty sections are omitted."""
    config = config or IrConfig()
    info = bundle.info or OpenApiInfo()

    doc: dict[str, Any] = {
        "openapi": config.openapi_version,
        "info": info.to_dict(),
    }

    used_tags = bundle.used_tags()
    if used_tags:
        doc["tags"] = generate_tag_definitions(used_tags, config)

    # Configured groups take precedence over the groups stored in the bundle
    groups = generate_tag_groups(used_tags, config) if config.tag_groups else bundle.tag_groups
    if groups:
        doc["x-tagGroups"] = [group.to_dict() for group in groups]

    components: dict[str, Any] = {}

    if bundle.types:
        components["schemas"] = {name: node.to_dict() for name, node in bundle.types.items()}

    if bundle.enum_parameters:
        components["parameters"] = {
            param.name: enum_parameter_to_openapi(param) for param in bundle.enum_parameters
        }

    security_schemes = generate_security_schemes(bundle.authentication.schemes)
    if security_schemes:
        components["securitySchemes"] = security_schemes

    callbacks = generate_component_callbacks(bundle.callbacks)
    if callbacks:
        components["callbacks"] = callbacks

    if components:
        doc["components"] = components

    return doc
