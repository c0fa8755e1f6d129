"""Tag group generator.

Builds the ``x-tagGroups`` extension (read by viewers such as Redoc) and
the ``tags`` section from the configured groups.
"""

from typing import Any

from openapi_ir.config import IrConfig
from openapi_ir.ir.document import TagGroup


def generate_tag_groups(used_tags: list[str], config: IrConfig) -> list[TagGroup]:
    """Group the used tags according to ``config``.

    Configured groups keep only used tags and are dropped when empty. Used
    tags not in any group go to ``config.ungrouped_tags_group`` unless it
    is None.
    """
    if not config.tag_groups and not used_tags:
        return []

    result = []
    grouped: list[str] = []

    for group_name, tags in config.tag_groups.items():
        filtered = [tag for tag in tags if tag in used_tags]
        if filtered:
            result.append(TagGroup(name=group_name, tags=filtered))
            grouped.extend(filtered)

    if config.ungrouped_tags_group is not None:
        ungrouped = [tag for tag in used_tags if tag not in grouped]
        if ungrouped:
            result.append(TagGroup(name=config.ungrouped_tags_group, tags=ungrouped))

    return result


def generate_tag_definitions(used_tags: list[str], config: IrConfig) -> list[dict[str, Any]]:
    """Generate the ``tags`` section, with descriptions where configured."""
    result = []
    for tag in used_tags:
        definition = {"name": tag}
        description = config.tag_descriptions.get(tag)
        if description:
            definition["description"] = description
        result.append(definition)
    return result
