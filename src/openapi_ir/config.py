"""Settings for document generation.

Loaded from an optional YAML file named by ``--config`` or the
``OPENAPI_IR_CONFIG`` environment variable.
"""

import os
from pathlib import Path

from pydantic import BaseModel

from openapi_ir.parser.cache import read_keyed_file

CONFIG_ENV_VAR = "OPENAPI_IR_CONFIG"

DEFAULT_OPENAPI_VERSION = "3.0.3"
DEFAULT_UNGROUPED_TAGS_GROUP = "Other"


class IrConfig(BaseModel):
    """Document generation settings."""

    openapi_version: str = DEFAULT_OPENAPI_VERSION
    tag_groups: dict[str, list[str]] = {}  # group name -> tags
    ungrouped_tags_group: str | None = DEFAULT_UNGROUPED_TAGS_GROUP  # None disables it
    tag_descriptions: dict[str, str] = {}


def load_config(file_path: Path | None = None) -> IrConfig:
    """Load settings from ``file_path``, the env var, or fall back to defaults."""
    if file_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        if not env_path:
            return IrConfig()
        file_path = Path(env_path)

    return IrConfig.model_validate(read_keyed_file(file_path))
