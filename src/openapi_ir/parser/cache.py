"""Cache file reader/writer.

IR recovered from a previous run is stored as YAML or JSON. The format is
chosen by file suffix: ``.json`` is JSON, anything else is YAML.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from openapi_ir.ir.bundle import IrBundle

logger = logging.getLogger(__name__)


class CacheFormatError(ValueError):
    """A cache or config file could not be read as a keyed mapping."""

    def __init__(self, file_path: Path, reason: str):
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"{file_path}: {reason}")


def _is_json(file_path: Path) -> bool:
    return file_path.suffix.lower() == ".json"


def read_keyed_file(file_path: Path) -> dict[str, Any]:
    """Read a YAML/JSON file whose top level is a mapping.

    An empty file reads as an empty mapping.
    """
    text = file_path.read_text(encoding="utf-8")

    try:
        data = json.loads(text) if _is_json(file_path) else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CacheFormatError(file_path, f"cannot parse: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CacheFormatError(file_path, "top level is not a mapping")
    return data


def write_keyed_file(data: dict[str, Any], file_path: Path) -> None:
    """Write keyed data as JSON or YAML depending on the file suffix."""
    if _is_json(file_path):
        text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    else:
        text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)

    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(text, encoding="utf-8")


def load_bundle(file_path: Path) -> IrBundle:
    """Rebuild an IrBundle from a cache file."""
    bundle = IrBundle.from_dict(read_keyed_file(file_path))
    logger.debug("Loaded IR bundle from %s", file_path)
    return bundle


def dump_bundle(bundle: IrBundle, file_path: Path) -> None:
    """Write the canonical keyed form of ``bundle`` to a cache file."""
    write_keyed_file(bundle.to_dict(), file_path)
    logger.debug("Wrote IR bundle to %s", file_path)
