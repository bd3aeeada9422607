"""Load OpenAPI documents and generator configuration from disk.

JSON is read with the standard library; YAML documents go through PyYAML.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .config import GeneratorConfig

SPEC_PATH = Path("spec") / "openapi.json"
CONFIG_FILENAME = "swagger_ts.json"

_YAML_SUFFIXES = {".yaml", ".yml"}


def _read_document(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() in _YAML_SUFFIXES:
            return yaml.safe_load(f)
        return json.load(f)


def load_spec(path: Path | None = None) -> dict[str, Any]:
    """Load an OpenAPI document (JSON or YAML) from disk."""
    spec_file = Path(path) if path else SPEC_PATH
    return _read_document(spec_file)


def load_config(path: Path | None = None) -> GeneratorConfig:
    """Load generator options; a missing file yields the defaults."""
    if path is None or not Path(path).exists():
        return GeneratorConfig()
    data = _read_document(Path(path)) or {}
    return GeneratorConfig.from_dict(data)


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the document."""
    return spec.get("paths") or {}


def get_schemas(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract component schemas from the document."""
    return (spec.get("components") or {}).get("schemas") or {}


def get_json_schema(container: dict[str, Any] | None) -> dict[str, Any] | None:
    """Return the ``application/json`` schema of a request body or response."""
    if not container:
        return None
    content = container.get("content") or {}
    json_content = content.get("application/json") or {}
    return json_content.get("schema")
