"""Generator configuration.

All tunables are carried on one object and passed explicitly to every
generation call, so independent passes never share state.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any

# OpenAPI primitive kind -> TypeScript type. "*" is the fallback.
DEFAULT_TYPE_MAP: dict[str, str] = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "object": "object",
    "array": "Array<any>",
    "*": "any",
}

# Property count above which object types render one property per line
DEFAULT_LINE_BREAK = 3


def parse_line_break(value: Any) -> int | bool:
    """Normalise a line-break threshold read from a config file.

    Strings are decoded as JSON, so "false", "0" and "3" behave like the
    values they spell. None disables line breaking.
    """
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            raise ValueError(f"invalid line_break value: {value!r}") from None
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return int(value)
    raise ValueError(f"invalid line_break value: {value!r}")


@dataclass
class GeneratorConfig:
    """Configuration options for type and endpoint generation."""

    # Primitive kind -> target type token
    type_map: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_TYPE_MAP))

    # Field name (or Type.field.path) -> literal type text
    override_map: dict[str, str] = field(default_factory=dict)

    # False/0 keeps objects on one line, True behaves like 1
    line_break: int | bool = DEFAULT_LINE_BREAK

    # Number of leading path segments shared by every endpoint URL
    prefix_segment_count: int = 0

    # Stop collecting endpoints at the first failure
    fail_fast: bool = False

    @staticmethod
    def from_dict(d: dict[str, Any]) -> GeneratorConfig:
        """Create a config from a dictionary, ignoring unknown keys.

        A ``type_map`` given here is merged over the defaults so a config
        file only needs to list the kinds it changes.
        """
        config = GeneratorConfig()
        names = {f.name for f in fields(GeneratorConfig)}
        for k, v in d.items():
            if k == "type_map":
                config.type_map.update(v)
            elif k == "line_break":
                config.line_break = parse_line_break(v)
            elif k in names:
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "type_map": dict(self.type_map),
            "override_map": dict(self.override_map),
            "line_break": self.line_break,
            "prefix_segment_count": self.prefix_segment_count,
            "fail_fast": self.fail_fast,
        }
