"""Synthesize TypeScript type expressions from OpenAPI schemas.

Handles:
- Primitive types via a caller-supplied type map ("*" is the fallback)
- $ref (name extraction only, no dereferencing)
- Inline object properties, with nullable suffixes
- allOf / oneOf / anyOf composition
- Arrays and string enums
- Field-name overrides, bare or qualified by type path

Classification never raises: anything the engine cannot place degrades to
the fallback type.
"""

from __future__ import annotations

import enum
from typing import Any, Callable

from .config import DEFAULT_LINE_BREAK
from .loader import get_schemas

_OBJECT_KEYS = ("$ref", "properties", "allOf", "oneOf", "anyOf")

NULLABLE_SUFFIX = "| null"


# Shape each keyword must have to take part in classification
_KEY_TYPES: dict[str, type] = {
    "$ref": str,
    "properties": dict,
    "allOf": list,
    "oneOf": list,
    "anyOf": list,
    "enum": list,
}


def _has(schema: dict[str, Any], key: str) -> bool:
    """Key presence check; empty containers still count as present.

    A value of the wrong shape counts as absent, so malformed keywords
    fall through to the primitive fallback.
    """
    value = schema.get(key)
    if not isinstance(value, _KEY_TYPES[key]):
        return False
    return isinstance(value, (dict, list)) or bool(value)


class SchemaKind(enum.Enum):
    OBJECT = "object"
    ENUM = "enum"
    ARRAY = "array"
    PRIMITIVE = "primitive"


def classify_schema(schema: Any) -> SchemaKind:
    """Infer the kind of a schema node from the keys it carries.

    Object composition wins over enum, enum over array. A node whose only
    key is ``type`` is always primitive.
    """
    if not isinstance(schema, dict):
        return SchemaKind.PRIMITIVE
    if "type" in schema and len(schema) == 1:
        return SchemaKind.PRIMITIVE
    if any(_has(schema, key) for key in _OBJECT_KEYS):
        return SchemaKind.OBJECT
    if _has(schema, "enum"):
        return SchemaKind.ENUM
    if schema.get("type") == "array":
        return SchemaKind.ARRAY
    return SchemaKind.PRIMITIVE


def resolve_primitive(schema: Any, type_map: dict[str, str]) -> str:
    """Map a schema's primitive kind to a target type token."""
    kind = schema.get("type") if isinstance(schema, dict) else None
    if isinstance(kind, str) and type_map.get(kind):
        return type_map[kind]
    return type_map.get("*", "any")


def find_override(
    override_map: dict[str, str],
    field: str | None,
    scope: tuple[str, ...] = (),
) -> str | None:
    """Return the override text for a field, qualified key first."""
    if not field:
        return None
    if len(scope) > 1:
        qualified = override_map.get(".".join(scope))
        if qualified:
            return qualified
    return override_map.get(field) or None


def _ref_name(ref: str) -> str:
    return ref.split("/")[-1]


def _enum_literal(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _join_properties(props: list[str], line_break: int | bool) -> str:
    if line_break and len(props) > int(line_break):
        return "{\n" + ",\n".join(props) + "\n}"
    return "{" + ",".join(props) + "}"


def _render_object(schema, type_map, override_map, field, line_break, scope):
    parts = []

    if _has(schema, "$ref"):
        parts.append(_ref_name(schema["$ref"]))

    if _has(schema, "properties"):
        props = []
        for name, prop_schema in schema["properties"].items():
            prop_type = synthesize(
                prop_schema,
                type_map,
                override_map,
                field=name,
                line_break=line_break,
                scope=scope + (name,),
            )
            nullable = isinstance(prop_schema, dict) and prop_schema.get("nullable")
            suffix = NULLABLE_SUFFIX if nullable else ""
            props.append(f"{name}: {prop_type}{suffix}")
        parts.append(_join_properties(props, line_break))

    def members(key: str) -> list[str]:
        return [
            synthesize(sub, type_map, override_map, line_break=line_break, scope=scope)
            for sub in schema[key]
        ]

    if _has(schema, "allOf"):
        parts.append("&".join(members("allOf")))

    if _has(schema, "oneOf"):
        parts.append("|".join(members("oneOf")))

    # Approximation: anyOf has no exact algebraic form, so every member
    # field becomes optional.
    if _has(schema, "anyOf"):
        parts.append(f"Partial<{'&'.join(members('anyOf'))}>")

    return "&".join(parts)


def _render_array(schema, type_map, override_map, field, line_break, scope):
    # Items share the array field's name for override lookups
    item_type = synthesize(
        schema.get("items"),
        type_map,
        override_map,
        field=field,
        line_break=line_break,
        scope=scope,
    )
    return f"Array<{item_type}>"


def _render_enum(schema, type_map, override_map, field, line_break, scope):
    return "|".join(f"'{_enum_literal(value)}'" for value in schema["enum"])


def _render_primitive(schema, type_map, override_map, field, line_break, scope):
    return resolve_primitive(schema, type_map)


_RENDERERS: dict[SchemaKind, Callable[..., str]] = {
    SchemaKind.OBJECT: _render_object,
    SchemaKind.ENUM: _render_enum,
    SchemaKind.ARRAY: _render_array,
    SchemaKind.PRIMITIVE: _render_primitive,
}


def synthesize(
    schema: Any,
    type_map: dict[str, str],
    override_map: dict[str, str],
    field: str | None = None,
    line_break: int | bool = DEFAULT_LINE_BREAK,
    scope: tuple[str, ...] = (),
) -> str:
    """Render a schema node as a TypeScript type expression.

    ``field`` is the property or parameter name the schema belongs to and
    ``scope`` the names from the declared type down to it; together they
    select an override, which bypasses every other rule.
    """
    override = find_override(override_map, field, scope)
    if override is not None:
        return override

    kind = classify_schema(schema)
    return _RENDERERS[kind](schema, type_map, override_map, field, line_break, scope)


def translate_schemas(
    spec: dict[str, Any],
    type_map: dict[str, str],
    override_map: dict[str, str],
    line_break: int | bool = DEFAULT_LINE_BREAK,
) -> dict[str, list[str]]:
    """Emit one ``export type`` declaration per component schema."""
    declarations: list[str] = []
    names: list[str] = []

    for name, schema in get_schemas(spec).items():
        type_expr = synthesize(
            schema, type_map, override_map, line_break=line_break, scope=(name,)
        )
        declarations.append(f"export type {name} = {type_expr}")
        names.append(name)

    return {"declarations": declarations, "names": names}
