"""Build parameter, request body and response types for one operation.

Each operation yields up to five ``export type`` declarations, keyed by
facet:

  data    {Name}DataParams   request body (application/json)
  result  {Name}Result       200 response (application/json)
  query   {Name}QueryParams  query parameters (dropped for POST)
  path    {Name}UrlParams    path parameters
  params  {Name}Params       data/query/urlParams grouped, result excluded
"""

from __future__ import annotations

import logging
import re
from typing import Any

from .config import DEFAULT_LINE_BREAK
from .loader import get_json_schema
from .naming import to_pascal_case
from .schema_parser import synthesize

logger = logging.getLogger(__name__)

_PARAM_LOCATIONS = ("query", "path")

# Facet type-name suffixes
_FACET_SUFFIXES: dict[str, str] = {
    "query": "query",
    "path": "url",
}

# Facets passed to the request function, per method.
# "urlParams" stands for the path facet.
_REQUEST_FACETS: dict[str, tuple[str, ...]] = {
    "get": ("urlParams", "query"),
    "post": ("urlParams", "data"),
    "put": ("urlParams", "data"),
    "patch": ("urlParams", "data"),
    "delete": ("urlParams",),
}


def _sanitize_field(name: str) -> str:
    return re.sub(r"[^\w]+", "", name, flags=re.ASCII)


def _facet_type_name(url_getter_name: str, facet: str) -> str:
    return to_pascal_case([url_getter_name, _FACET_SUFFIXES[facet], "params"])


def _declare(name: str, type_expr: str) -> str:
    return f"export type {name} = {type_expr}"


def build_parameter_groups(
    method: str,
    url_getter_name: str,
    operation: dict[str, Any],
    type_map: dict[str, str],
    override_map: dict[str, str],
    line_break: int | bool = DEFAULT_LINE_BREAK,
) -> dict[str, list[str]]:
    """Render declared parameters as field lines grouped by location."""
    groups: dict[str, list[str]] = {loc: [] for loc in _PARAM_LOCATIONS}

    for param in operation.get("parameters") or []:
        name = param["name"]
        location = param.get("in")
        if location not in groups:
            logger.warning(
                "Skipping %s parameter %r of %s: unsupported location",
                location, name, url_getter_name,
            )
            continue

        type_expr = synthesize(
            param.get("schema") or {},
            type_map,
            override_map,
            field=name,
            line_break=line_break,
            scope=(_facet_type_name(url_getter_name, location), name),
        )
        optional = "" if param.get("required") else "?"
        groups[location].append(f"{_sanitize_field(name)}{optional}: {type_expr}")

    # POST bodies carry the payload; query parameters are not generated
    if method == "post":
        del groups["query"]

    return groups


def build_request_types(
    method: str,
    url_getter_name: str,
    operation: dict[str, Any],
    type_map: dict[str, str],
    override_map: dict[str, str],
    line_break: int | bool = DEFAULT_LINE_BREAK,
) -> tuple[dict[str, str], dict[str, str]]:
    """Build the type declarations of one operation.

    Returns ``(type_declarations, type_names)``, both keyed by facet.
    """
    declarations: dict[str, str] = {}
    names: dict[str, str] = {}

    groups = build_parameter_groups(
        method, url_getter_name, operation, type_map, override_map, line_break
    )

    body_schema = get_json_schema(operation.get("requestBody"))
    if body_schema is not None:
        name = to_pascal_case([url_getter_name, "data", "params"])
        type_expr = synthesize(
            body_schema, type_map, override_map, line_break=line_break, scope=(name,)
        )
        declarations["data"] = _declare(name, type_expr)
        names["data"] = name

    responses = operation.get("responses") or {}
    response_schema = get_json_schema(responses.get("200") or responses.get(200))
    if response_schema is not None:
        name = to_pascal_case([url_getter_name, "result"])
        type_expr = synthesize(
            response_schema, type_map, override_map, line_break=line_break, scope=(name,)
        )
        declarations["result"] = _declare(name, type_expr)
        names["result"] = name

    for location, fields in groups.items():
        if not fields:
            continue
        name = _facet_type_name(url_getter_name, location)
        declarations[location] = _declare(name, "{\n" + ",".join(fields) + "\n};")
        names[location] = name

    grouped = [
        f"{'urlParams' if facet == 'path' else facet}: {name}"
        for facet, name in names.items()
        if facet != "result"
    ]
    params_name = to_pascal_case([url_getter_name, "params"])
    declarations["params"] = _declare(params_name, "{\n" + ",".join(grouped) + "\n}")
    names["params"] = params_name

    return declarations, names


def select_request_params(
    method: str,
    url_params_code: str,
    type_declarations: dict[str, str],
) -> list[str]:
    """Pick the call-signature facets that apply and produced a type."""
    selected = []
    for facet in _REQUEST_FACETS.get(method, ("urlParams",)):
        if facet == "urlParams":
            if url_params_code and "path" in type_declarations:
                selected.append(facet)
        elif facet in type_declarations:
            selected.append(facet)
    return selected


def build_request_function(
    method: str,
    url_getter_name: str,
    url_params_code: str,
    operation: dict[str, Any],
    type_map: dict[str, str],
    override_map: dict[str, str],
    line_break: int | bool = DEFAULT_LINE_BREAK,
) -> dict[str, Any]:
    """Describe the request function signature and its types."""
    declarations, names = build_request_types(
        method, url_getter_name, operation, type_map, override_map, line_break
    )
    params = select_request_params(method, url_params_code, declarations)
    params_code = "{" + ",".join(params) + "}" if params else ""

    return {
        "params": params,
        "params_code": params_code,
        "params_with_type_code": f"{params_code}: {names['params']}" if params else "",
        "type_names": names,
        "type_declarations": declarations,
    }
