"""Collect endpoint bindings and build the Jinja2 template context.

Walks every path and method of the document, derives the URL getter and
request function for each, and assembles the context dict for api.ts.j2.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import DEFAULT_LINE_BREAK, GeneratorConfig
from .endpoint_types import build_request_function
from .loader import get_paths
from .naming import derive_url_getter
from .schema_parser import translate_schemas

logger = logging.getLogger(__name__)

# Path-item keys treated as operations; anything else is skipped
_HTTP_METHODS = {"get", "post", "put", "patch", "delete"}

# Real HTTP methods without generated bindings
_UNSUPPORTED_METHODS = {"head", "options", "trace"}


def split_path(path: str, prefix_segment_count: int) -> tuple[str, list[str]]:
    """Split a path into its shared prefix and the remaining segments.

    ``/api/v1/users/{id}`` with a count of 2 -> ``("/api/v1", ["users", "{id}"])``.
    """
    segments = path.split("/")
    cut = prefix_segment_count + 1
    return "/".join(segments[:cut]), segments[cut:]


def build_endpoint(
    path: str,
    method: str,
    operation: dict[str, Any],
    location: list[str],
    path_prefix: str,
    type_map: dict[str, str],
    override_map: dict[str, str],
    line_break: int | bool = DEFAULT_LINE_BREAK,
) -> dict[str, Any]:
    """Build the endpoint record for one (path, method) pair."""
    url_getter = derive_url_getter(method, location, path_prefix)
    request_function = build_request_function(
        method,
        url_getter["name"],
        url_getter["params_code"],
        operation,
        type_map,
        override_map,
        line_break,
    )
    return {
        "path": path,
        "method": method,
        "operation": operation,
        "url_getter": url_getter,
        "request_function": request_function,
    }


def collect_endpoints(
    spec: dict[str, Any],
    type_map: dict[str, str],
    override_map: dict[str, str],
    prefix_segment_count: int = 0,
    line_break: int | bool = DEFAULT_LINE_BREAK,
    fail_fast: bool = False,
) -> dict[str, Any]:
    """Build endpoint records for every path and method in document order.

    The path prefix comes from the first path alone and is reused for all
    others. A failing endpoint is logged and recorded in ``failures``; a
    path that cannot be read at all is recorded with ``method`` None. With
    ``fail_fast`` collection stops at the first failure and the partial
    list is returned. The pass itself never raises.
    """
    endpoints: list[dict[str, Any]] = []
    failures: list[dict[str, Any]] = []
    path_prefix = ""

    def result() -> dict[str, Any]:
        return {"endpoints": endpoints, "path_prefix": path_prefix, "failures": failures}

    for i, (path, path_item) in enumerate(get_paths(spec).items()):
        try:
            prefix, location = split_path(path, prefix_segment_count)
            if path_item is None:
                path_item = {}
            if not isinstance(path_item, dict):
                raise TypeError(f"path item must be a mapping, got {type(path_item).__name__}")
        except Exception as exc:
            logger.exception("Failed to read path %r", path)
            failures.append({"path": path, "method": None, "error": exc})
            if fail_fast:
                return result()
            continue

        if i == 0:
            path_prefix = prefix

        for method, operation in path_item.items():
            if method not in _HTTP_METHODS:
                if method in _UNSUPPORTED_METHODS:
                    logger.warning("Skipping %s %s: unsupported method", method.upper(), path)
                else:
                    logger.debug("Skipping %r under %s: not an operation", method, path)
                continue

            try:
                endpoint = build_endpoint(
                    path,
                    method,
                    operation or {},
                    location,
                    path_prefix,
                    type_map,
                    override_map,
                    line_break,
                )
            except Exception as exc:
                logger.exception("Failed to create endpoint %s %s", method.upper(), path)
                failures.append({"path": path, "method": method, "error": exc})
                if fail_fast:
                    return result()
                continue

            endpoints.append(endpoint)

    return result()


def build_context(spec: dict[str, Any], config: GeneratorConfig | None = None) -> dict[str, Any]:
    """Build the full template context from an OpenAPI document."""
    config = config or GeneratorConfig()

    schemas = translate_schemas(
        spec, config.type_map, config.override_map, line_break=config.line_break
    )
    collected = collect_endpoints(
        spec,
        config.type_map,
        config.override_map,
        prefix_segment_count=config.prefix_segment_count,
        line_break=config.line_break,
        fail_fast=config.fail_fast,
    )

    if collected["failures"]:
        logger.warning(
            "%d endpoint(s) could not be generated", len(collected["failures"])
        )

    info = spec.get("info") or {}
    return {
        "title": info.get("title", "API"),
        "api_version": info.get("version", "unknown"),
        "schema_declarations": schemas["declarations"],
        "schema_names": schemas["names"],
        "endpoints": collected["endpoints"],
        "failures": collected["failures"],
        "path_prefix": collected["path_prefix"],
        "endpoint_count": len(collected["endpoints"]),
    }
