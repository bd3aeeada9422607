"""Generate TypeScript types and URL getters from OpenAPI documents."""

from .config import GeneratorConfig
from .context_builder import build_context, collect_endpoints
from .schema_parser import synthesize, translate_schemas

__all__ = [
    "GeneratorConfig",
    "build_context",
    "collect_endpoints",
    "synthesize",
    "translate_schemas",
]
