"""Render templates and write generated output.

Takes the context from context_builder and produces one TypeScript module.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

TEMPLATE_DIR = Path(__file__).parent / "templates"
OUTPUT_PATH = Path("generated") / "api.ts"

logger = logging.getLogger(__name__)


def render(context: dict[str, Any]) -> str:
    """Render the api.ts template with the given context."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    template = env.get_template("api.ts.j2")
    return template.render(**context)


def generate(context: dict[str, Any], output_path: Path | None = None) -> Path:
    """Render the api.ts template and write it to disk."""
    output_path = Path(output_path) if output_path else OUTPUT_PATH
    output = render(context)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(output, encoding="utf-8")

    logger.info(
        "Generated %s (%d types, %d endpoints)",
        output_path,
        len(context["schema_names"]),
        context["endpoint_count"],
    )
    return output_path
