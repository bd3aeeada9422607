"""Entry point: python -m swagger_ts [SPEC] [OUTPUT] [--config FILE]

Reads an OpenAPI document (default spec/openapi.json), generates a
TypeScript module (default generated/api.ts). Without --config, options are
read from swagger_ts.json next to the input document when present.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .codegen import OUTPUT_PATH, generate
from .context_builder import build_context
from .loader import CONFIG_FILENAME, SPEC_PATH, load_config, load_spec


@click.command()
@click.argument(
    "spec_path",
    default=str(SPEC_PATH),
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument(
    "output_path",
    default=str(OUTPUT_PATH),
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-c", "--config", "config_path", default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Generator options (JSON or YAML).",
)
def main(spec_path: Path, output_path: Path, config_path: Path | None) -> None:
    """Generate TypeScript types and URL getters from an OpenAPI document."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    spec = load_spec(spec_path)
    config = load_config(config_path or spec_path.parent / CONFIG_FILENAME)
    context = build_context(spec, config)
    written = generate(context, output_path)

    click.echo(f"Generated {written} ({context['endpoint_count']} endpoints)")
    if context["failures"]:
        click.echo(f"{len(context['failures'])} endpoint(s) skipped, see log", err=True)


if __name__ == "__main__":
    main()
