from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click

from stencil.config.parser import load_json_or_jsonc
from stencil.config.paths import set_dotted
from stencil.core.engine import TemplateEngine

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
logger = logging.getLogger("stencil")


def _parse_value(raw: str) -> Any:
    # JSON scalars and literals (true, 3, null, [..]) keep their type, anything else stays a string
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _parse_vars(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> list[tuple[str, Any]]:
    overrides: list[tuple[str, Any]] = []
    for item in values:
        key, sep, raw = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", ctx=ctx, param=param)
        overrides.append((key.strip(), _parse_value(raw)))
    return overrides


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("template_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--context",
    "-c",
    "context_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON/JSONC file providing the render context.",
)
@click.option(
    "--var",
    "variables",
    multiple=True,
    callback=_parse_vars,
    help="Override a context value, e.g. --var user.name=Ada. May be repeated.",
)
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the result to a file instead of stdout.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log parser diagnostics.")
def main(
    template_file: Path,
    context_file: Path | None,
    variables: list[tuple[str, Any]],
    output_file: Path | None,
    verbose: bool,
) -> None:
    """Render a template file against a JSON/JSONC context."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    context: dict[str, Any] = {}
    if context_file is not None:
        try:
            context = load_json_or_jsonc(context_file.resolve())
        except ValueError as e:
            raise click.ClickException(f"Invalid context file {context_file}: {e}") from e

    for dotted_key, value in variables:
        set_dotted(context, dotted_key, value)

    try:
        rendered = TemplateEngine().render_file(template_file, context)
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Template file {template_file} is not valid UTF-8: {e}") from e

    if output_file is None:
        click.echo(rendered, nl=False)
        return

    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(rendered, encoding="utf-8")
    logger.info("wrote %s", output_file)


if __name__ == "__main__":
    main()
