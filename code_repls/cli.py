"""
Markdown REPL links CLI entrypoint.

Usage:
    code-repls --help
    code-repls --config repls.yml render README.md
    code-repls transform --directory examples/ tree.json
    code-repls redirects --directory examples/ --output public/
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from code_repls import __version__
from code_repls.markdown.config import ReplOptions, load_options
from code_repls.markdown.errors import ReplError


def _repl_options(func):
    """Shared flags that map onto ReplOptions fields."""
    decorators = [
        click.option("--directory", "-d", default=None, help="Examples directory (overrides config)."),
        click.option("--target", default=None, help='Anchor target, e.g. "_blank".'),
        click.option("--default-text", default=None, help="Text for links without any."),
        click.option(
            "--dependency",
            "dependencies",
            multiple=True,
            help="CodeSandbox dependency, name or name@version (repeatable).",
        ),
        click.option("--html", default=None, help="HTML boilerplate for sandboxes and pens."),
        click.option("--external", "externals", multiple=True, help="Script URL added to CodePen pens (repeatable)."),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _build_options(ctx: click.Context, **flags) -> ReplOptions:
    """Merge the --config file (if any) with command line flags."""
    # empty repeatable flags mean "not given", not "clear the config value"
    overrides = {key: (value or None) if isinstance(value, tuple) else value for key, value in flags.items()}

    config_path: Path | None = ctx.obj.get("config_path")
    try:
        if config_path is not None:
            return load_options(config_path, **overrides)
    except ReplError as e:
        raise click.ClickException(str(e)) from e
    return ReplOptions(**{key: value for key, value in overrides.items() if value is not None})


@click.group()
@click.version_option(version=__version__, prog_name="code-repls")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a YAML file with REPL options.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool, config_path: str | None) -> None:
    """Rewrite babel://, codepen://, codesandbox:// and ramda:// markdown links."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--output", "-o", type=click.File("w", encoding="utf-8"), default="-", help="Output file (default: stdout).")
@_repl_options
@click.pass_context
def render(ctx: click.Context, source, output, **flags) -> None:
    """Render a markdown file to HTML with REPL links rewritten."""
    from code_repls.markdown.renderer import render_markdown

    options = _build_options(ctx, **flags)
    try:
        html = render_markdown(source.read(), options)
    except (ReplError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e
    except OSError as e:
        # pypandoc raises OSError when no pandoc binary is installed
        raise click.ClickException(f"Pandoc failed: {e}") from e
    output.write(html)


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--output", "-o", type=click.File("w", encoding="utf-8"), default="-", help="Output file (default: stdout).")
@_repl_options
@click.pass_context
def transform(ctx: click.Context, source, output, **flags) -> None:
    """Rewrite REPL links in an mdast JSON tree."""
    from code_repls.markdown.nodes import Node
    from code_repls.markdown.transform import code_repls

    options = _build_options(ctx, **flags)
    try:
        tree = Node.from_dict(json.load(source))
    except (json.JSONDecodeError, KeyError, TypeError) as e:
        raise click.ClickException(f"Invalid mdast JSON: {e}") from e

    try:
        tree = code_repls(tree, options)
    except (ReplError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e
    output.write(json.dumps(tree.to_dict(), indent=2, ensure_ascii=False))
    output.write("\n")


@cli.command()
@click.option("--output", "-o", "output_dir", required=True, type=click.Path(file_okay=False), help="Site output directory.")
@_repl_options
@click.pass_context
def redirects(ctx: click.Context, output_dir: str, **flags) -> None:
    """Write the CodePen redirect pages for every example."""
    from code_repls.redirects import collect_codepen_redirects, write_redirect_pages

    options = _build_options(ctx, **flags)
    try:
        pages = collect_codepen_redirects(options)
    except ReplError as e:
        raise click.ClickException(str(e)) from e

    written = write_redirect_pages(pages, output_dir)
    click.secho(f"✓ {len(written)} redirect page(s) written to {output_dir}", fg="green")


if __name__ == "__main__":
    cli()
