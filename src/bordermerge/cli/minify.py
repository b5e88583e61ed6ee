"""CLI command: bordermerge minify -- merge border declarations of a CSS file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from bordermerge.config import MergeConfig
from bordermerge.parser import ParseError, parse_css
from bordermerge.stylesheet import serialize
from bordermerge.transforms import apply_transforms


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.option("--no-explode", is_flag=True, help="Merge without expanding shorthands first")
@click.option("--no-color-normalize", is_flag=True, help="Compare border colors verbatim")
@click.option("--pretty", is_flag=True, help="Indented output instead of minified")
@click.option("--output", "-o", default=None, help="Write to this file instead of stdout")
def minify(
    cssfile: str,
    no_explode: bool,
    no_color_normalize: bool,
    pretty: bool,
    output: str | None,
) -> None:
    """Rewrite border declarations of a CSS file into their shortest form."""
    css_path = Path(cssfile)
    config = MergeConfig(
        explode_first=not no_explode,
        normalize_colors=not no_color_normalize,
        pretty=pretty,
    )

    try:
        source = css_path.read_text(encoding="utf-8")
        stylesheet = parse_css(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    result = serialize(apply_transforms(stylesheet, config), pretty=config.pretty)

    if output is None:
        click.echo(result)
        return

    Path(output).write_text(result, encoding="utf-8")
    saved = len(source.encode("utf-8")) - len(result.encode("utf-8"))
    click.echo(f"Saved {saved} byte(s): {css_path.name} -> {output}", err=True)
