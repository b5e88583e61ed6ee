"""CLI command: bordermerge explode -- expand border shorthands of a CSS file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from bordermerge.parser import ParseError, parse_css
from bordermerge.stylesheet import serialize
from bordermerge.transforms.borders import BorderExplodeTransform


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.option("--pretty", is_flag=True, help="Indented output instead of minified")
def explode(cssfile: str, pretty: bool) -> None:
    """Expand every border shorthand of a CSS file into longhands."""
    try:
        stylesheet = parse_css(Path(cssfile).read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(serialize(BorderExplodeTransform().apply(stylesheet), pretty=pretty))
