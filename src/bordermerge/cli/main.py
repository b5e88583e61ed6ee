"""bordermerge CLI entry point: Click group with subcommands."""

import logging

import click

from bordermerge import __version__


@click.group()
@click.version_option(version=__version__, prog_name="bordermerge")
@click.option("--verbose", "-v", is_flag=True, help="Log every rewrite to stderr")
def cli(verbose: bool) -> None:
    """bordermerge - compact CSS border declarations."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from bordermerge.cli.explode import explode  # noqa: E402
from bordermerge.cli.minify import minify  # noqa: E402

cli.add_command(minify)
cli.add_command(explode)
