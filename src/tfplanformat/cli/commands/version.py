"""Version command - show tf-plan-format version."""

import click
from ... import __version__


@click.command()
def version():
    """Show tf-plan-format version."""
    click.echo(f"tf-plan-format version {__version__}")
