"""Main CLI entry point for tf-plan-format."""

import logging
import sys
import click
from .commands.context import context
from .commands.custom import custom
from .commands.github import github
from .commands.version import version
from .utils import format_error
from ..config import load_format_config
from ..utils.errors import ConfigError
from ..utils.logging import setup_logging, get_logger
from .. import __version__

logger = get_logger("cli.main")


@click.group()
@click.version_option(version=__version__, prog_name="tf-plan-format", message="%(prog)s version %(version)s")
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False), help='Config YAML file overriding user and project config')
@click.option('--verbose', '-v', is_flag=True, help='Log progress to stderr')
@click.pass_context
def cli(ctx, config_path, verbose):
    """tf-plan-format - render Terraform plan JSON as a readable change report."""
    try:
        config = load_format_config(config_path)
    except ConfigError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    setup_logging(logging.DEBUG if verbose else config.log_level_number)
    ctx.obj = config


cli.add_command(custom)
cli.add_command(github)
cli.add_command(context)
cli.add_command(version)
