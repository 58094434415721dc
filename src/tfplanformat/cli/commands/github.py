"""GitHub command - render plans as collapsible GitHub markdown."""

import sys
import click
from ... import format_plans
from ...utils.errors import TfPlanFormatError
from ...utils.logging import get_logger
from ..utils import format_error, resolve_plan_files, write_output

logger = get_logger("cli.github")


@click.command()
@click.option('--file', '-f', 'files', multiple=True, required=True, help='Plan JSON file path or glob, can be used multiple times')
@click.option('--hide-unchanged', is_flag=True, help='Only show attributes that change')
@click.option('--output', '-o', type=click.Path(), help='Save output to file')
@click.pass_obj
def github(config, files, hide_unchanged, output):
    """Render plans into GitHub markdown."""
    hide_unchanged = hide_unchanged or config.hide_unchanged
    
    try:
        plan_paths = resolve_plan_files(files)
        logger.debug(f"Resolved plan files: {plan_paths}")
        text = format_plans(
            plan_paths,
            include_unchanged=not hide_unchanged,
            full_depth=config.full_depth,
        )
        write_output(text, output)
    
    except FileNotFoundError as e:
        click.echo(format_error(f"Failed to parse plan. {e}"), err=True)
        sys.exit(1)
    except TfPlanFormatError as e:
        click.echo(format_error(f"Failed to parse plan. {e}"), err=True)
        sys.exit(1)
