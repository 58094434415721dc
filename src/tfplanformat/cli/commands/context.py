"""Context command - print the render context as JSON."""

import json
import sys
import click
from ... import build_context
from ...utils.errors import TfPlanFormatError
from ...utils.logging import get_logger
from ..utils import format_error, resolve_plan_files, write_output

logger = get_logger("cli.context")


@click.command()
@click.option('--file', '-f', 'files', multiple=True, required=True, help='Plan JSON file path or glob, can be used multiple times')
@click.option('--hide-unchanged', is_flag=True, help='Only show attributes that change')
@click.option('--output', '-o', type=click.Path(), help='Save output to file')
@click.pass_obj
def context(config, files, hide_unchanged, output):
    """Print the render context that templates receive, as JSON."""
    hide_unchanged = hide_unchanged or config.hide_unchanged
    
    try:
        plan_paths = resolve_plan_files(files)
        logger.debug(f"Resolved plan files: {plan_paths}")
        render_context = build_context(
            plan_paths,
            include_unchanged=not hide_unchanged,
            full_depth=config.full_depth,
        )
        write_output(json.dumps(render_context.to_template_data(), indent=2, ensure_ascii=False), output)
    
    except FileNotFoundError as e:
        click.echo(format_error(f"Failed to parse plan. {e}"), err=True)
        sys.exit(1)
    except TfPlanFormatError as e:
        click.echo(format_error(f"Failed to parse plan. {e}"), err=True)
        sys.exit(1)
