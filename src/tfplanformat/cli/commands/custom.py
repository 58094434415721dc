"""Custom command - render plans with a user-supplied template."""

import sys
from pathlib import Path
import click
from ... import format_plans
from ...report.templates import TemplateEngine
from ...utils.errors import TfPlanFormatError, TemplateRenderError
from ...utils.logging import get_logger
from ..utils import format_error, resolve_plan_files, write_output

logger = get_logger("cli.custom")


@click.command()
@click.option('--file', '-f', 'files', multiple=True, required=True, help='Plan JSON file path or glob, can be used multiple times')
@click.option('--engine', '-e', default=None, help='Template engine, possible options: [jinja2]')
@click.option('--template', '-t', help='Template string')
@click.option('--template-file', type=click.Path(exists=True, dir_okay=False), help='Read the template from a file')
@click.option('--hide-unchanged', is_flag=True, help='Only show attributes that change')
@click.option('--output', '-o', type=click.Path(), help='Save output to file')
@click.pass_obj
def custom(config, files, engine, template, template_file, hide_unchanged, output):
    """Render plans with a custom template."""
    if (template is None) == (template_file is None):
        raise click.UsageError("Provide exactly one of --template or --template-file")
    
    if engine is None:
        engine = config.engine
    hide_unchanged = hide_unchanged or config.hide_unchanged
    
    try:
        engine = TemplateEngine.parse(engine)
    except TemplateRenderError:
        click.echo(format_error(f"Invalid engine({engine})"), err=True)
        sys.exit(1)
    
    if template_file:
        try:
            template = Path(template_file).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            click.echo(format_error(f"Failed to read template file({template_file}). {e}"), err=True)
            sys.exit(1)

    try:
        plan_paths = resolve_plan_files(files)
        logger.debug(f"Resolved plan files: {plan_paths}")
        text = format_plans(
            plan_paths,
            template=template,
            engine=engine,
            include_unchanged=not hide_unchanged,
            full_depth=config.full_depth,
        )
        write_output(text, output)
    
    except FileNotFoundError as e:
        click.echo(format_error(f"Failed to parse plan. {e}"), err=True)
        sys.exit(1)
    except TemplateRenderError as e:
        click.echo(format_error(f"Failed to render template. {e}"), err=True)
        sys.exit(1)
    except TfPlanFormatError as e:
        click.echo(format_error(f"Failed to parse plan. {e}"), err=True)
        sys.exit(1)
