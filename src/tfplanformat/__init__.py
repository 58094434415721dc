"""tf-plan-format - render Terraform plan JSON as templated, per-attribute change reports."""

from typing import Iterable, Optional
from .analysis.aggregator import aggregate_plans
from .contracts.render_context import RenderContext
from .report.context_builder import build_render_context
from .report.templates import render_template, render_github
from .utils.logging import setup_logging, get_logger
from .utils.errors import TfPlanFormatError

__version__ = "0.1.0"

__all__ = ["build_context", "format_plans"]

setup_logging()
logger = get_logger("core")


def build_context(plan_paths: Iterable[str], include_unchanged: bool = True, full_depth: bool = False) -> RenderContext:
    """
    Process plan files in order and build their render context.
    
    Args:
        plan_paths: Plan file paths, already discovered and ordered
        include_unchanged: Keep lines for unchanged attributes
        full_depth: Expand unchanged nested values leaf by leaf
        
    Returns:
        RenderContext
        
    Raises:
        TfPlanFormatError: On the first failing file
    """
    plan_paths = list(plan_paths)
    logger.info(f"Formatting {len(plan_paths)} plan files")
    try:
        results = aggregate_plans(plan_paths, full_depth=full_depth)
        return build_render_context(results, include_unchanged=include_unchanged)
    except TfPlanFormatError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error while building render context: {e}", exc_info=True)
        raise TfPlanFormatError(f"Formatting failed: {e}") from e


def format_plans(
    plan_paths: Iterable[str],
    template: Optional[str] = None,
    engine: str = "jinja2",
    include_unchanged: bool = True,
    full_depth: bool = False,
) -> str:
    """
    Render plan files through a template.
    
    Args:
        plan_paths: Plan file paths, already discovered and ordered
        template: Template source; the GitHub markdown template when None
        engine: Template engine name
        include_unchanged: Keep lines for unchanged attributes
        full_depth: Expand unchanged nested values leaf by leaf
        
    Returns:
        Rendered report
        
    Raises:
        TfPlanFormatError: If any plan fails to load, parse or classify, or the template fails
    """
    try:
        context = build_context(plan_paths, include_unchanged=include_unchanged, full_depth=full_depth)
        if template is None:
            return render_github(context)
        return render_template(context, template, engine=engine)
    except TfPlanFormatError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error while formatting plans: {e}", exc_info=True)
        raise TfPlanFormatError(f"Formatting failed: {e}") from e
