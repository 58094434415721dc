"""Report generation: render context building and template rendering."""

from .context_builder import build_render_context, flatten_diff, format_path
from .templates import GITHUB_MARKDOWN_TEMPLATE, TemplateEngine, render_template, render_github

__all__ = [
    "build_render_context",
    "flatten_diff",
    "format_path",
    "GITHUB_MARKDOWN_TEMPLATE",
    "TemplateEngine",
    "render_template",
    "render_github",
]
