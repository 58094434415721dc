from .render_context import RenderContext, PlanEntry, ResourceEntry, DiffLine, format_line

__all__ = [
    "RenderContext",
    "PlanEntry",
    "ResourceEntry",
    "DiffLine",
    "format_line",
]
