"""Flatten plan results into the render context consumed by templates."""

from typing import Iterable, List, Tuple
from ..analysis.aggregator import PlanResult, ResourceResult
from ..analysis.diff_engine import DiffKind, DiffNode, PathKey
from ..contracts.render_context import RenderContext, PlanEntry, ResourceEntry, DiffLine
from ..utils.logging import get_logger

logger = get_logger("report.context_builder")

_EMPTY_CONTAINERS = {"{}", "[]", None}


def build_render_context(results: Iterable[PlanResult], include_unchanged: bool = True) -> RenderContext:
    """
    Build the render context for a set of plan results.

    Plan and resource order is preserved exactly as given.

    Args:
        results: Plan results in discovery order
        include_unchanged: Keep lines for unchanged attributes

    Returns:
        RenderContext
    """
    plans = [build_plan_entry(result, include_unchanged=include_unchanged) for result in results]
    logger.debug(f"Built render context for {len(plans)} plans")
    return RenderContext(plans=plans)


def build_plan_entry(result: PlanResult, include_unchanged: bool = True) -> PlanEntry:
    """Build one plan entry."""
    return PlanEntry(
        source_path=result.source_path,
        has_changes=result.has_changes,
        resources=[build_resource_entry(r, include_unchanged=include_unchanged) for r in result.resources],
    )


def build_resource_entry(resource: ResourceResult, include_unchanged: bool = True) -> ResourceEntry:
    """Build one resource entry with its flattened diff lines."""
    lines = flatten_diff(resource.diff)
    if not include_unchanged:
        lines = [line for line in lines if line.changed]
    return ResourceEntry(icon=resource.kind.icon, address=resource.change.address, lines=lines)


def flatten_diff(node: DiffNode) -> List[DiffLine]:
    """
    Flatten a diff tree into lines, one per leaf, in tree order.

    Nodes with children are recursed into; collapsed nodes yield a single line
    carrying the whole rendered value.
    """
    lines: List[DiffLine] = []
    if node.is_leaf and node.kind != DiffKind.CHANGED and _EMPTY_CONTAINERS.issuperset((node.before_display, node.after_display)):
        return lines
    _walk(node, (), lines)
    return lines


def format_path(path: Tuple[PathKey, ...]) -> str:
    """Render a key path: mapping keys dotted, sequence indices bracketed."""
    rendered = ""
    for key in path:
        if isinstance(key, int):
            rendered += f"[{key}]"
        elif rendered:
            rendered += f".{key}"
        else:
            rendered = key
    return rendered


def _walk(node: DiffNode, path: Tuple[PathKey, ...], lines: List[DiffLine]) -> None:
    if node.children:
        for key, child in node.children:
            _walk(child, path + (key,), lines)
        return
    lines.append(_line(node, format_path(path)))


def _line(node: DiffNode, path: str) -> DiffLine:
    if node.kind == DiffKind.CHANGED:
        return DiffLine(path=path, before=node.before_display, after=node.after_display)
    if node.kind == DiffKind.ADDED:
        return DiffLine(path=path, after=node.after_display, added=True)
    if node.kind == DiffKind.REMOVED:
        return DiffLine(path=path, before=node.before_display, removed=True)
    return DiffLine(path=path, before=node.before_display)
