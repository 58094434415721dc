"""Structural diff of two JSON value trees with sensitive-value redaction."""

from enum import Enum
from typing import Any, List, Optional, Tuple, Union
from pydantic import BaseModel, Field
from ..ingest.models import ResourceChange
from ..ingest.sensitivity import SensitivityMap
from ..ingest.values import ABSENT, REDACTED, ValueKind, kind_of, values_equal, render_value
from ..utils.errors import MalformedPlanError

# Mapping keys are str, sequence indices are int
PathKey = Union[str, int]


class DiffKind(str, Enum):
    """Outcome of comparing one path."""
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


class DiffNode(BaseModel):
    """Diff result for one path; composite paths carry ordered children."""
    kind: DiffKind = Field(..., description="Outcome for this path")
    before_display: Optional[str] = Field(None, description="Rendered before value, or the redaction marker")
    after_display: Optional[str] = Field(None, description="Rendered after value, or the redaction marker")
    children: List[Tuple[PathKey, "DiffNode"]] = Field(default_factory=list, description="Ordered (key, node) pairs")

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def has_changes(self) -> bool:
        return self.kind != DiffKind.UNCHANGED


DiffNode.model_rebuild()


def diff_resource(change: ResourceChange, full_depth: bool = False, static: bool = False) -> DiffNode:
    """
    Diff a resource's before/after state; None on either side means absent.

    Args:
        change: Parsed resource change
        full_depth: Expand every composite node instead of collapsing
        static: List the proposed state as-is (every path unchanged), used for no-op resources

    Returns:
        Root DiffNode

    Raises:
        MalformedPlanError: If the state is nested too deeply to diff
    """
    before = ABSENT if change.before is None else change.before
    after = ABSENT if change.after is None else change.after
    if static:
        before = after

    try:
        return diff_values(before, after, change.sensitivity, full_depth=full_depth)
    except RecursionError:
        raise MalformedPlanError(
            f"Resource {change.address} state is nested too deeply to diff",
            address=change.address,
        ) from None


def diff_values(
    before: Any,
    after: Any,
    sensitivity: Optional[SensitivityMap] = None,
    path: Tuple[PathKey, ...] = (),
    full_depth: bool = False,
) -> DiffNode:
    """
    Compute the structural diff between two values.

    Mappings are compared over the union of their keys (sorted); a key missing
    on one side compares as JSON null. Sequences are compared by index with no
    alignment, so a reordering shows up as per-index changes. A sensitive path
    becomes a single leaf whose displays are redacted, but its kind still
    reflects the real values.

    Unchanged subtrees below the top level collapse to one leaf unless
    ``full_depth`` is set.

    Args:
        before: Prior value, or ABSENT
        after: Proposed value, or ABSENT
        sensitivity: Sensitivity tree rooted at this path
        path: Keys leading to this path (empty at the root)
        full_depth: Expand every composite node instead of collapsing

    Returns:
        DiffNode for this path

    Raises:
        ValueError: If both sides are absent
    """
    if before is ABSENT and after is ABSENT:
        raise ValueError(f"Nothing to diff at {path or '<root>'}: both sides absent")

    if sensitivity is None:
        sensitivity = SensitivityMap()

    if sensitivity.sensitive:
        return _redacted_leaf(before, after)

    expand = full_depth or not path

    if before is ABSENT:
        return _one_sided(DiffKind.ADDED, after, sensitivity, path, expand, full_depth)
    if after is ABSENT:
        return _one_sided(DiffKind.REMOVED, before, sensitivity, path, expand, full_depth)

    if values_equal(before, after):
        return _unchanged(before, sensitivity, path, expand, full_depth)

    before_kind = kind_of(before)
    after_kind = kind_of(after)

    if before_kind == after_kind == ValueKind.MAPPING:
        children = []
        for key in sorted(set(before) | set(after)):
            child = diff_values(
                before.get(key),
                after.get(key),
                sensitivity.child(key),
                path + (key,),
                full_depth,
            )
            children.append((key, child))
        return _from_children(before, after, sensitivity, children)

    if before_kind == after_kind == ValueKind.SEQUENCE:
        children = []
        for index in range(max(len(before), len(after))):
            child = diff_values(
                before[index] if index < len(before) else ABSENT,
                after[index] if index < len(after) else ABSENT,
                sensitivity.child(str(index)),
                path + (index,),
                full_depth,
            )
            children.append((index, child))
        return _from_children(before, after, sensitivity, children)

    return DiffNode(
        kind=DiffKind.CHANGED,
        before_display=render_value(before, sensitivity),
        after_display=render_value(after, sensitivity),
    )


def _redacted_leaf(before: Any, after: Any) -> DiffNode:
    if before is ABSENT:
        return DiffNode(kind=DiffKind.ADDED, after_display=REDACTED)
    if after is ABSENT:
        return DiffNode(kind=DiffKind.REMOVED, before_display=REDACTED)
    kind = DiffKind.UNCHANGED if values_equal(before, after) else DiffKind.CHANGED
    return DiffNode(kind=kind, before_display=REDACTED, after_display=REDACTED)


def _one_sided(
    kind: DiffKind,
    value: Any,
    sensitivity: SensitivityMap,
    path: Tuple[PathKey, ...],
    expand: bool,
    full_depth: bool,
) -> DiffNode:
    display = render_value(value, sensitivity)
    children = []
    if expand:
        for key, item in _items(value):
            if kind == DiffKind.ADDED:
                child = diff_values(ABSENT, item, sensitivity.child(str(key)), path + (key,), full_depth)
            else:
                child = diff_values(item, ABSENT, sensitivity.child(str(key)), path + (key,), full_depth)
            children.append((key, child))

    if kind == DiffKind.ADDED:
        return DiffNode(kind=kind, after_display=display, children=children)
    return DiffNode(kind=kind, before_display=display, children=children)


def _unchanged(
    value: Any,
    sensitivity: SensitivityMap,
    path: Tuple[PathKey, ...],
    expand: bool,
    full_depth: bool,
) -> DiffNode:
    display = render_value(value, sensitivity)
    children = []
    if expand:
        for key, item in _items(value):
            children.append((key, diff_values(item, item, sensitivity.child(str(key)), path + (key,), full_depth)))
    return DiffNode(kind=DiffKind.UNCHANGED, before_display=display, after_display=display, children=children)


def _from_children(
    before: Any,
    after: Any,
    sensitivity: SensitivityMap,
    children: List[Tuple[PathKey, DiffNode]],
) -> DiffNode:
    changed = any(child.has_changes for _, child in children)
    return DiffNode(
        kind=DiffKind.CHANGED if changed else DiffKind.UNCHANGED,
        before_display=render_value(before, sensitivity),
        after_display=render_value(after, sensitivity),
        children=children,
    )


def _items(value: Any) -> List[Tuple[PathKey, Any]]:
    if isinstance(value, dict):
        return [(key, value[key]) for key in sorted(value)]
    if isinstance(value, list):
        return list(enumerate(value))
    return []
