"""Per-path sensitivity tree built from Terraform's before/after_sensitive fields."""

from typing import Any, Dict, Iterator, Tuple
from pydantic import BaseModel, Field


class SensitivityMap(BaseModel):
    """
    Sensitivity tree mirroring the attribute structure.

    A path without an explicit entry inherits its parent's flag, so a single
    ``sensitive=True`` node covers everything below it.
    """
    sensitive: bool = Field(default=False, description="Whether this path is sensitive")
    children: Dict[str, "SensitivityMap"] = Field(default_factory=dict, description="Explicit child entries keyed by attribute name or index")

    def child(self, key: str) -> "SensitivityMap":
        """Return the entry for ``key``, inheriting this node's flag when absent."""
        explicit = self.children.get(key)
        if explicit is not None:
            return explicit
        if self.sensitive:
            return _SENSITIVE_LEAF
        return _PLAIN_LEAF


SensitivityMap.model_rebuild()

_SENSITIVE_LEAF = SensitivityMap(sensitive=True)
_PLAIN_LEAF = SensitivityMap(sensitive=False)


def merge_sensitivity(before: Any, after: Any, before_inherited: bool = False, after_inherited: bool = False) -> SensitivityMap:
    """
    Merge Terraform's ``before_sensitive`` and ``after_sensitive`` trees.

    Each side is a JSON value: ``true`` marks the node and all descendants,
    ``false`` clears the node, and an object or array inherits the side's flag
    and recurses per key or index. The two sides are combined per path with
    logical OR.

    Args:
        before: Raw ``before_sensitive`` subtree (or None when absent)
        after: Raw ``after_sensitive`` subtree (or None when absent)
        before_inherited: Flag inherited from the before-side parent
        after_inherited: Flag inherited from the after-side parent

    Returns:
        Merged SensitivityMap

    Raises:
        ValueError: If a marker is not a bool, object or array
    """
    before_flag = _own_flag(before, before_inherited)
    after_flag = _own_flag(after, after_inherited)

    before_children = dict(_entries(before))
    after_children = dict(_entries(after))
    keys = list(before_children) + [k for k in after_children if k not in before_children]

    children = {}
    for key in keys:
        children[key] = merge_sensitivity(
            before_children.get(key),
            after_children.get(key),
            before_flag,
            after_flag,
        )

    return SensitivityMap(sensitive=before_flag or after_flag, children=children)


def _own_flag(raw: Any, inherited: bool) -> bool:
    # None means no entry for this path on this side
    if raw is not None and not isinstance(raw, (bool, dict, list)):
        raise ValueError(f"sensitivity marker must be a bool, object or array, got {type(raw).__name__}")
    if isinstance(raw, bool):
        return raw
    return inherited


def _entries(raw: Any) -> Iterator[Tuple[str, Any]]:
    if isinstance(raw, dict):
        yield from ((str(key), value) for key, value in raw.items())
    elif isinstance(raw, list):
        yield from ((str(index), value) for index, value in enumerate(raw))
