"""Pydantic models for the render context handed to templates (stable, explicit)."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

ARROW = " -> "


class DiffLine(BaseModel):
    """
    One rendered attribute line.
    
    Both ``before`` and ``after`` are set only for a changed path. An added
    path sets ``after`` only, a removed path sets ``before`` only, and an
    unchanged path sets ``before`` only with both flags false.
    """
    path: str = Field(..., description="Attribute path, e.g. tags.Name or ingress[0].port")
    before: Optional[str] = Field(None, description="Rendered before value")
    after: Optional[str] = Field(None, description="Rendered after value")
    added: bool = Field(default=False, description="Path exists only after the change")
    removed: bool = Field(default=False, description="Path exists only before the change")

    @property
    def changed(self) -> bool:
        return self.added or self.removed or (self.before is not None and self.after is not None)


class ResourceEntry(BaseModel):
    """One resource in a plan entry."""
    icon: str = Field(..., description="Change kind icon")
    address: str = Field(..., description="Resource address")
    lines: List[DiffLine] = Field(default_factory=list, description="Rendered attribute lines in tree order")


class PlanEntry(BaseModel):
    """One plan file in the render context."""
    source_path: str = Field(..., description="Plan file path")
    has_changes: bool = Field(..., description="Whether any resource is not a no-op")
    resources: List[ResourceEntry] = Field(default_factory=list, description="Resources in document order")


class RenderContext(BaseModel):
    """Render context contract - field names and order are relied on by templates."""
    plans: List[PlanEntry] = Field(default_factory=list, description="Plan entries in discovery order")

    def to_template_data(self) -> Dict[str, Any]:
        """Plain data passed to template engines."""
        return self.model_dump()


def format_line(line: Any) -> str:
    """
    Format a line as ``path: before -> after``, or ``path: value`` when only one side is set.
    
    Accepts a DiffLine or its dumped dict form (as seen inside templates).
    """
    if isinstance(line, DiffLine):
        line = line.model_dump()
    before = line.get("before")
    after = line.get("after")
    prefix = f"{line['path']}: " if line.get("path") else ""
    if before is not None and after is not None:
        return f"{prefix}{before}{ARROW}{after}"
    return f"{prefix}{after if after is not None else before}"
