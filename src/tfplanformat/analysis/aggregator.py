"""Collect per-resource diff and classification results into per-file plan results."""

from typing import Iterable, List
from pydantic import BaseModel, Field
from .classifier import ChangeKind, classify
from .diff_engine import DiffNode, diff_resource
from ..ingest.models import ResourceChange
from ..ingest.plan_loader import load_plan_json
from ..ingest.plan_parser import parse_plan
from ..utils.errors import MalformedPlanError, TfPlanFormatError
from ..utils.logging import get_logger

logger = get_logger("analysis.aggregator")


class ResourceResult(BaseModel):
    """One resource's parsed change, its diff and its change kind."""
    change: ResourceChange = Field(..., description="Parsed resource change")
    diff: DiffNode = Field(..., description="Structural before/after diff")
    kind: ChangeKind = Field(..., description="Classified change kind")


class PlanResult(BaseModel):
    """Outcome for one plan file, resources in document order."""
    source_path: str = Field(..., description="Plan file path as supplied by discovery")
    resources: List[ResourceResult] = Field(default_factory=list, description="Per-resource results in document order")

    @property
    def has_changes(self) -> bool:
        """True iff any resource is not a no-op."""
        return any(r.kind != ChangeKind.NO_OP for r in self.resources)


def build_resource_result(change: ResourceChange, full_depth: bool = False) -> ResourceResult:
    """
    Classify and diff one resource change.
    
    Raises:
        UnknownActionCombinationError: If the action list is not classifiable
        MalformedPlanError: If before/after absence contradicts the change kind
    """
    kind = classify(change.actions, address=change.address)
    
    if change.before is None and kind != ChangeKind.CREATE:
        raise MalformedPlanError(
            f"Resource {change.address} has no 'before' state but its actions {change.actions} are not a create",
            address=change.address,
        )
    if change.after is None and kind != ChangeKind.DELETE:
        raise MalformedPlanError(
            f"Resource {change.address} has no 'after' state but its actions {change.actions} are not a delete",
            address=change.address,
        )
    
    # no-op resources list their current attributes without diffing
    diff = diff_resource(change, full_depth=full_depth, static=kind == ChangeKind.NO_OP)
    return ResourceResult(change=change, diff=diff, kind=kind)


def build_plan_result(source_path: str, changes: Iterable[ResourceChange], full_depth: bool = False) -> PlanResult:
    """Build a PlanResult, preserving resource order; the first failure aborts."""
    resources = [build_resource_result(change, full_depth=full_depth) for change in changes]
    return PlanResult(source_path=source_path, resources=resources)


def process_plan_file(plan_path: str, full_depth: bool = False) -> PlanResult:
    """
    Load, parse, classify and diff one plan file.
    
    Args:
        plan_path: Path to a Terraform plan JSON file
        full_depth: Keep unchanged nested subtrees expanded in diffs
        
    Returns:
        PlanResult for the file
        
    Raises:
        TfPlanFormatError: On the first failure, with source_path set to the file
    """
    try:
        plan_data = load_plan_json(plan_path)
        changes = parse_plan(plan_data, source_path=plan_path)
        result = build_plan_result(plan_path, changes, full_depth=full_depth)
    except TfPlanFormatError as e:
        if e.source_path is None:
            e.source_path = plan_path
        raise
    
    logger.info(
        f"Processed {plan_path}: {len(result.resources)} resources, "
        f"{'changes' if result.has_changes else 'no changes'}"
    )
    return result


def aggregate_plans(plan_paths: Iterable[str], full_depth: bool = False) -> List[PlanResult]:
    """
    Process plan files in the order given.
    
    Files are independent units: resources are never merged or deduplicated
    across files, even when two files share an address.
    """
    return [process_plan_file(path, full_depth=full_depth) for path in plan_paths]
