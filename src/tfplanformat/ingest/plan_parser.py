"""Translate raw plan JSON into ordered ResourceChange records."""

from typing import Dict, Any, List, Optional
from pydantic import ValidationError
from .models import ResourceChange
from .plan_loader import load_plan_text
from .plan_validator import validate_resource_change
from .sensitivity import merge_sensitivity
from ..utils.errors import MalformedPlanError
from ..utils.logging import get_logger

logger = get_logger("ingest.plan_parser")


def parse_plan(plan_data: Dict[str, Any], source_path: Optional[str] = None) -> List[ResourceChange]:
    """
    Parse a validated plan document into resource changes.
    
    Resources keep the order they have in the document. The first malformed
    entry aborts parsing of the whole plan.
    
    Args:
        plan_data: Plan JSON as returned by load_plan_json
        source_path: Plan file path, for error context
        
    Returns:
        Ordered list of ResourceChange
        
    Raises:
        MalformedPlanError: If a resource change is missing required fields or
            carries unreadable sensitivity markers
    """
    resource_changes = plan_data.get("resource_changes") or []
    
    changes = []
    for index, resource in enumerate(resource_changes):
        validate_resource_change(resource, index=index, source_path=source_path)
        try:
            changes.append(_parse_resource_change(resource, source_path=source_path))
        except ValidationError as e:
            raise MalformedPlanError(
                f"Resource {resource['address']} has invalid fields: {e}",
                source_path=source_path,
                address=resource["address"],
            ) from e
    
    logger.debug(f"Parsed {len(changes)} resource changes from {source_path or 'plan'}")
    return changes


def parse_plan_text(text: str, source_path: Optional[str] = None) -> List[ResourceChange]:
    """Decode raw plan JSON text and parse its resource changes."""
    return parse_plan(load_plan_text(text, source_path=source_path), source_path=source_path)


def _parse_resource_change(resource: Dict[str, Any], source_path: Optional[str] = None) -> ResourceChange:
    change = resource["change"]
    address = resource["address"]
    try:
        sensitivity = merge_sensitivity(
            change.get("before_sensitive"),
            change.get("after_sensitive"),
        )
    except RecursionError:
        raise MalformedPlanError(
            f"Resource {address} sensitivity is nested too deeply",
            source_path=source_path,
            address=address,
        ) from None
    except ValueError as e:
        # Never fall back to "not sensitive" on a marker we cannot read
        raise MalformedPlanError(
            f"Resource {address} has malformed 'before_sensitive'/'after_sensitive': {e}",
            source_path=source_path,
            address=address,
        ) from e
    return ResourceChange(
        address=resource["address"],
        actions=list(change["actions"]),
        before=change["before"],
        after=change["after"],
        sensitivity=sensitivity,
        mode=resource.get("mode"),
        type=resource.get("type"),
        name=resource.get("name"),
        module_address=resource.get("module_address"),
        provider_name=resource.get("provider_name"),
    )
