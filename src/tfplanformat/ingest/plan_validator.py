"""Validate Terraform plan JSON structure."""

from typing import Dict, Any, Optional
from ..utils.errors import MalformedPlanError
from ..utils.logging import get_logger

logger = get_logger("ingest.plan_validator")

SUPPORTED_FORMAT_VERSIONS = ["0.1", "0.2", "1.0", "1.1", "1.2"]


def validate_plan_structure(plan_data: Any, source_path: Optional[str] = None) -> None:
    """
    Validate Terraform plan JSON structure.
    
    Args:
        plan_data: Parsed Terraform plan JSON
        source_path: Plan file path, for error context
        
    Raises:
        MalformedPlanError: If plan structure is invalid
    """
    if not isinstance(plan_data, dict):
        raise MalformedPlanError(
            "Plan JSON must be an object. "
            "Please ensure you're using a valid Terraform plan JSON file.",
            source_path=source_path,
        )
    
    format_version = plan_data.get("format_version")
    if format_version is None:
        logger.warning("Plan JSON has no 'format_version' field")
    elif not isinstance(format_version, str):
        raise MalformedPlanError(
            "Plan 'format_version' must be a string. "
            "This may not be a valid Terraform plan JSON file.",
            source_path=source_path,
        )
    else:
        version_major_minor = ".".join(format_version.split(".")[:2])
        if version_major_minor not in SUPPORTED_FORMAT_VERSIONS:
            logger.warning(
                f"Plan format version '{format_version}' may not be fully supported. "
                f"Supported versions: {', '.join(SUPPORTED_FORMAT_VERSIONS)}"
            )
    
    # Terraform omits resource_changes entirely for plans with no resources
    if "resource_changes" in plan_data and not isinstance(plan_data["resource_changes"], list):
        raise MalformedPlanError(
            "Plan 'resource_changes' must be a list. "
            "This may not be a valid Terraform plan JSON file.",
            source_path=source_path,
        )
    
    terraform_version = plan_data.get("terraform_version")
    if terraform_version and not isinstance(terraform_version, str):
        raise MalformedPlanError(
            "Plan 'terraform_version' must be a string. "
            "This may not be a valid Terraform plan JSON file.",
            source_path=source_path,
        )
    
    logger.debug("Plan structure validation passed")


def validate_resource_change(resource: Any, index: int = 0, source_path: Optional[str] = None) -> None:
    """
    Validate a single resource change structure.
    
    Args:
        resource: Resource change entry
        index: Position in resource_changes, used when the address is unknown
        source_path: Plan file path, for error context
        
    Raises:
        MalformedPlanError: If a required field is missing or has the wrong shape
    """
    if not isinstance(resource, dict):
        raise MalformedPlanError(
            f"Resource change at index {index} must be an object",
            source_path=source_path,
        )
    
    address = resource.get("address")
    if not isinstance(address, str) or not address:
        raise MalformedPlanError(
            f"Resource change at index {index} is missing 'address'",
            source_path=source_path,
        )
    
    change = resource.get("change")
    if not isinstance(change, dict):
        raise MalformedPlanError(
            f"Resource {address} is missing 'change' object",
            source_path=source_path,
            address=address,
        )
    
    actions = change.get("actions")
    if not isinstance(actions, list) or not all(isinstance(a, str) for a in actions):
        raise MalformedPlanError(
            f"Resource {address} 'change.actions' must be a list of strings",
            source_path=source_path,
            address=address,
        )
    
    missing_fields = [field for field in ("before", "after") if field not in change]
    if missing_fields:
        raise MalformedPlanError(
            f"Resource {address} is missing required fields: "
            f"{', '.join('change.' + f for f in missing_fields)}",
            source_path=source_path,
            address=address,
        )


def get_plan_summary(plan_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract summary information from plan.
    
    Args:
        plan_data: Parsed Terraform plan JSON
        
    Returns:
        Dictionary with plan summary information
    """
    resource_changes = plan_data.get("resource_changes") or []
    
    summary = {
        "format_version": plan_data.get("format_version", "unknown"),
        "terraform_version": plan_data.get("terraform_version", "unknown"),
        "resource_count": len(resource_changes),
    }
    
    action_counts = {"create": 0, "read": 0, "update": 0, "delete": 0, "no-op": 0}
    
    for resource in resource_changes:
        if not isinstance(resource, dict):
            continue
        change = resource.get("change") or {}
        for action in change.get("actions") or []:
            if action in action_counts:
                action_counts[action] += 1
    
    summary["action_counts"] = action_counts
    
    return summary
