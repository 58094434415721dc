"""Load and validate Terraform plan JSON."""

import json
from pathlib import Path
from typing import Dict, Any, Optional
from ..utils.errors import PlanLoadError, MalformedPlanError
from ..utils.logging import get_logger
from .plan_validator import validate_plan_structure, get_plan_summary

logger = get_logger("ingest.plan_loader")


def load_plan_json(plan_path: str) -> Dict[str, Any]:
    """
    Load and validate Terraform plan JSON file.
    
    Args:
        plan_path: Path to Terraform plan JSON file
        
    Returns:
        Parsed and validated plan data
        
    Raises:
        PlanLoadError: If the file cannot be read
        MalformedPlanError: If the file is not a valid plan document
    """
    path = Path(plan_path)
    
    if not path.exists():
        raise PlanLoadError(
            "Plan file not found. "
            "Generate a plan using: terraform show -json plan.tfplan > plan.json",
            source_path=str(plan_path),
        )
    
    if not path.is_file():
        raise PlanLoadError("Path is not a file", source_path=str(plan_path))
    
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise PlanLoadError(f"Error reading plan file: {e}", source_path=str(plan_path)) from e
    
    plan_data = load_plan_text(text, source_path=str(plan_path))
    
    summary = get_plan_summary(plan_data)
    logger.info(
        f"Loaded Terraform plan from {plan_path} "
        f"(version: {summary['terraform_version']}, "
        f"resources: {summary['resource_count']})"
    )
    
    return plan_data


def load_plan_text(text: str, source_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Decode and validate raw plan JSON text.
    
    Args:
        text: Raw plan JSON document
        source_path: Where the text came from, for error context
        
    Returns:
        Parsed and validated plan data
        
    Raises:
        MalformedPlanError: If the text is not valid JSON or not a plan document
    """
    try:
        plan_data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedPlanError(
            f"Invalid JSON in plan file: {e}",
            source_path=source_path,
        ) from e
    except RecursionError:
        raise MalformedPlanError(
            "Plan JSON is nested too deeply to decode",
            source_path=source_path,
        ) from None

    validate_plan_structure(plan_data, source_path=source_path)
    
    if "resource_changes" not in plan_data:
        logger.warning("Plan JSON missing 'resource_changes' field - treating as empty plan")
        plan_data["resource_changes"] = []
    
    return plan_data
