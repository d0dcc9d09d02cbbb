"""Validate Terraform plan JSON structure."""

from typing import Dict, Any
from ..utils.errors import PlanLoadError
from ..utils.logging import get_logger

logger = get_logger("ingest.plan_validator")

SUPPORTED_FORMAT_VERSIONS = ["0.1", "0.2", "1.0", "1.1", "1.2"]


def validate_plan_structure(plan_data: Dict[str, Any]) -> None:
    """
    Validate Terraform plan JSON structure.
    
    Args:
        plan_data: Parsed Terraform plan JSON
        
    Raises:
        PlanLoadError: If plan structure is invalid
    """
    if not isinstance(plan_data, dict):
        raise PlanLoadError(
            "Plan JSON must be an object. "
            "Generate one using: terraform show -json plan.tfplan > plan.json"
        )
    
    format_version = plan_data.get("format_version")
    if format_version is None:
        raise PlanLoadError(
            "Plan JSON missing required field: format_version. "
            "This doesn't appear to be a terraform show -json document."
        )
    if not isinstance(format_version, str):
        raise PlanLoadError("Plan 'format_version' must be a string.")
    
    version_major_minor = ".".join(format_version.split(".")[:2])
    if version_major_minor not in SUPPORTED_FORMAT_VERSIONS:
        logger.warning(
            f"Plan format version '{format_version}' may not be fully supported. "
            f"Supported versions: {', '.join(SUPPORTED_FORMAT_VERSIONS)}"
        )
    
    if "resource_changes" in plan_data and not isinstance(plan_data["resource_changes"], list):
        raise PlanLoadError("Plan 'resource_changes' must be a list.")
    
    variables = plan_data.get("variables")
    if variables is not None and not isinstance(variables, dict):
        raise PlanLoadError("Plan 'variables' must be an object.")
    
    logger.debug("Plan structure validation passed")


def get_plan_summary(plan_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract summary information from plan.
    
    Args:
        plan_data: Parsed Terraform plan JSON
        
    Returns:
        Dictionary with format version, terraform version, resource count and action counts
    """
    resource_changes = plan_data.get("resource_changes") or []
    
    action_counts = {"create": 0, "update": 0, "delete": 0, "replace": 0, "no-op": 0}
    for resource in resource_changes:
        if not isinstance(resource, dict):
            continue
        actions = (resource.get("change") or {}).get("actions") or []
        if "create" in actions and "delete" in actions:
            action_counts["replace"] += 1
            continue
        for action in actions:
            if action in action_counts:
                action_counts[action] += 1
    
    return {
        "format_version": plan_data.get("format_version", "unknown"),
        "terraform_version": plan_data.get("terraform_version", "unknown"),
        "resource_count": len(resource_changes),
        "action_counts": action_counts,
    }
