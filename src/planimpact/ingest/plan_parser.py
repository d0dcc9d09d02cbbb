"""Decode Terraform plan JSON into resource change records."""

from typing import Dict, Any, List
from .models import ResourceChange
from ..utils.logging import get_logger

logger = get_logger("ingest.plan_parser")


def parse_resource_changes(plan_data: Dict[str, Any]) -> List[ResourceChange]:
    """
    Build ResourceChange records from a loaded plan.

    The plan variables `zone` and `region` become the default locality of
    every change. Missing or non-object before/after values become empty
    attribute maps.
    """
    default_zone = _plan_variable_string(plan_data, "zone")
    default_region = _plan_variable_string(plan_data, "region")
    
    changes = []
    for rc in plan_data.get("resource_changes") or []:
        if not isinstance(rc, dict):
            continue
        
        change = _as_mapping(rc.get("change"))
        actions = change.get("actions")
        if not isinstance(actions, list):
            actions = []
        
        changes.append(ResourceChange(
            address=str(rc.get("address") or ""),
            type=str(rc.get("type") or ""),
            actions=[str(a) for a in actions],
            before=_as_mapping(change.get("before")),
            after=_as_mapping(change.get("after")),
            zone=default_zone,
            region=default_region
        ))
    
    logger.debug(f"Decoded {len(changes)} resource change(s)")
    return changes


def _as_mapping(value: Any) -> Dict[str, Any]:
    if isinstance(value, dict):
        return value
    return {}


def _plan_variable_string(plan_data: Dict[str, Any], key: str) -> str:
    """Return a string plan variable value, or empty string."""
    variables = plan_data.get("variables")
    if not isinstance(variables, dict):
        return ""
    variable = variables.get(key)
    if not isinstance(variable, dict):
        return ""
    value = variable.get("value")
    return value if isinstance(value, str) else ""
