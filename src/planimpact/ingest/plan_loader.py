"""Load and validate Terraform plan JSON."""

import json
import subprocess
from pathlib import Path
from typing import Dict, Any, Union
from ..utils.errors import PlanLoadError
from ..utils.logging import get_logger
from .plan_validator import validate_plan_structure, get_plan_summary

logger = get_logger("ingest.plan_loader")

MAX_PLAN_FILE_BYTES = 50 << 20
TERRAFORM_SHOW_TIMEOUT = 120


def load_plan_json(plan_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load and validate a `terraform show -json` file.
    
    Args:
        plan_path: Path to Terraform plan JSON file
        
    Returns:
        Parsed and validated plan data
        
    Raises:
        PlanLoadError: If file cannot be loaded or is invalid
    """
    path = Path(plan_path)
    
    if not path.exists():
        raise PlanLoadError(
            f"Plan file not found: {plan_path}. "
            "Generate a plan using: terraform show -json plan.tfplan > plan.json"
        )
    
    if not path.is_file():
        raise PlanLoadError(f"Path is not a file: {plan_path}.")
    
    size = path.stat().st_size
    if size > MAX_PLAN_FILE_BYTES:
        raise PlanLoadError(
            f"Plan file too large: {size} bytes > {MAX_PLAN_FILE_BYTES} bytes"
        )
    
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise PlanLoadError(f"Error reading plan file: {e}") from e
    
    plan_data = load_plan_bytes(raw)
    
    summary = get_plan_summary(plan_data)
    logger.info(
        f"Loaded Terraform plan from {plan_path} "
        f"(version: {summary['terraform_version']}, "
        f"resources: {summary['resource_count']})"
    )
    return plan_data


def load_plan_bytes(data: bytes) -> Dict[str, Any]:
    """
    Decode and validate plan JSON held in memory.
    
    Raises:
        PlanLoadError: If the payload is too large, not JSON or not a plan
    """
    if len(data) > MAX_PLAN_FILE_BYTES:
        raise PlanLoadError(
            f"Plan payload too large: {len(data)} bytes > {MAX_PLAN_FILE_BYTES} bytes"
        )
    
    try:
        plan_data = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PlanLoadError(f"Invalid JSON in plan: {e}") from e
    
    validate_plan_structure(plan_data)
    
    if "resource_changes" not in plan_data:
        logger.warning("Plan JSON missing 'resource_changes' field - may be empty plan")
        plan_data["resource_changes"] = []
    
    return plan_data


def load_plan_from_terraform(timeout: int = TERRAFORM_SHOW_TIMEOUT) -> Dict[str, Any]:
    """
    Run `terraform show -json` in the current directory and load its output.
    
    Args:
        timeout: Seconds to wait for terraform before giving up
        
    Raises:
        PlanLoadError: If terraform is missing, fails or times out
    """
    logger.info("Reading plan from local terraform show -json")
    try:
        result = subprocess.run(
            ["terraform", "show", "-json"],
            capture_output=True,
            timeout=timeout
        )
    except FileNotFoundError as e:
        raise PlanLoadError("Could not run terraform show -json: terraform binary not found") from e
    except subprocess.TimeoutExpired as e:
        raise PlanLoadError(f"Could not run terraform show -json: timed out after {timeout}s") from e
    
    if result.returncode != 0:
        stderr_text = (result.stderr or b"").decode("utf-8", errors="replace").strip()
        if not stderr_text:
            stderr_text = f"exit status {result.returncode}"
        raise PlanLoadError(f"Could not run terraform show -json: {stderr_text}")
    
    return load_plan_bytes(result.stdout)
