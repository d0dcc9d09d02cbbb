"""planimpact - Environmental footprint estimates for Terraform plans."""

from pathlib import Path
from typing import Optional, Union
from .catalog import CatalogClient, load_catalog_json
from .config import ScalewayCredentials, get_catalog_config, load_config, load_credentials
from .contracts.report import Report
from .estimate import build_report
from .footprint import FootprintClient
from .ingest import load_plan_json, load_plan_from_terraform, parse_resource_changes
from .mapping import resolve
from .utils.errors import EstimationError, PlanImpactError
from .utils.logging import setup_logging, get_logger

__version__ = "0.1.0"

__all__ = ["estimate_plan", "build_report", "resolve", "Report"]

setup_logging()
logger = get_logger("planimpact")

USER_AGENT = f"planimpact/{__version__}"


def estimate_plan(
    plan_json_path: Optional[Union[str, Path]] = None,
    catalog_path: Optional[Union[str, Path]] = None,
    config_path: Optional[Union[str, Path]] = None,
    from_terraform: bool = False,
    config: Optional[dict] = None
) -> Report:
    """
    Estimate the monthly footprint of a Terraform plan.
    
    Args:
        plan_json_path: `terraform show -json` file (ignored with from_terraform)
        catalog_path: Catalog snapshot; the public catalog API is queried when None
        config_path: Optional config file layered over the defaults
        from_terraform: Read the plan by running `terraform show -json`
        config: Already-loaded configuration (config_path is ignored when given)
        
    Returns:
        Estimate report
        
    Raises:
        PlanImpactError: If the plan, catalog or configuration cannot be loaded
    """
    try:
        if config is None:
            config = load_config(config_path)
        
        if from_terraform:
            timeout = config["plan"]["terraform_show_timeout_seconds"]
            plan_data = load_plan_from_terraform(timeout=timeout)
        elif plan_json_path is not None:
            plan_data = load_plan_json(plan_json_path)
        else:
            raise PlanImpactError("Provide a plan file or read the plan from terraform")
        
        changes = parse_resource_changes(plan_data)
        if not changes:
            logger.warning("No resource changes found in plan")
            return Report()
        
        if catalog_path is not None:
            products = load_catalog_json(catalog_path)
        else:
            products = create_catalog_client(config).list_all_products()
        
        return build_report(changes, products)
    
    except PlanImpactError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error during estimation: {e}", exc_info=True)
        raise EstimationError(f"Estimation failed: {e}") from e


def create_catalog_client(config: dict) -> CatalogClient:
    """Build a catalog client from the `catalog` config section."""
    catalog = get_catalog_config(config)
    return CatalogClient(
        base_url=catalog["api_base_url"],
        user_agent=catalog.get("user_agent") or USER_AGENT,
        timeout=catalog["timeout_seconds"],
        page_size=int(catalog["page_size"])
    )


def create_footprint_client(config: dict, credentials: Optional[ScalewayCredentials] = None) -> FootprintClient:
    """
    Build a measured-footprint client.
    
    The API base URL and User-Agent are shared with the catalog; credentials
    come from the SCW_* environment variables unless given.
    
    Raises:
        FootprintError: If the access key or secret key is missing
    """
    credentials = credentials or load_credentials()
    catalog = get_catalog_config(config)
    footprint = config.get("footprint", {})
    return FootprintClient(
        access_key=credentials.access_key,
        secret_key=credentials.secret_key,
        base_url=catalog["api_base_url"],
        user_agent=catalog.get("user_agent") or USER_AGENT,
        timeout=footprint.get("timeout_seconds", catalog["timeout_seconds"])
    )
