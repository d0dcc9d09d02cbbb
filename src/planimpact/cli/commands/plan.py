"""Plan command - estimate the footprint of a Terraform plan."""

import sys
from pathlib import Path
import click
from ...config import load_config
from ...presentation.planview import SORT_KEYS
from ...report import FORMATS, generate_markdown, render
from ...utils.errors import PlanImpactError
from ...utils.logging import get_logger
from ..utils import format_error, resolve_file_path, write_output

logger = get_logger("cli.plan")


@click.command()
@click.option('--file', 'plan_file', type=click.Path(), help='terraform show -json plan file')
@click.option('--from-terraform', is_flag=True, help='Read the plan from the local terraform show -json')
@click.option('--catalog-file', type=click.Path(), help='Use a saved catalog snapshot instead of the catalog API')
@click.option('--format', 'output_format', type=click.Choice(FORMATS, case_sensitive=False), help='Output format')
@click.option('--sort', 'sort_key', type=click.Choice(SORT_KEYS, case_sensitive=False), help='Sort rows by co2 or water')
@click.option('--output', '-o', type=click.Path(), help='Save output to file')
@click.option('--config', 'config_path', type=click.Path(), help='Config file layered over the defaults')
@click.option('--quiet', is_flag=True, help='Suppress progress messages')
def plan(plan_file, from_terraform, catalog_file, output_format, sort_key, output, config_path, quiet):
    """
    Estimate monthly kgCO2e and water impact of a Terraform plan.
    
    Generate the input with: terraform show -json plan.tfplan > plan.json
    """
    from ... import estimate_plan
    
    if plan_file and from_terraform:
        click.echo(format_error("Use either --file or --from-terraform, not both"), err=True)
        sys.exit(1)
    if not plan_file and not from_terraform:
        click.echo(format_error("Provide --file or --from-terraform"), err=True)
        sys.exit(1)
    
    try:
        plan_path = resolve_file_path(plan_file) if plan_file else None
        catalog_path = resolve_file_path(catalog_file) if catalog_file else None
    except FileNotFoundError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    try:
        config = load_config(config_path)
        output_defaults = config.get("output", {})
        output_format = output_format or output_defaults.get("format", "table")
        output_format = output_format.strip().lower()
        sort_key = (sort_key or output_defaults.get("sort", "co2")).strip().lower()
        
        if not quiet:
            source = plan_path if plan_path else "terraform show -json"
            catalog_source = catalog_path if catalog_path else config["catalog"]["api_base_url"]
            click.echo(f"Processing plan {source} against catalog {catalog_source}", err=True)
        
        report = estimate_plan(
            plan_json_path=plan_path,
            catalog_path=catalog_path,
            from_terraform=from_terraform,
            config=config
        )
        if output_format == "markdown" and output:
            generate_markdown(report, Path(output), sort_key)
            if not quiet:
                click.echo(f"Output saved to: {output}", err=True)
        else:
            write_output(render(report, output_format, sort_key), output, quiet)
    
    except PlanImpactError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Estimation failed: {e}"), err=True)
        sys.exit(1)
