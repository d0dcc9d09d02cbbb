"""Actual command - measured footprint of an organization."""

import sys
import click
from ...config import load_config, load_credentials
from ...footprint import (
    ImpactQuery,
    parse_csv,
    parse_date,
    parse_product_categories,
    parse_service_categories,
)
from ...report import ACTUAL_FORMATS, render_actual
from ...utils.errors import PlanImpactError
from ...utils.logging import get_logger
from ..utils import format_error, write_output

logger = get_logger("cli.actual")


@click.command()
@click.option('--org', 'organization_id', help='Organization ID (default: SCW_ORGANIZATION_ID)')
@click.option('--start', help='Period start (YYYY-MM-DD or RFC3339)')
@click.option('--end', help='Period end (YYYY-MM-DD or RFC3339)')
@click.option('--project', 'projects', multiple=True, help='Project ID filter (repeatable, comma-separated)')
@click.option('--region', 'regions', multiple=True, help='Region filter (repeatable, comma-separated)')
@click.option('--zone', 'zones', multiple=True, help='Zone filter (repeatable, comma-separated)')
@click.option('--service-category', help='Service categories (comma-separated)')
@click.option('--product-category', help='Product categories (comma-separated)')
@click.option('--format', 'output_format', type=click.Choice(ACTUAL_FORMATS, case_sensitive=False),
              default='table', help='Output format')
@click.option('--output', '-o', type=click.Path(), help='Save output to file')
@click.option('--config', 'config_path', type=click.Path(), help='Config file layered over the defaults')
@click.option('--quiet', is_flag=True, help='Suppress progress messages')
def actual(organization_id, start, end, projects, regions, zones, service_category,
           product_category, output_format, output, config_path, quiet):
    """
    Show the measured footprint reported by the environmental footprint API.
    
    Needs SCW_ACCESS_KEY and SCW_SECRET_KEY in the environment.
    """
    from ... import create_footprint_client
    
    credentials = load_credentials()
    org = credentials.resolve_organization(organization_id)
    if not org:
        click.echo(format_error(
            "could not resolve organization id",
            "use --org or SCW_ORGANIZATION_ID"
        ), err=True)
        sys.exit(1)
    
    try:
        query = ImpactQuery(
            organization_id=org,
            start_date=parse_date(start) if start else None,
            end_date=parse_date(end) if end else None,
            project_ids=parse_csv(*projects),
            regions=parse_csv(*regions),
            zones=parse_csv(*zones),
            service_categories=parse_service_categories(service_category),
            product_categories=parse_product_categories(product_category)
        )
        if query.start_date and query.end_date and query.start_date > query.end_date:
            raise PlanImpactError("--start must not be after --end")
        
        config = load_config(config_path)
        client = create_footprint_client(config, credentials)
        if not quiet:
            click.echo(f"Querying measured footprint of organization {org}", err=True)
        result = client.query_impact_data(query)
        write_output(render_actual(result, output_format), output, quiet)
    
    except PlanImpactError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
