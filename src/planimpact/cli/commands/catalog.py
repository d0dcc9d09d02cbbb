"""Catalog command - save a snapshot of the public catalog for offline runs."""

import json
import sys
import click
from ...catalog import dump_products
from ...config import load_config
from ...utils.errors import PlanImpactError
from ...utils.logging import get_logger
from ..utils import format_error, write_output

logger = get_logger("cli.catalog")


@click.command()
@click.option('--output', '-o', type=click.Path(), help='Save snapshot to file')
@click.option('--config', 'config_path', type=click.Path(), help='Config file layered over the defaults')
@click.option('--quiet', is_flag=True, help='Suppress progress messages')
def catalog(output, config_path, quiet):
    """Fetch every catalog product and print it as JSON (usable with plan --catalog-file)."""
    from ... import create_catalog_client
    
    try:
        config = load_config(config_path)
        if not quiet:
            click.echo(f"Fetching catalog from {config['catalog']['api_base_url']}", err=True)
        products = create_catalog_client(config).list_all_products()
        write_output(json.dumps(dump_products(products), indent=2), output, quiet)
    except PlanImpactError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
