"""Doctor command - diagnose configuration, terraform, catalog and API access."""

import shutil
import sys
from datetime import datetime, timezone
import click
from ...config import load_config, load_credentials
from ...footprint import ImpactQuery, trailing_window
from ...mapping import supported_resource_types
from ...utils.errors import ConfigError, FootprintError
from ...utils.logging import get_logger

logger = get_logger("cli.doctor")


@click.command()
@click.option('--config', 'config_path', type=click.Path(), help='Config file layered over the defaults')
def doctor(config_path):
    """Run diagnostics."""
    from ... import create_catalog_client, create_footprint_client

    failures = 0

    try:
        config = load_config(config_path)
        click.echo(f"[ok]   config: catalog api {config['catalog']['api_base_url']}")
    except ConfigError as e:
        click.echo(f"[fail] config: {e}")
        sys.exit(1)

    terraform = shutil.which("terraform")
    if terraform:
        click.echo(f"[ok]   terraform: {terraform}")
    else:
        click.echo("[warn] terraform: not found on PATH (--from-terraform unavailable)")

    client = create_catalog_client(config)
    if client.is_available():
        click.echo("[ok]   catalog: reachable")
    else:
        click.echo("[fail] catalog: unreachable (use --catalog-file for offline runs)")
        failures += 1

    credentials = load_credentials()
    missing = credentials.missing()
    if missing:
        click.echo(f"[warn] auth: missing: {','.join(missing)} (needed by actual)")
        click.echo("[skip] footprint: skipped (missing auth)")
    else:
        click.echo("[ok]   auth: ok")
        days = config["footprint"]["doctor_window_days"]
        start, end = trailing_window(datetime.now(timezone.utc), days)
        query = ImpactQuery(organization_id=credentials.organization_id, start_date=start, end_date=end)
        try:
            create_footprint_client(config, credentials).query_impact_data(query)
            click.echo(f"[ok]   footprint: reachable (last {days} days)")
        except FootprintError as e:
            logger.debug(f"Footprint probe failed: {e}")
            click.echo(f"[fail] footprint: {e}")
            failures += 1

    types = supported_resource_types()
    click.echo(f"[info] supported resource types ({len(types)}): {', '.join(types)}")

    if failures:
        sys.exit(1)
