"""Badge command - Shields endpoint JSON from a saved estimate report."""

import sys
import click
from ...report import build_badge, read_report_json, write_badge
from ...utils.errors import PlanImpactError
from ..utils import format_error


@click.command()
@click.option('--input', 'input_path', required=True, type=click.Path(),
              help='Report written by plan --format json')
@click.option('--output', '-o', 'output_path', required=True, type=click.Path(),
              help='Badge JSON to write')
@click.option('--quiet', is_flag=True, help='Suppress progress messages')
def badge(input_path, output_path, quiet):
    """
    Write a Shields.io endpoint badge for an estimate report.
    
    Example: planimpact plan --file plan.json --format json -o impact.json
             planimpact badge --input impact.json --output badge.json
    """
    try:
        report_data = read_report_json(input_path)
        write_badge(output_path, build_badge(report_data))
    except PlanImpactError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    if not quiet:
        click.echo(f"Badge saved to: {output_path}", err=True)
