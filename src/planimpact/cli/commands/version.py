"""Version command - show planimpact version."""

import click
from ... import __version__


@click.command()
def version():
    """Show planimpact version."""
    click.echo(f"planimpact version {__version__}")
