"""Main CLI entry point for planimpact."""

import click
from .commands.plan import plan
from .commands.catalog import catalog
from .commands.doctor import doctor
from .commands.actual import actual
from .commands.badge import badge
from .commands.version import version as version_command
from .. import __version__
from ..utils.logging import level_from_verbosity, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="planimpact", message="%(prog)s version %(version)s")
@click.option('--verbose', '-v', count=True, help='Log progress to stderr (-vv for debug)')
def cli(verbose):
    """planimpact - Environmental footprint of infrastructure changes."""
    setup_logging(level_from_verbosity(verbose))


cli.add_command(plan)
cli.add_command(catalog)
cli.add_command(actual)
cli.add_command(badge)
cli.add_command(doctor)
cli.add_command(version_command)


def main():
    cli()


if __name__ == "__main__":
    main()
