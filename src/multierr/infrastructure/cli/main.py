import click

from multierr.infrastructure.bootstrap import configure_logging
from multierr.infrastructure.cli.error_commands import errors_compare, errors_render


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """multierr — combine several errors into one"""
    try:
        configure_logging(verbose)
    except ValueError as exc:
        raise click.ClickException(str(exc))


# Register subcommands
cli.add_command(errors_render)
cli.add_command(errors_compare)
