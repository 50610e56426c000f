"""CLI commands for combining and comparing errors."""

from __future__ import annotations

import logging

import click

from multierr.application.dto import ErrorSpec
from multierr.domain.exceptions import DomainException
from multierr.infrastructure.bootstrap import compare_handler, render_handler

logger = logging.getLogger(__name__)


def _parse_specs(raw_specs: tuple[str, ...], param: str) -> list[ErrorSpec]:
    """Parse ('Kind:message', ...) into an ErrorSpec list."""
    specs: list[ErrorSpec] = []
    for raw in raw_specs:
        try:
            specs.append(ErrorSpec.parse(raw))
        except DomainException as exc:
            raise click.BadParameter(str(exc), param_hint=param)
    return specs


@click.command("render")
@click.argument("errors", nargs=-1)
@click.option("--list", "as_list", is_flag=True, default=False, help="Also list each error.")
def errors_render(errors: tuple[str, ...], as_list: bool) -> None:
    """Combine ERRORS ('Kind:message') into a single message."""
    specs = _parse_specs(errors, "ERRORS")
    handler = render_handler()

    try:
        dto = handler.handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        click.echo("No errors.")
        return

    click.echo(dto.message)
    if as_list:
        click.echo()
        for i, message in enumerate(dto.errors):
            click.echo(f"  {i:>3}  {message}")
        click.echo(f"  {dto.count} error(s)")


@click.command("compare")
@click.option("--left", "left", multiple=True, help="Error on the left side as 'Kind:message'.")
@click.option("--right", "right", multiple=True, help="Error on the right side as 'Kind:message'.")
@click.pass_context
def errors_compare(ctx: click.Context, left: tuple[str, ...], right: tuple[str, ...]) -> None:
    """Check whether two sets of errors are the same, in any order.

    Exits with status 0 when similar and 1 otherwise.
    """
    left_specs = _parse_specs(left, "--left")
    right_specs = _parse_specs(right, "--right")
    handler = compare_handler()

    try:
        dto = handler.handle(left_specs, right_specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto.similar:
        click.echo("similar")
        return

    logger.info("Left has %d errors, right has %d", dto.left_count, dto.right_count)
    click.echo("not similar")
    ctx.exit(1)
