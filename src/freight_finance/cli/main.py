#!/usr/bin/env python3
"""
Main CLI Entry Point for Freight Finance

Provides a unified command-line interface for invoice term planning and
booking profitability.
"""

import logging
import os

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Freight Finance - Invoice Terms & Profitability

    Splits job order revenue into invoice terms, tracks when each term can
    be invoiced, and reports cost/revenue profitability per booking.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["FREIGHT_FINANCE_ENV"] = config_env
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    config_obj = get_config()
    if debug:
        # basicConfig is a no-op once logging is configured, so force the level
        logging.getLogger("freight_finance").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config_obj

    if verbose:
        click.echo(f"Environment: {config_obj.environment.value}")
        click.echo(f"Base currency: {config_obj.invoicing.base_currency}")
    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from freight_finance import __version__

    click.echo(f"Freight Finance v{__version__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Base Currency: {config_obj.invoicing.base_currency}")
    click.echo(f"  Default Tax Rate: {config_obj.invoicing.default_tax_rate:g}%")
    click.echo(f"  Percentage Tolerance: {config_obj.invoicing.percentage_tolerance:g}")
    click.echo(f"  Margin Target: {config_obj.profitability.margin_target:g}%")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


# Import command groups
from .profit import profit  # noqa: E402
from .terms import terms  # noqa: E402

main.add_command(terms)
main.add_command(profit)


if __name__ == "__main__":
    main()
