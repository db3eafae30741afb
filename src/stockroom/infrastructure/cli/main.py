import click

from stockroom.infrastructure.bootstrap import configure
from stockroom.infrastructure.cli.stock_commands import stock_apply, stock_kinds


@click.group()
def cli() -> None:
    """Stockroom — product stock levels per location"""
    configure()


@cli.group()
def stock() -> None:
    """Manage a product stock record."""


# Register subcommands
stock.add_command(stock_apply)
stock.add_command(stock_kinds)
