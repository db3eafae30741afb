"""CLI commands for the ProductStock aggregate."""

from __future__ import annotations

import click

from stockroom.application.apply_movements import MOVEMENT_OPERATIONS
from stockroom.application.dto import MovementSpec
from stockroom.domain.exceptions import DomainException
from stockroom.infrastructure.bootstrap import apply_movements_handler


def _parse_movements(raw: tuple[str, ...]) -> list[MovementSpec]:
    """Parse ('reserve:20', 'ship:5') into a MovementSpec list."""
    specs: list[MovementSpec] = []
    for token in raw:
        token = token.strip()
        if ":" not in token:
            raise click.BadParameter(
                f"Invalid movement format '{token}'. Expected 'kind:amount'."
            )
        kind, amount_str = token.rsplit(":", 1)
        try:
            amount = int(amount_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid amount '{amount_str}' for movement '{kind}'."
            )
        specs.append(MovementSpec(kind=kind.strip(), amount=amount))
    return specs


@click.command("apply")
@click.option("--product", required=True, help="Product ID.")
@click.option("--location", required=True, help="Stock location.")
@click.option("--on-hand", "on_hand", required=True, type=int, help="Initial units on hand.")
@click.option("--threshold", required=True, type=int, help="Reorder threshold.")
@click.option("--capacity", required=True, type=int, help="Maximum capacity.")
@click.argument("movements", nargs=-1)
def stock_apply(
    product: str,
    location: str,
    on_hand: int,
    threshold: int,
    capacity: int,
    movements: tuple[str, ...],
) -> None:
    """Apply movements such as 'reserve:20 ship:5' to a stock record."""
    specs = _parse_movements(movements)
    handler = apply_movements_handler()

    try:
        dto = handler.handle(
            product_id=product,
            location=location,
            on_hand=on_hand,
            reorder_threshold=threshold,
            max_capacity=capacity,
            movements=specs,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.product_id} @ {dto.location}")
    click.echo()
    click.echo(
        f"  {'On hand':>8} {'Reserved':>10} {'Available':>10} {'Threshold':>10} {'Capacity':>10}"
    )
    click.echo(f"  {'-'*52}")
    click.echo(
        f"  {dto.on_hand:>8} {dto.reserved:>10} {dto.available:>10} "
        f"{dto.reorder_threshold:>10} {dto.max_capacity:>10}"
    )
    click.echo()
    click.echo(f"Reorder needed: {'yes' if dto.reorder_needed else 'no'}")


@click.command("kinds")
def stock_kinds() -> None:
    """List the accepted movement kinds."""
    click.echo(f"{'Kind':<12} {'Operation':<26}")
    click.echo("-" * 38)
    for kind, operation in MOVEMENT_OPERATIONS.items():
        click.echo(f"{kind:<12} {operation:<26}")
