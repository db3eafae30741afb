"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing the ProductStock aggregate to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockroom.domain.model.product_stock import ProductStock


@dataclass(frozen=True)
class MovementSpec:
    """Input: one stock movement, e.g. ``reserve`` of 20 units."""

    kind: str
    amount: int


@dataclass(frozen=True)
class StockLevelDTO:
    """Output: a stock record as displayed to the user."""

    product_id: str
    location: str
    on_hand: int
    reserved: int
    available: int
    reorder_threshold: int
    max_capacity: int
    reorder_needed: bool

    @staticmethod
    def from_stock(stock: ProductStock) -> StockLevelDTO:
        return StockLevelDTO(
            product_id=stock.product_id,
            location=stock.location,
            on_hand=stock.on_hand,
            reserved=stock.reserved,
            available=stock.available,
            reorder_threshold=stock.reorder_threshold,
            max_capacity=stock.max_capacity,
            reorder_needed=stock.is_reorder_needed(),
        )
