"""Application service: Apply Movements use case.

Builds a ProductStock record from its initial levels and replays a
sequence of stock movements against it, in order.
"""

from __future__ import annotations

import structlog

from stockroom.application.dto import MovementSpec, StockLevelDTO
from stockroom.domain.exceptions import InvalidArgumentError
from stockroom.domain.model.product_stock import ProductStock

logger = structlog.get_logger(__name__)

# Movement kind -> ProductStock operation name
MOVEMENT_OPERATIONS: dict[str, str] = {
    "add": "add_stock",
    "reserve": "reserve",
    "release": "release_reservation",
    "ship": "ship_reserved",
    "damage": "remove_damaged",
    "threshold": "update_reorder_threshold",
    "capacity": "update_max_capacity",
}


class ApplyMovementsHandler:

    def handle(
        self,
        product_id: str,
        location: str,
        on_hand: int,
        reorder_threshold: int,
        max_capacity: int,
        movements: list[MovementSpec],
    ) -> StockLevelDTO:
        """Create a stock record and apply every movement to it.

        Movement kinds are validated before any movement is applied. A
        movement rejected by the record propagates its domain exception
        unchanged.
        """
        for movement in movements:
            self._operation_for(movement.kind)

        stock = ProductStock(
            product_id, location, on_hand, reorder_threshold, max_capacity
        )
        log = logger.bind(product_id=product_id, location=location)

        for movement in movements:
            self.apply(stock, movement)
            log.info(
                "Applied stock movement",
                kind=movement.kind,
                amount=movement.amount,
                on_hand=stock.on_hand,
                reserved=stock.reserved,
            )

        if stock.is_reorder_needed():
            log.warning(
                "Stock at or below reorder threshold",
                available=stock.available,
                reorder_threshold=stock.reorder_threshold,
            )

        return StockLevelDTO.from_stock(stock)

    def apply(self, stock: ProductStock, movement: MovementSpec) -> None:
        """Dispatch a single movement to the matching ProductStock operation."""
        operation = getattr(stock, self._operation_for(movement.kind))
        operation(movement.amount)

    @staticmethod
    def _operation_for(kind: str) -> str:
        try:
            return MOVEMENT_OPERATIONS[kind.lower()]
        except KeyError:
            raise InvalidArgumentError(f"Unknown movement kind: '{kind}'") from None
