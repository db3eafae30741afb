"""ProductStock aggregate — stock level of one product at one location.

Tracks the physical units on hand, how many of them are promised to
outstanding orders, and the threshold below which the location should
reorder.
"""

from __future__ import annotations

from stockroom.domain.exceptions import InvalidArgumentError, InvalidStateError


class ProductStock:
    """Aggregate root for a single product/location stock record.

    Invariants:
    - ``0 <= on_hand <= max_capacity``
    - ``reserved >= 0``
    - ``reorder_threshold >= 0``
    - ``product_id`` and ``location`` are never blank

    ``reserved <= on_hand`` is not enforced here; it is only checked
    when shipping. ``remove_damaged`` can leave more units reserved
    than are physically present.
    """

    def __init__(
        self,
        product_id: str,
        location: str,
        initial_on_hand: int,
        reorder_threshold: int,
        max_capacity: int,
    ) -> None:
        if _is_blank(product_id):
            raise InvalidArgumentError("productId must not be null or blank")
        if _is_blank(location):
            raise InvalidArgumentError("location must not be null or blank")
        if initial_on_hand < 0:
            raise InvalidArgumentError("initialOnHand must be >= 0")
        if reorder_threshold < 0:
            raise InvalidArgumentError("reorderThreshold must be >= 0")
        if max_capacity <= 0:
            raise InvalidArgumentError("maxCapacity must be > 0")
        if initial_on_hand > max_capacity:
            raise InvalidArgumentError("initialOnHand exceeds maxCapacity")

        self._product_id = product_id
        self._location = location
        self._on_hand = initial_on_hand
        self._reserved = 0
        self._reorder_threshold = reorder_threshold
        self._max_capacity = max_capacity

    # --- Read-only state ------------------------------------------------------

    @property
    def product_id(self) -> str:
        return self._product_id

    @property
    def location(self) -> str:
        return self._location

    @property
    def on_hand(self) -> int:
        return self._on_hand

    @property
    def reserved(self) -> int:
        return self._reserved

    @property
    def reorder_threshold(self) -> int:
        return self._reorder_threshold

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    @property
    def available(self) -> int:
        return self._on_hand - self._reserved

    # --- Stock movements ------------------------------------------------------

    def add_stock(self, amount: int) -> None:
        """Receive ``amount`` units into the location."""
        if amount <= 0:
            raise InvalidArgumentError("Amount to add must be positive")
        if self._on_hand + amount > self._max_capacity:
            raise InvalidStateError("Cannot add stock beyond maxCapacity")
        self._on_hand += amount

    def reserve(self, amount: int) -> None:
        """Commit available units to an outstanding order."""
        if amount <= 0:
            raise InvalidArgumentError("Amount to reserve must be positive")
        if amount > self.available:
            raise InvalidStateError("Insufficient available stock to reserve")
        self._reserved += amount

    def release_reservation(self, amount: int) -> None:
        """Return reserved units to the available pool (e.g. on cancellation)."""
        if amount <= 0:
            raise InvalidArgumentError("Amount to release must be positive")
        if amount > self._reserved:
            raise InvalidStateError("Cannot release more than reserved")
        self._reserved -= amount

    def ship_reserved(self, amount: int) -> None:
        """Ship previously reserved units.

        Both ``on_hand`` and ``reserved`` decrease by ``amount``. The
        on-hand check is independent of the reserved check because a
        record can hold more reservations than physical units.
        """
        if amount <= 0:
            raise InvalidArgumentError("Amount to ship must be positive")
        if amount > self._reserved:
            raise InvalidStateError("Cannot ship more than reserved")
        if amount > self._on_hand:
            raise InvalidStateError("On-hand quantity is not enough to ship")
        self._on_hand -= amount
        self._reserved -= amount

    def remove_damaged(self, amount: int) -> None:
        """Write off damaged units.

        Reservations are left untouched, so the record may end up with
        ``reserved > on_hand`` until the next shipment is attempted.
        """
        if amount <= 0:
            raise InvalidArgumentError("Amount to remove must be positive")
        if amount > self._on_hand:
            raise InvalidStateError("Cannot remove more than on-hand quantity")
        self._on_hand -= amount

    # --- Reorder policy -------------------------------------------------------

    def is_reorder_needed(self) -> bool:
        return self.available <= self._reorder_threshold

    def update_reorder_threshold(self, new_threshold: int) -> None:
        if new_threshold < 0:
            raise InvalidArgumentError("reorderThreshold must be >= 0")
        if new_threshold > self._max_capacity:
            raise InvalidArgumentError("reorderThreshold cannot exceed maxCapacity")
        self._reorder_threshold = new_threshold

    def update_max_capacity(self, new_capacity: int) -> None:
        """Resize the location, pulling the threshold down if it no longer fits."""
        if new_capacity <= 0:
            raise InvalidArgumentError("maxCapacity must be > 0")
        if new_capacity < self._on_hand:
            raise InvalidStateError("New maxCapacity is less than current onHand")
        self._max_capacity = new_capacity
        if self._reorder_threshold > self._max_capacity:
            self._reorder_threshold = self._max_capacity

    # --- Display --------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"ProductStock(product_id={self._product_id!r}, "
            f"location={self._location!r}, on_hand={self._on_hand}, "
            f"reserved={self._reserved}, "
            f"reorder_threshold={self._reorder_threshold}, "
            f"max_capacity={self._max_capacity})"
        )


def _is_blank(value: str | None) -> bool:
    return not isinstance(value, str) or not value.strip()
