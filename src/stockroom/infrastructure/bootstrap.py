"""Composition root — wires configuration, logging and use cases together.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from stockroom.application.apply_movements import ApplyMovementsHandler
from stockroom.infrastructure.config import settings
from stockroom.infrastructure.logging import configure_logging


def configure() -> None:
    configure_logging(settings)


def apply_movements_handler() -> ApplyMovementsHandler:
    return ApplyMovementsHandler()
