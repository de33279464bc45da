"""Entry point for the order-intake console tool."""

from __future__ import annotations

import logging

from rich.console import Console

from order_intake.config import setup_logging
from order_intake.data import DEFAULT_MENU
from order_intake.persistence import CustomerStore
from order_intake.registry import CustomerRegistry
from order_intake.session import OrderSession

logger = logging.getLogger(__name__)


def main() -> None:
    """Run one interactive order-intake session."""
    setup_logging()
    store = CustomerStore()
    registry = CustomerRegistry.load(store)
    logger.info("Using customer store %s (%d known customers)", store.path, len(registry))
    OrderSession(registry, DEFAULT_MENU, console=Console()).run()


if __name__ == "__main__":
    main()
