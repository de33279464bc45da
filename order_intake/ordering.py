"""Order accumulation for a single customer visit."""

from __future__ import annotations

import logging
from typing import Iterable

from rich.console import Console

from order_intake.data import MenuCatalog
from order_intake.models import PendingOrder
from order_intake.registry import CustomerRegistry
from order_intake.rendering import emit, format_item_placed, format_unavailable, format_welcome

logger = logging.getLogger(__name__)


def split_items(line: str) -> list[str]:
    """Split a comma separated item list, trimming each entry and dropping blanks."""
    return [token.strip() for token in line.split(",") if token.strip()]


def take_order(
    customer_name: str,
    items: Iterable[str],
    *,
    registry: CustomerRegistry,
    catalog: MenuCatalog,
    console: Console,
) -> PendingOrder:
    """Resolve the customer and total up every known item they ordered.

    Unknown items print an unavailable notice and are skipped. An order is
    returned even when nothing valid was ordered.
    """
    resolution = registry.resolve(customer_name)
    emit(console, format_welcome(resolution))

    total_cost = 0
    max_prep_time = 0
    for item_name in items:
        item = catalog.lookup(item_name)
        if item is None:
            logger.debug("Skipping unknown menu item %r for %r", item_name, customer_name)
            emit(console, format_unavailable(item_name))
            continue

        total_cost += item.price
        max_prep_time = max(max_prep_time, item.prep_time_minutes)
        emit(console, format_item_placed(customer_name, item))

    return PendingOrder(
        customer_id=resolution.customer.customer_id,
        total_cost=total_cost,
        max_prep_time=max_prep_time,
    )
