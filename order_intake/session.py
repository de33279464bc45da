"""Interactive order-taking loop."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TextIO

from rich.console import Console

from order_intake.data import MenuCatalog
from order_intake.models import PendingOrder, ProcessedOrder
from order_intake.ordering import split_items, take_order
from order_intake.registry import CustomerRegistry, RegistryFullError
from order_intake.rendering import (
    CONTINUE_PROMPT,
    CUSTOMER_NAME_PROMPT,
    DRAIN_BANNER,
    ITEMS_PROMPT,
    emit,
    show_menu,
)
from order_intake.scheduler import PriorityScheduler

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    TAKING_ORDERS = "taking_orders"
    DRAINING = "draining"


class _EndOfInput(Exception):
    pass


class OrderSession:
    """Prompts for customers and items until told to stop, then drains the queue."""

    def __init__(
        self,
        registry: CustomerRegistry,
        catalog: MenuCatalog,
        console: Console | None = None,
        stream: TextIO | None = None,
        scheduler: PriorityScheduler | None = None,
    ) -> None:
        self.registry = registry
        self.catalog = catalog
        self.console = console if console is not None else Console()
        # Explicit input stream; None reads the terminal through input().
        self.stream = stream
        self.scheduler = scheduler if scheduler is not None else PriorityScheduler()
        self.state = SessionState.TAKING_ORDERS

    def _read_line(self, prompt: str) -> str:
        try:
            raw = self.console.input(prompt, markup=False, emoji=False, stream=self.stream)
        except EOFError:
            raise _EndOfInput from None
        if self.stream is not None and raw == "":
            raise _EndOfInput
        return raw.rstrip("\r\n")

    def show_menu(self) -> None:
        show_menu(self.console, self.catalog.list_all())

    def take_one(self) -> PendingOrder:
        """Prompt for one customer's order and queue it."""
        emit(self.console)
        customer_name = self._read_line(CUSTOMER_NAME_PROMPT).strip()
        items = split_items(self._read_line(ITEMS_PROMPT))
        order = take_order(
            customer_name,
            items,
            registry=self.registry,
            catalog=self.catalog,
            console=self.console,
        )
        self.scheduler.enqueue(order)
        logger.debug(
            "Queued order for ID %d: $%d, %d mins",
            order.customer_id,
            order.total_cost,
            order.max_prep_time,
        )
        return order

    def take_orders(self) -> None:
        """Loop until the operator answers 'no' or input runs out."""
        while self.state is SessionState.TAKING_ORDERS:
            try:
                self.take_one()
                emit(self.console)
                decision = self._read_line(CONTINUE_PROMPT).strip()
            except _EndOfInput:
                logger.info("Input closed; processing queued orders")
                emit(self.console)
                decision = "no"
            except RegistryFullError as exc:
                logger.error("Cannot register another customer: %s", exc)
                emit(self.console)
                decision = "no"
            if decision == "no":
                self.state = SessionState.DRAINING

    def drain(self) -> list[ProcessedOrder]:
        self.state = SessionState.DRAINING
        emit(self.console)
        emit(self.console, DRAIN_BANNER)
        return self.scheduler.drain_all(self.registry, self.console)

    def run(self) -> list[ProcessedOrder]:
        """Show the menu, take orders, then process them by priority."""
        self.show_menu()
        self.take_orders()
        return self.drain()
