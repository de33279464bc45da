"""Priority queue deciding the order in which pending orders are processed."""

from __future__ import annotations

import heapq
import itertools
import logging

from rich.console import Console

from order_intake.models import PendingOrder, ProcessedOrder
from order_intake.registry import CustomerRegistry
from order_intake.rendering import emit, format_processing

logger = logging.getLogger(__name__)


class PriorityScheduler:
    """
    Max-priority queue of pending orders.

    Orders come out by highest total cost, then lowest max prep time, then
    lowest customer ID. Entries equal on all three keys leave in enqueue order.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[tuple[int, int, int], int, PendingOrder]] = []
        self._sequence = itertools.count()

    def enqueue(self, order: PendingOrder) -> None:
        heapq.heappush(self._heap, (order.priority_key, next(self._sequence), order))

    def peek(self) -> PendingOrder | None:
        if not self._heap:
            return None
        return self._heap[0][2]

    def pop(self) -> PendingOrder:
        if not self._heap:
            raise IndexError("pop from an empty scheduler")
        return heapq.heappop(self._heap)[2]

    def drain_all(self, registry: CustomerRegistry, console: Console) -> list[ProcessedOrder]:
        """Pop every order, printing a processing notice for each known customer."""
        processed: list[ProcessedOrder] = []
        while self._heap:
            order = self.pop()
            name = registry.find_name_by_id(order.customer_id)
            if name is None:
                logger.warning("No customer registered with ID %d; skipping order", order.customer_id)
                continue
            emit(console, format_processing(name, order))
            processed.append(ProcessedOrder(customer_name=name, order=order))
        return processed

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
