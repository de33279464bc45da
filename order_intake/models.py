"""Domain models for order-intake."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MenuItem:
    """A priced menu item with its preparation time."""

    name: str
    price: int
    prep_time_minutes: int


@dataclass(frozen=True)
class Customer:
    """A registered customer and the ID assigned on first sight."""

    name: str
    customer_id: int


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a customer name against the registry."""

    customer: Customer
    is_new: bool


@dataclass(frozen=True)
class PendingOrder:
    """Accumulated cost and prep time of one order-taking call."""

    customer_id: int
    total_cost: int = 0
    max_prep_time: int = 0

    @property
    def priority_key(self) -> tuple[int, int, int]:
        """Sort key: smaller keys are processed first."""
        return (-self.total_cost, self.max_prep_time, self.customer_id)


@dataclass(frozen=True)
class ProcessedOrder:
    """A drained order together with the name it was resolved to."""

    customer_name: str
    order: PendingOrder
