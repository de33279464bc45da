"""Customer registry: name -> ID mapping backed by the customer store."""

from __future__ import annotations

import logging
import random
from typing import Iterable

from order_intake.config import CUSTOMER_ID_MAX, CUSTOMER_ID_MIN
from order_intake.models import Customer, Resolution
from order_intake.persistence import CustomerStore

logger = logging.getLogger(__name__)


class RegistryFullError(RuntimeError):
    """Raised when every customer ID in the configured range is taken."""


class CustomerRegistry:
    """In-memory customer registry that appends new customers to its store."""

    def __init__(
        self,
        customers: Iterable[Customer] = (),
        store: CustomerStore | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store
        self._rng = rng if rng is not None else random.Random()
        self._ids_by_name: dict[str, int] = {}
        self._names_by_id: dict[int, str] = {}
        for customer in customers:
            self._insert(customer)

    @classmethod
    def load(cls, store: CustomerStore, rng: random.Random | None = None) -> CustomerRegistry:
        """Build a registry from everything the store currently holds."""
        return cls(store.load(), store=store, rng=rng)

    def _insert(self, customer: Customer) -> None:
        previous_id = self._ids_by_name.get(customer.name)
        if previous_id is not None and self._names_by_id.get(previous_id) == customer.name:
            del self._names_by_id[previous_id]
            for other_name, other_id in self._ids_by_name.items():
                if other_id == previous_id and other_name != customer.name:
                    self._names_by_id[previous_id] = other_name
                    break
        self._ids_by_name[customer.name] = customer.customer_id
        # Earliest holder keeps the ID when a stored file already collides.
        self._names_by_id.setdefault(customer.customer_id, customer.name)

    def _new_id(self) -> int:
        capacity = CUSTOMER_ID_MAX - CUSTOMER_ID_MIN + 1
        if len(self._names_by_id) >= capacity:
            raise RegistryFullError(
                f"All customer IDs between {CUSTOMER_ID_MIN} and {CUSTOMER_ID_MAX} are assigned"
            )
        while True:
            candidate = self._rng.randint(CUSTOMER_ID_MIN, CUSTOMER_ID_MAX)
            if candidate not in self._names_by_id:
                return candidate
            logger.debug("Customer ID %d already assigned; drawing again", candidate)

    def resolve(self, name: str) -> Resolution:
        """Return the customer's ID, registering and persisting new names."""
        existing = self._ids_by_name.get(name)
        if existing is not None:
            return Resolution(Customer(name, existing), is_new=False)

        customer = Customer(name, self._new_id())
        self._insert(customer)
        if self.store is not None:
            self.store.append(customer)
        logger.info("Registered customer %r with ID %d", name, customer.customer_id)
        return Resolution(customer, is_new=True)

    def find_name_by_id(self, customer_id: int) -> str | None:
        return self._names_by_id.get(customer_id)

    def __contains__(self, name: object) -> bool:
        return name in self._ids_by_name

    def __len__(self) -> int:
        return len(self._ids_by_name)
