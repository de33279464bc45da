"""Flat text-file persistence for registered customers."""

from __future__ import annotations

import logging
from pathlib import Path

from order_intake.config import resolve_customers_path
from order_intake.models import Customer

logger = logging.getLogger(__name__)


def format_customer_line(customer: Customer) -> str:
    """Render one store line as '<name> <id>'."""
    return f"{customer.name} {customer.customer_id}\n"


def parse_customer_line(line: str) -> Customer | None:
    """Parse '<name> <id>', returning None when the line is malformed.

    Tokens are whitespace separated and the ID is the last one, so names may
    contain spaces. A lone ID is a customer registered with an empty name.
    """
    tokens = line.strip().rsplit(None, 1)
    if not tokens:
        return None
    raw_id = tokens[-1]
    name = tokens[0] if len(tokens) == 2 else ""
    try:
        customer_id = int(raw_id)
    except ValueError:
        return None
    return Customer(name=name, customer_id=customer_id)


class CustomerStore:
    """Append-only customer file; opened and closed per operation."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path if path is not None else resolve_customers_path())

    def load(self) -> list[Customer]:
        """Read stored customers in file order.

        A missing or unreadable file yields an empty list. The first malformed
        line stops the load; entries before it are kept.
        """
        customers: list[Customer] = []
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                for lineno, line in enumerate(fh, start=1):
                    if not line.strip():
                        continue
                    customer = parse_customer_line(line)
                    if customer is None:
                        logger.warning(
                            "Stopped loading %s at line %d: %r is not '<name> <id>'",
                            self.path,
                            lineno,
                            line.rstrip("\r\n"),
                        )
                        break
                    customers.append(customer)
        except FileNotFoundError:
            logger.debug("No customer store at %s; starting empty", self.path)
            return []
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read customer store %s: %s", self.path, exc)
            return []

        logger.debug("Loaded %d customers from %s", len(customers), self.path)
        return customers

    def append(self, customer: Customer) -> bool:
        """Append one customer line; returns False when the write failed."""
        try:
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(format_customer_line(customer))
                fh.flush()
        except OSError as exc:
            logger.warning("Could not persist customer %r to %s: %s", customer.name, self.path, exc)
            return False
        return True
