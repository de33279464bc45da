"""Runtime configuration defaults for the customer store and logging."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

CUSTOMERS_PATH = "customers.txt"

CUSTOMER_ID_MIN = 1000
CUSTOMER_ID_MAX = 9999

LOG_LEVEL = "WARNING"

_CUSTOMERS_PATH_ENV = "ORDER_INTAKE_CUSTOMERS_PATH"
_LOG_LEVEL_ENV = "ORDER_INTAKE_LOG_LEVEL"


def resolve_customers_path() -> str:
    """Return the customer store path, honoring ORDER_INTAKE_CUSTOMERS_PATH."""
    env_override = os.environ.get(_CUSTOMERS_PATH_ENV, "").strip()
    return env_override or CUSTOMERS_PATH


def resolve_log_level() -> int:
    """Return the numeric log level, falling back to LOG_LEVEL on bad input."""
    name = os.environ.get(_LOG_LEVEL_ENV, "").strip().upper() or LOG_LEVEL
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.getLevelName(LOG_LEVEL)
    return level


def setup_logging(level: int | None = None) -> logging.Logger:
    """
    Configure package logging on stderr.

    Diagnostics go through a RichHandler bound to a stderr console so they
    never interleave with the order prompts on stdout.
    """
    if level is None:
        level = resolve_log_level()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        log_time_format="[%X]",
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger("order_intake")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
