import io
import random

import pytest
from rich.console import Console

from order_intake.data import MenuCatalog
from order_intake.persistence import CustomerStore
from order_intake.registry import CustomerRegistry


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def console(buffer):
    return Console(file=buffer, width=200, color_system=None, force_terminal=False)


@pytest.fixture
def catalog():
    return MenuCatalog.from_raw({"Steak": (25, 30), "Burger": (15, 20), "Salad": (12, 10)})


@pytest.fixture
def store(tmp_path):
    return CustomerStore(tmp_path / "customers.txt")


@pytest.fixture
def registry(store):
    return CustomerRegistry.load(store, rng=random.Random(0))
