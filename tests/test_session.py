import io
import random

from order_intake import main as main_module
from order_intake import registry as registry_module
from order_intake.models import Customer
from order_intake.persistence import CustomerStore
from order_intake.registry import CustomerRegistry
from order_intake.session import OrderSession, SessionState


def _session(registry, catalog, console, script):
    return OrderSession(registry, catalog, console=console, stream=io.StringIO(script))


def _drained_lines(buffer):
    _, _, tail = buffer.getvalue().partition("Processing orders based on priority...\n")
    return tail.splitlines()


def test_two_customers_drain_by_total_cost(registry, catalog, console, buffer):
    session = _session(registry, catalog, console, "Bob\nBurger\nyes\nAlice\nSteak,Burger\nno\n")

    processed = session.run()

    assert session.state is SessionState.DRAINING
    assert [p.customer_name for p in processed] == ["Alice", "Bob"]
    assert _drained_lines(buffer) == [
        "Processing order for Alice: Total cost $40, Max prep time 30 mins.",
        "Processing order for Bob: Total cost $15, Max prep time 20 mins.",
    ]


def test_menu_is_shown_once_at_start(registry, catalog, console, buffer):
    _session(registry, catalog, console, "Alice\nSalad\nno\n").run()

    output = buffer.getvalue()
    assert output.count("Menu:") == 1
    assert "Steak: $25, 30 minutes to prepare" in output
    assert output.index("Menu:") < output.index("Enter customer name:")


def test_any_answer_but_no_continues(registry, catalog, console):
    script = "A\nSalad\nyes\nB\nSalad\n\nC\nSalad\nNo\nD\nSalad\nno\n"
    processed = _session(registry, catalog, console, script).run()

    assert len(processed) == 4


def test_trimmed_items_match_catalog(registry, catalog, console, buffer):
    processed = _session(registry, catalog, console, "Alice\n Steak , Burger\nno\n").run()

    assert processed[0].order.total_cost == 40
    assert "unavailable" not in buffer.getvalue()


def test_repeat_customer_gets_independent_entries(registry, catalog, console):
    processed = _session(registry, catalog, console, "Alice\nSteak\nyes\nAlice\nSalad\nno\n").run()

    assert [p.order.total_cost for p in processed] == [25, 12]
    assert len(registry) == 1


def test_end_of_input_drains_queued_orders(registry, catalog, console, buffer):
    processed = _session(registry, catalog, console, "Alice\nSteak\nyes\nBob\n").run()

    assert [p.customer_name for p in processed] == ["Alice"]
    assert "Bob" not in registry


def test_order_with_no_valid_items_is_still_processed(registry, catalog, console, buffer):
    _session(registry, catalog, console, "Carol\nUnicorn Steak\nno\n").run()

    assert "Menu item Unicorn Steak is unavailable." in buffer.getvalue()
    assert _drained_lines(buffer) == ["Processing order for Carol: Total cost $0, Max prep time 0 mins."]


def test_returning_customer_keeps_stored_id(store, catalog, console, buffer):
    store.append(Customer("Alice", 4821))
    registry = CustomerRegistry.load(store, rng=random.Random(5))

    _session(registry, catalog, console, "Alice\nBurger\nno\n").run()

    assert "Welcome back Alice! Your unique ID: 4821" in buffer.getvalue()
    assert store.load() == [Customer("Alice", 4821)]


def test_main_persists_new_customers(monkeypatch, tmp_path, capsys):
    path = tmp_path / "customers.txt"
    monkeypatch.setenv("ORDER_INTAKE_CUSTOMERS_PATH", str(path))
    monkeypatch.setattr("sys.stdin", io.StringIO("Alice\nSteak,Burger\nyes\nBob\nBurger\nno\n"))

    main_module.main()

    out = capsys.readouterr().out
    assert "Processing order for Alice: Total cost $40, Max prep time 30 mins." in out
    assert out.index("Processing order for Alice") < out.index("Processing order for Bob")
    assert [c.name for c in CustomerStore(path).load()] == ["Alice", "Bob"]


def test_exhausted_id_range_still_drains_queued_orders(monkeypatch, registry, catalog, console, buffer):
    monkeypatch.setattr(registry_module, "CUSTOMER_ID_MIN", 1000)
    monkeypatch.setattr(registry_module, "CUSTOMER_ID_MAX", 1000)
    session = _session(registry, catalog, console, "Alice\nSteak\nyes\nBob\nBurger\nno\n")

    processed = session.run()

    assert session.state is SessionState.DRAINING
    assert [p.customer_name for p in processed] == ["Alice"]
    assert "Bob" not in registry
    assert _drained_lines(buffer) == ["Processing order for Alice: Total cost $25, Max prep time 30 mins."]
