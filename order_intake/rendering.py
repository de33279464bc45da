"""Console text for menu, order and processing notices."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from order_intake.models import MenuItem, PendingOrder, Resolution

CUSTOMER_NAME_PROMPT = "Enter customer name: "
ITEMS_PROMPT = "Enter items (comma separated): "
CONTINUE_PROMPT = "Continue? (yes/no): "
DRAIN_BANNER = "Processing orders based on priority..."


def price_style(price: int) -> str:
    """Return a consistent style for dollar amounts."""
    if price >= 25:
        return "bold #e0a030"
    return "#5fbf72"


def format_menu_line(item: MenuItem) -> Text:
    """Render one startup menu line with price and prep time."""
    text = Text()
    text.append(item.name, style="bold")
    text.append(": ")
    text.append(f"${item.price}", style=price_style(item.price))
    text.append(f", {item.prep_time_minutes} minutes to prepare")
    return text


def format_welcome(resolution: Resolution) -> Text:
    """Render the new or returning customer greeting with its ID."""
    customer = resolution.customer
    text = Text()
    if resolution.is_new:
        text.append(f"Welcome new customer {customer.name}! ", style="bold")
    else:
        text.append(f"Welcome back {customer.name}! ", style="bold")
    text.append(f"Your unique ID: {customer.customer_id}")
    return text


def format_unavailable(item_name: str) -> Text:
    """Render the notice for an item missing from the menu."""
    return Text(f"Menu item {item_name} is unavailable.", style="yellow")


def format_item_placed(customer_name: str, item: MenuItem) -> Text:
    """Render the confirmation for one ordered item."""
    text = Text(f"Order placed for customer {customer_name}: {item.name} (")
    text.append(f"${item.price}", style=price_style(item.price))
    text.append(f", {item.prep_time_minutes} mins).")
    return text


def format_processing(customer_name: str, order: PendingOrder) -> Text:
    """Render the processing notice for a drained order."""
    text = Text(f"Processing order for {customer_name}: Total cost ")
    text.append(f"${order.total_cost}", style=price_style(order.total_cost))
    text.append(f", Max prep time {order.max_prep_time} mins.")
    return text


def emit(console: Console, text: Text | str = "") -> None:
    """Print one protocol line without markup, highlighting or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def show_menu(console: Console, items: tuple[MenuItem, ...] | list[MenuItem]) -> None:
    """Print the menu header followed by every item."""
    emit(console)
    emit(console, Text("Menu:", style="bold underline"))
    for item in items:
        emit(console, format_menu_line(item))
