"""Editable static menu configuration."""

from __future__ import annotations

# name -> (price in dollars, preparation time in minutes)
MENU_ITEMS: dict[str, tuple[int, int]] = {
    "Steak": (25, 30),
    "Burger": (15, 20),
    "Salad": (12, 10),
    "Lobster": (30, 40),
    "Pizza": (20, 25),
    "Pasta": (18, 20),
    "Sushi": (22, 15),
    "Tacos": (10, 10),
    "Soup": (8, 5),
    "Steak Fries": (12, 15),
    "Ice Cream": (5, 5),
    "Chicken Wings": (18, 20),
    "Caesar Salad": (14, 12),
    "Grilled Cheese": (10, 8),
    "Spaghetti": (16, 25),
    "Spring Rolls": (9, 10),
    "BBQ Ribs": (28, 35),
}
