"""Rows written to a brand-new products file.

IDs are fixed so a fresh catalog always starts the same way.
"""

from __future__ import annotations

SEED_PRODUCTS: list[dict[str, object]] = [
    {
        "id": 1,
        "name": "Laptop",
        "description": "High-performance laptop",
        "price": "25000.00",
        "stock": 10,
    },
    {
        "id": 2,
        "name": "Mouse",
        "description": "Wireless optical mouse",
        "price": "500.00",
        "stock": 50,
    },
    {
        "id": 3,
        "name": "Keyboard",
        "description": "Mechanical keyboard",
        "price": "1200.00",
        "stock": 30,
    },
]
