from __future__ import annotations

from ventas.domain.entities.customer import Customer
from ventas.domain.entities.product import Product


def filter_customers(customers: list[Customer], term: str | None) -> list[Customer]:
    """Case-insensitive match on name or e-mail. An empty term matches everyone."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(customers)
    return [
        c
        for c in customers
        if needle in c.name.lower() or (c.email is not None and needle in c.email.lower())
    ]


def filter_products(products: list[Product], term: str | None) -> list[Product]:
    needle = (term or "").strip().lower()
    if not needle:
        return list(products)
    return [p for p in products if needle in p.name.lower()]
