from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any

from ventas.application.exceptions import CartFrozenError, ValidationError
from ventas.domain.entities.money import try_parse_amount
from ventas.domain.entities.product import Product

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLine:
    product_key: str
    unit_price: Any  # as received; parsed on every total
    quantity: int
    display_name: str
    product_id: Any = None

    @property
    def parsed_price(self) -> Decimal | None:
        return try_parse_amount(self.unit_price)


@dataclass(frozen=True)
class CartTotal:
    total: Decimal
    excluded_keys: tuple[str, ...] = ()


class Cart:
    """
    Lines of the order being built, keyed by product key in insertion order.
    Quantities never drop below 1; a line only disappears through remove_line
    or clear. The total is derived from the lines on every call.
    """

    def __init__(self) -> None:
        self._lines: dict[str, CartLine] = {}
        self._frozen = False

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def get(self, product_key: str) -> CartLine | None:
        return self._lines.get(product_key)

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_key: object) -> bool:
        return product_key in self._lines

    def add_line(self, product: Product, qty: int = 1) -> CartLine:
        self._ensure_mutable()
        key = (product.key or "").strip()
        if not key:
            raise ValidationError("Product has no catalog key and cannot be added to an order")
        if qty < 1:
            raise ValidationError(f"Quantity must be at least 1, got {qty}")

        existing = self._lines.get(key)
        if existing is not None:
            line = replace(existing, quantity=existing.quantity + qty)
        else:
            line = CartLine(
                product_key=key,
                unit_price=product.price,
                quantity=qty,
                display_name=product.name,
                product_id=product.id if product.id is not None else key,
            )
        self._lines[key] = line
        logger.debug("Cart line added", extra={"product_key": key, "quantity": line.quantity})
        return line

    def update_quantity(self, product_key: str, delta: int) -> CartLine:
        self._ensure_mutable()
        existing = self._lines.get(product_key)
        if existing is None:
            raise ValidationError(f"Product {product_key} is not in the cart")
        line = replace(existing, quantity=max(1, existing.quantity + delta))
        self._lines[product_key] = line
        return line

    def remove_line(self, product_key: str) -> CartLine | None:
        self._ensure_mutable()
        return self._lines.pop(product_key, None)

    def clear(self) -> None:
        self._ensure_mutable()
        self._lines.clear()

    def summarize(self) -> CartTotal:
        total = Decimal(0)
        excluded: list[str] = []
        for line in self._lines.values():
            price = line.parsed_price
            if price is None:
                excluded.append(line.product_key)
                logger.warning(
                    "Cart line excluded from total: unparseable price",
                    extra={"product_key": line.product_key, "reason": repr(line.unit_price)},
                )
                continue
            total += price * line.quantity
        return CartTotal(total=total, excluded_keys=tuple(excluded))

    def total(self) -> Decimal:
        return self.summarize().total

    def unparseable_keys(self) -> list[str]:
        return [line.product_key for line in self._lines.values() if line.parsed_price is None]

    @contextmanager
    def frozen(self) -> Iterator["Cart"]:
        if self._frozen:
            raise CartFrozenError("An order is already being submitted from this cart")
        self._frozen = True
        try:
            yield self
        finally:
            self._frozen = False

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise CartFrozenError("The cart cannot change while the order is being submitted")
